"""A single self-contained game: board, pieces, players and turn state."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from ..config import GameConfig
from .board import Board, Cell
from .pieces import PLAYER_ONE, PLAYER_TWO, Piece, PieceSet, Player, PlayerId
from .rules import MoveOutcome, SelectionResult, TurnController


class GameSession:
    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = (config or GameConfig()).validate()
        self.board = Board()
        self.pieces = PieceSet.from_layout(self.board, self.config.layout, health=self.config.starting_health)
        # Rosters reference the same piece objects as the piece set
        self.players: Dict[PlayerId, Player] = {
            turn: Player(turn=turn, pieces=self.pieces.for_player(turn)) for turn in (PLAYER_ONE, PLAYER_TWO)
        }
        self.controller = TurnController(self.board, self.pieces, first=self.config.first_player)

    @property
    def turn(self) -> PlayerId:
        return self.controller.turn

    @property
    def clickable_pieces(self) -> List[Piece]:
        return list(self.controller.clickable_pieces)

    @property
    def forced_pieces(self) -> List[Piece]:
        return list(self.controller.forced_pieces)

    def cell_at(self, i: int, j: int) -> Optional[Cell]:
        return self.board.cell_at(i, j)

    def on_cell_selected(self, i: int, j: int) -> SelectionResult:
        return self.controller.on_cell_selected(self.board.cell_at(i, j))

    def on_option_chosen(self, i: int, j: int) -> MoveOutcome:
        return self.controller.on_option_chosen(self.board.cell_at(i, j))

    def click(self, i: int, j: int) -> Union[SelectionResult, MoveOutcome]:
        return self.controller.click(self.board.cell_at(i, j))

    def roster(self, turn: PlayerId) -> List[Piece]:
        return list(self.players[turn].pieces)
