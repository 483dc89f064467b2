"""Turn enforcement, mandatory capture and capture chaining."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .board import Board, Cell
from .moves import Option, capture_options, legal_options
from .pieces import PLAYER_ONE, Piece, PieceSet, PlayerId, opponent


LOG = logging.getLogger("junction_checkers.rules")


class RulesError(Exception):
    code = "rules_error"


class InvalidSelection(RulesError):
    code = "invalid_selection"


class InvalidDestination(RulesError):
    code = "invalid_destination"


class Phase(Enum):
    IDLE = "idle"
    SELECTED = "selected"
    CHAIN_CAPTURE = "chain_capture"
    TURN_ENDING = "turn_ending"
    GAME_OVER = "game_over"


@dataclass
class SelectionResult:
    selected: Optional[Piece] = None
    options: List[Option] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class MoveOutcome:
    legal: bool
    moved: Optional[Piece] = None
    captured: Optional[Piece] = None
    turn_ended: bool = False
    game_over: bool = False
    winner: Optional[PlayerId] = None
    error: Optional[str] = None


class TurnController:
    """Drives one game's turn lifecycle over a board and its pieces.

    ``forced_pieces`` non-empty means some piece of the side to move can
    capture; ``clickable_pieces`` is then exactly ``forced_pieces`` and
    every option offered is a capture.  During a capture chain the chaining
    piece is the only clickable and forced piece until it can jump no more.
    """

    def __init__(self, board: Board, pieces: PieceSet, first: PlayerId = PLAYER_ONE) -> None:
        self.board = board
        self.pieces = pieces
        self.turn: PlayerId = first
        self.phase = Phase.IDLE
        self.selected_piece: Optional[Piece] = None
        self.options: List[Option] = []
        self.clickable_pieces: List[Piece] = []
        self.forced_pieces: List[Piece] = []
        self.chain_piece: Optional[Piece] = None
        self.winner: Optional[PlayerId] = None
        self._begin_turn()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def options_for(self, piece: Piece) -> List[Option]:
        # Pure query; restricted to captures whenever a capture is mandatory
        return legal_options(self.board, self.pieces, piece, forced=bool(self.forced_pieces))

    # ------------------------------------------------------------------
    # Strict API
    # ------------------------------------------------------------------

    def select(self, cell: Optional[Cell]) -> List[Option]:
        if self.game_over:
            raise InvalidSelection("game is over")

        piece = self.pieces.piece_at(cell)
        if piece is None:
            raise InvalidSelection(f"no piece at {cell!r}")
        if piece not in self.clickable_pieces:
            raise InvalidSelection(f"{piece!r} cannot move this turn")

        options = self.options_for(piece)
        if not options:
            raise InvalidSelection(f"{piece!r} has no options")

        self.selected_piece = piece
        self.options = options
        if self.chain_piece is None:
            self.phase = Phase.SELECTED
        return options

    def deselect(self) -> None:
        self.selected_piece = None
        self.options = []
        if self.game_over:
            return
        self.phase = Phase.CHAIN_CAPTURE if self.chain_piece is not None else Phase.IDLE

    def move(self, cell: Optional[Cell]) -> MoveOutcome:
        if self.game_over:
            raise InvalidDestination("game is over")
        piece = self.selected_piece
        if piece is None:
            raise InvalidDestination("no piece selected")

        option = next((opt for opt in self.options if opt.cell is cell), None)
        if option is None or cell is None:
            raise InvalidDestination(f"{cell!r} is not an option for {piece!r}")

        self.pieces.move_piece(piece, cell)

        captured: Optional[Piece] = None
        if option.captures(piece.player):
            captured = option.piece
            assert captured is not None
            self.pieces.capture(captured)
            LOG.info("Player %s captured %r landing on %s", piece.player, captured, cell.coord)

            follow_up = capture_options(self.board, self.pieces, piece)
            if follow_up:
                self._continue_chain(piece, follow_up)
                return MoveOutcome(legal=True, moved=piece, captured=captured)

        self._end_turn()
        return MoveOutcome(
            legal=True,
            moved=piece,
            captured=captured,
            turn_ended=True,
            game_over=self.game_over,
            winner=self.winner,
        )

    # ------------------------------------------------------------------
    # Event API: malformed input degrades to a no-op or a deselect
    # ------------------------------------------------------------------

    def on_cell_selected(self, cell: Optional[Cell]) -> SelectionResult:
        try:
            options = self.select(cell)
        except InvalidSelection as exc:
            LOG.debug("Selection rejected: %s", exc)
            code = "game_over" if self.game_over else exc.code
            return SelectionResult(selected=self.selected_piece, options=list(self.options), error=code)
        return SelectionResult(selected=self.selected_piece, options=list(options))

    def on_option_chosen(self, cell: Optional[Cell]) -> MoveOutcome:
        try:
            return self.move(cell)
        except InvalidDestination as exc:
            LOG.debug("Destination rejected: %s", exc)
            code = "game_over" if self.game_over else exc.code
            self.deselect()
            return MoveOutcome(legal=False, game_over=self.game_over, winner=self.winner, error=code)

    def click(self, cell: Optional[Cell]) -> Union[SelectionResult, MoveOutcome]:
        """Route a clicked cell: choose an option when a piece is selected, else select."""

        if self.selected_piece is not None:
            return self.on_option_chosen(cell)
        return self.on_cell_selected(cell)

    # ------------------------------------------------------------------
    # Turn lifecycle
    # ------------------------------------------------------------------

    def _continue_chain(self, piece: Piece, follow_up: List[Option]) -> None:
        LOG.debug("Capture chain continues for %r", piece)
        self.chain_piece = piece
        self.clickable_pieces = [piece]
        self.forced_pieces = [piece]
        self.selected_piece = piece
        self.options = follow_up
        self.phase = Phase.CHAIN_CAPTURE

    def _end_turn(self) -> None:
        self.phase = Phase.TURN_ENDING
        self.turn = opponent(self.turn)
        LOG.info("Turn passes to player %s", self.turn)
        self._begin_turn()

    def _begin_turn(self) -> None:
        roster = self.pieces.alive_for(self.turn)
        forced = [piece for piece in roster if capture_options(self.board, self.pieces, piece)]
        if forced:
            clickable = list(forced)
        else:
            clickable = [piece for piece in roster if legal_options(self.board, self.pieces, piece)]

        self.forced_pieces = forced
        self.clickable_pieces = clickable
        self.chain_piece = None
        self.selected_piece = None
        self.options = []

        if not clickable:
            self.phase = Phase.GAME_OVER
            self.winner = opponent(self.turn)
            LOG.info("Game over: player %s cannot move, player %s wins", self.turn, self.winner)
        else:
            self.phase = Phase.IDLE
