"""Command-line interface for hot-seat play in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple, Union

from .adjacency import COLUMNS, ROWS
from .config import ConfigError, GameConfig, parse_player
from .game.pieces import PLAYER_ONE, PLAYER_TWO
from .game.rules import MoveOutcome, SelectionResult
from .game.session import GameSession
from .protocol import dump_roster, player_number, turn_banner


LOG = logging.getLogger("junction_checkers.cli")


def _render_board(session: GameSession) -> str:
    controller = session.controller
    option_cells = {option.cell for option in controller.options}

    # Columns are i (1..9), rows are j (1..5)
    lines = ["    " + " ".join(f"{i + 1}" for i in range(ROWS))]
    for j in range(COLUMNS):
        row: List[str] = []
        for i in range(ROWS):
            cell = session.board.cell(i, j)
            piece = session.pieces.piece_at(cell)
            if piece is not None:
                symbol = "*" if piece is controller.selected_piece else str(player_number(piece.player))
            elif cell in option_cells:
                symbol = "+"
            else:
                symbol = (cell.label or ".").lower()
            row.append(symbol)
        lines.append(f"{j + 1:>2}  " + " ".join(row))

    if controller.forced_pieces:
        forced = ", ".join(
            f"{piece.location.i + 1} {piece.location.j + 1}"
            for piece in controller.forced_pieces
            if piece.location is not None
        )
        lines.append(f"Must capture with: {forced}")
    return "\n".join(lines)


def _parse_cell(raw: str) -> Optional[Tuple[int, int]]:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        i, j = (int(part) - 1 for part in parts)
    except ValueError:
        return None
    return i, j


def _prompt_cell(prompt: str) -> Optional[Tuple[int, int]]:
    while True:
        try:
            value = input(prompt)
        except EOFError:
            return None

        value = value.strip()
        if value.lower() in {"q", "quit", "exit"}:
            return None

        coord = _parse_cell(value)
        if coord is not None:
            return coord
        print("Please enter 'i j' (for example '2 1') or 'q' to quit.")


def _report(result: Union[SelectionResult, MoveOutcome]) -> None:
    if isinstance(result, MoveOutcome):
        if not result.legal:
            print("Not a legal destination; selection cleared.")
            return
        if result.captured is not None:
            print(f"Captured a piece of player {player_number(result.captured.player)}.")
        if not result.turn_ended:
            print("Capture chain detected - you must continue with the same piece.")
        return

    if result.error is not None:
        print("That piece cannot be selected.")
    elif result.selected is not None:
        print(f"Selected piece with {len(result.options)} option(s).")


def _print_rosters(session: GameSession) -> None:
    for turn in (PLAYER_ONE, PLAYER_TWO):
        print(f"Player {player_number(turn)} pieces:")
        print(dump_roster(session.roster(turn)))


def play(session: GameSession) -> int:
    print("Game start! Enter 'q' at any prompt to quit.")
    controller = session.controller

    while not controller.game_over:
        print()
        print(_render_board(session))
        print(turn_banner(session.turn))

        coord = _prompt_cell("Select a cell (i j): ")
        if coord is None:
            print("Thanks for playing!")
            return 0

        result = session.click(*coord)
        _report(result)
        if isinstance(result, MoveOutcome) and result.legal:
            _print_rosters(session)

    print()
    print(_render_board(session))
    winner = controller.winner
    print(f"Game over! Player {player_number(winner) if winner is not None else '?'} wins.")
    return 0


def build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.from_env()
    if args.first_player is not None:
        config.first_player = parse_player(args.first_player)
    if args.health is not None:
        config.starting_health = args.health
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Junction checkers hot-seat game")
    parser.add_argument("--first-player", default=None, help="1 or 2")
    parser.add_argument("--health", type=int, default=None, help="captures needed to remove a piece")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        config = build_config(args)
    except ConfigError as exc:
        LOG.error("Invalid configuration: %s", exc)
        return 2

    return play(GameSession(config))


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    sys.exit(main())
