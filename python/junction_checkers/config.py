from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from .adjacency import Coord, in_bounds
from .game.pieces import PLAYER_ONE, PLAYER_TWO, START_CELLS, PlayerId


class ConfigError(ValueError):
    pass


def _default_layout() -> Dict[PlayerId, Tuple[Coord, ...]]:
    return {player: tuple(cells) for player, cells in START_CELLS.items()}


@dataclass
class GameConfig:
    first_player: PlayerId = PLAYER_ONE
    starting_health: int = 1
    layout: Dict[PlayerId, Tuple[Coord, ...]] = field(default_factory=_default_layout)

    def validate(self) -> "GameConfig":
        if self.first_player not in (PLAYER_ONE, PLAYER_TWO):
            raise ConfigError(f"first_player must be 1 or -1, got {self.first_player!r}")
        if self.starting_health < 1:
            raise ConfigError(f"starting_health must be at least 1, got {self.starting_health!r}")
        if set(self.layout) - {PLAYER_ONE, PLAYER_TWO}:
            raise ConfigError(f"layout keys must be 1 and -1, got {sorted(self.layout)!r}")

        seen = set()
        for player, cells in self.layout.items():
            for coord in cells:
                if not in_bounds(coord):
                    raise ConfigError(f"Start cell {coord} for player {player} is off the board")
                if coord in seen:
                    raise ConfigError(f"Start cell {coord} is used twice")
                seen.add(coord)
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        # Resolve overrides up front
        env = os.environ if environ is None else environ
        config = cls()

        first = env.get("JUNCTION_FIRST_PLAYER", "").strip()
        if first:
            config.first_player = parse_player(first)

        health = env.get("JUNCTION_STARTING_HEALTH", "").strip()
        if health:
            try:
                config.starting_health = int(health)
            except ValueError as exc:
                raise ConfigError(f"JUNCTION_STARTING_HEALTH must be an integer, got {health!r}") from exc

        return config.validate()


def parse_player(raw: str) -> PlayerId:
    # Accept the display numbers (1 / 2) as well as the signs (1 / -1)
    value = raw.strip()
    if value in {"1", "+1"}:
        return PLAYER_ONE
    if value in {"2", "-1"}:
        return PLAYER_TWO
    raise ConfigError(f"Unknown player {raw!r}; use 1 or 2")
