"""Core data types shared by the map loader and the game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

IMG_SIZE = 64

_RED = "\033[0;31m"
_YELLOW = "\033[0;33m"
_RESET = "\033[0m"


class Key(enum.IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class TileType(str, enum.Enum):
    """What occupies a tile; the value is its map character."""

    EMPTY = "0"
    WALL = "1"
    COIN = "C"
    PLAYER = "P"
    EXIT = "E"
    ENEMY = "M"
    FOLLOWER = "F"


class EnemyType(str, enum.Enum):
    """How an enemy moves; the value is its map character."""

    HORIZONTAL = "H"
    VERTICAL = "V"
    FOLLOW = "F"


_DIRECTION_NAMES = frozenset({"up", "down", "left", "right"})
_KEY_DIRECTIONS = {
    Key.UP: "up",
    Key.DOWN: "down",
    Key.LEFT: "left",
    Key.RIGHT: "right",
}


@dataclass(eq=False)
class Tile:
    """One cell of the map, linked to its four neighbours."""

    type: TileType
    position: tuple[int, int]
    up: Tile | None = field(default=None, repr=False)
    down: Tile | None = field(default=None, repr=False)
    left: Tile | None = field(default=None, repr=False)
    right: Tile | None = field(default=None, repr=False)

    def neighbour(self, direction):
        """Return the neighbour in a direction given by name or arrow key."""
        name = _KEY_DIRECTIONS.get(direction, direction) if isinstance(direction, (int, str)) else None
        if name not in _DIRECTION_NAMES:
            raise ValueError(f"unknown direction: {direction!r}")
        return getattr(self, name)


@dataclass(eq=False)
class Enemy:
    """An enemy standing on a tile; direction 0 is up/left, 1 is down/right."""

    type: EnemyType
    tile: Tile
    direction: int = 0


def error_text(message):
    """Format an error message in red."""
    return f"{_RED}Error \n{message}\n{_RESET}"


def warning_text(message):
    """Format a warning message in yellow."""
    return f"{_YELLOW}Warning \n{message}\n{_RESET}"