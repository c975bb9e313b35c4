"""Turning validated map rows into a grid of linked tiles."""

from __future__ import annotations

from dataclasses import dataclass, field

from solong.model import IMG_SIZE, Enemy, EnemyType, Tile, TileType

_TILE_TYPES = {
    "1": TileType.WALL,
    "C": TileType.COIN,
    "P": TileType.PLAYER,
    "E": TileType.EXIT,
    "H": TileType.ENEMY,
    "V": TileType.ENEMY,
    "F": TileType.FOLLOWER,
}


def tile_type_for(char):
    """Return the tile type a map character stands for."""
    return _TILE_TYPES.get(char, TileType.EMPTY)


@dataclass(eq=False)
class TileMap:
    """The playing field with the player, coin count and enemies found on it."""

    rows: list[list[Tile]]
    player: Tile | None = None
    collects: int = 0
    enemies: list[Enemy] = field(default_factory=list)

    @property
    def width(self):
        """Number of tiles in the last row."""
        return len(self.rows[-1]) if self.rows else 0

    @property
    def height(self):
        """Number of rows."""
        return len(self.rows)

    @property
    def window_size(self):
        """Size in pixels needed to show the whole map."""
        return (self.width * IMG_SIZE, self.height * IMG_SIZE)

    def tiles(self):
        """Yield every tile, row by row."""
        for row in self.rows:
            yield from row


def generate_tilemap(rows):
    """Build a TileMap from map rows, with or without line terminators."""
    lines = [row[:-1] if row.endswith("\n") else row for row in rows]
    grid = [
        [Tile(tile_type_for(char), (x * IMG_SIZE, y * IMG_SIZE)) for x, char in enumerate(line)]
        for y, line in enumerate(lines)
    ]
    for row in grid:
        for left, right in zip(row, row[1:]):
            left.right = right
            right.left = left
    for upper_row, lower_row in zip(grid, grid[1:]):
        for upper, lower in zip(upper_row, lower_row):
            upper.down = lower
            lower.up = upper

    tilemap = TileMap(grid)
    for line, row in zip(lines, grid):
        for char, tile in zip(line, row):
            if tile.type is TileType.PLAYER:
                tilemap.player = tile
            elif tile.type is TileType.COIN:
                tilemap.collects += 1
            elif tile.type in (TileType.ENEMY, TileType.FOLLOWER):
                tilemap.enemies.append(Enemy(EnemyType(char), tile))
    return tilemap