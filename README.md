# solong

A small top-down tile game. You walk a character around a walled map,
pick up every plant, and then step onto the exit. Patrolling enemies move
back and forth along rows or columns, and followers chase you; touching
either ends the game.

## Installing

```
pip install .
```

This installs the `solong` command and its one dependency, pygame.
For the tests, install the `test` extra: `pip install .[test]`.

## Playing

```
solong maps/level.ber
```

Pass exactly one map file, whose name ends in `.ber`. The textures are
read from a `textures/` directory in the current working directory. If a
game texture is missing, `Error` is written to standard error and the
game does not start. The win and lose screens (`you_win.xpm`,
`you_lose.xpm`) are optional; without them `YOU WIN !` or `YOU LOSE !`
is printed instead.

Keys:

- arrow keys move the player one tile
- `Esc` or closing the window quits

Every step onto a floor tile or a plant counts as a move; the move
counter is shown in the top-right corner. Walking into a wall, or into
the exit while plants remain, does not count. Once the last plant is
picked up, stepping onto the exit wins; running into an enemy, or an
enemy running into you, loses. Enemies take one step every 40 frames.

## Map format

A map is a plain-text rectangle of characters, one row per line:

| Char | Meaning                          |
|------|----------------------------------|
| `1`  | wall                             |
| `0`  | empty floor                      |
| `P`  | player start (exactly one)       |
| `E`  | exit (exactly one)               |
| `C`  | collectible (at least one)       |
| `H`  | enemy patrolling horizontally    |
| `V`  | enemy patrolling vertically      |
| `F`  | enemy following the player       |

The map must be rectangular, enclosed by walls, and contain no blank
lines. Every collectible and the exit must be reachable from the player
without passing through enemies or through the exit. Maps whose last row
is longer than 61 characters, or with more than 33 rows, are refused. An
invalid map is reported with a red error message on standard output, and
the game does not start.

Example:

```
1111111111
1P0C00H0E1
1000F00001
1111111111
```

## Using the library

The map checks and game rules can be used without a window:

```python
from solong.mapcheck import read_map, validate_map
from solong.tilemap import generate_tilemap
from solong.game import Game, GameOver
from solong.model import Key

rows = validate_map(read_map("level.ber"))
game = Game(generate_tilemap(rows))
try:
    game.handle_key(Key.RIGHT)
    game.tick()
except GameOver as over:
    print(over.outcome)
print(game.moves)
```

The modules:

- `solong.model` – `Tile`, `Enemy`, `TileType`, `EnemyType`, `Key`, and
  `error_text` / `warning_text` for coloured messages.
- `solong.mapcheck` – `validate_file`, `read_map`, `valid_char`,
  `valid_border`, `check_path`, `validate_map`; rejected files and maps
  raise `MapError`.
- `solong.tilemap` – `generate_tilemap` builds a `TileMap` of linked
  tiles, with the player tile, the coin count and the enemies.
- `solong.game` – `Game` holds the state: `handle_key`, `move_to`,
  `move_enemies`, `follow_player` and `tick`. A finished game raises
  `GameOver`, whose `outcome` is an `Outcome` (`WIN`, `LOSE` or `QUIT`).
- `solong.display` – pygame drawing: `load_textures`, `Renderer`
  (`draw`, `draw_end`), `wall_texture`, `new_color`, and `main`, the
  entry point of the `solong` command.