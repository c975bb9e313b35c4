"""Reading and validating map files."""

from __future__ import annotations

MAP_EXTENSION = ".ber"
MAX_WIDTH = 61
MAX_HEIGHT = 33

_VALID_CHARS = frozenset("10CEPHVF\n")
_BLOCKING = frozenset("1GVFH")
_TARGETS = frozenset("CE")


class MapError(Exception):
    """Raised when a map file or its contents are not acceptable."""


def validate_file(argv):
    """Check the command arguments name exactly one .ber file; return its path."""
    args = list(argv)
    if not args:
        raise MapError("need a map !")
    if len(args) > 1:
        raise MapError("only one map needed !")
    path = str(args[0])
    if len(path) <= len(MAP_EXTENSION) or not path.endswith(MAP_EXTENSION):
        raise MapError("a valid map name should end with .ber !")
    return path


def read_map(path):
    """Read a map file into lines that keep their newline terminators."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("open or reading error, the file may not exist !") from exc
    parts = data.decode("latin-1").split("\n")
    rows = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        rows.append(parts[-1])
    if any(row.startswith("\n") for row in rows):
        raise MapError("parsing map failed !")
    return rows


def valid_char(char):
    """Tell whether a character may appear in a map."""
    return char in _VALID_CHARS


def valid_border(rows):
    """Tell whether the map is rectangular and enclosed by walls."""
    if not rows:
        return False
    width = len(rows[0])

    def full_wall(row):
        body = row.partition("\n")[0]
        return len(body) == width - 1 and all(char == "1" for char in body)

    if not full_wall(rows[0]) or not full_wall(rows[-1]):
        return False
    return all(
        len(row) == width and row[0] == "1" and row[width - 2] == "1"
        for row in rows[1:-1]
    )


def check_path(rows):
    """Tell whether every coin and the exit can be reached from the player.

    Enemies and walls block the way, and the exit blocks what lies past it.
    """
    grid = [list(row) for row in rows]
    start = next(
        ((x, y) for y, row in enumerate(grid) for x, char in enumerate(row) if char == "P"),
        None,
    )
    if start is None:
        raise MapError("Player position not found")
    limit_x = len(rows[0]) - 1
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(grid) and 0 <= x < min(limit_x, len(grid[y]))):
            continue
        if grid[y][x] == "E":
            grid[y][x] = "1"
        if grid[y][x] in _BLOCKING:
            continue
        grid[y][x] = "G"
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return not any(char in _TARGETS for row in grid for char in row)


def validate_map(rows):
    """Raise MapError if the map breaks a rule; return the rows otherwise."""
    if rows and not valid_border(rows):
        raise MapError("map must be surrounded by walls and rectangular !")
    has_player = False
    exits = 0
    has_coin = False
    for row in rows:
        for char in row:
            if not valid_char(char):
                raise MapError("invalid map character !")
            if char == "P":
                if has_player:
                    raise MapError("must be only one player !")
                has_player = True
            elif char == "E":
                exits += 1
            elif char == "C":
                has_coin = True
    if not has_player or exits != 1 or not has_coin:
        raise MapError("there must be one P, one E and at least one C !")
    if not check_path(rows):
        raise MapError("Not all collectibles or exit are reachable")
    last_width = len(rows[-1])
    if last_width > MAX_WIDTH or len(rows) > MAX_HEIGHT:
        raise MapError("map is too big !")
    return rows