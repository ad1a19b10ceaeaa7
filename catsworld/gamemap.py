"""Map loading and validation for the tile game.

A map file is a rectangle of tiles, one row per line, each line ended by a
newline. Tiles are '1' (wall), '0' (floor), 'C' (collectible), 'E' (exit),
'P' (player) and 'M' (enemy).
"""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from catsworld.linereader import read_lines

WALL = "1"
FLOOR = "0"
ITEM = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "M"
VISITED = "3"

_MAP_CHARS = frozenset({WALL, FLOOR, PLAYER, EXIT, ITEM, ENEMY})
_FLOODABLE = frozenset({FLOOR, ITEM, PLAYER, EXIT, ENEMY})
_SETTLED = frozenset({WALL, FLOOR, VISITED})
_MIN_LINE_LENGTH = 5

Grid = list[list[str]]


class MapError(ValueError):
    """Raised when a map cannot be read or is not a valid map."""


def is_map_char(c: str) -> bool:
    """True for the characters a map may contain."""
    return c in _MAP_CHARS


def read_map_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a map file, newlines kept."""
    try:
        return read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read map {os.fspath(path)!r}: {exc}") from exc


def measure_length(lines: Sequence[str]) -> int:
    """Return the row width of a map, its newline not counted.

    Every line must have the same length as the first, newline included,
    and that length must be at least five.
    """
    if not lines:
        raise MapError("map is empty")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise MapError("map length incorrect")
    if width < _MIN_LINE_LENGTH:
        raise MapError("map length incorrect")
    return width - 1


def check_chars(lines: Sequence[str]) -> int:
    """Check that every line holds only map characters; return the line count.

    The last character of each line is taken to be its newline and is not
    checked.
    """
    if not lines:
        raise MapError("map is empty")
    for line in lines:
        if not all(is_map_char(c) for c in line[:-1]):
            raise MapError("map contains forbidden char")
    return len(lines)


def count_tiles(grid: Iterable[Iterable[str]]) -> Counter[str]:
    """Return how many times each tile occurs in the grid."""
    return Counter(tile for row in grid for tile in row)


def find_tile(grid: Sequence[Sequence[str]], tile: str) -> tuple[int, int] | None:
    """Return (row, column) of the first occurrence of tile, or None."""
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell == tile:
                return row_index, col_index
    return None


def flood_fill(grid: Sequence[Sequence[str]], x: int, y: int) -> Grid:
    """Return a copy of grid with every tile reachable from column x, row y marked.

    Reachable non-wall tiles become '3'; walls stop the fill. The input grid
    is left unchanged.
    """
    filled = [list(row) for row in grid]
    pending = [(x, y)]
    while pending:
        col, row = pending.pop()
        if not 0 <= row < len(filled) or not 0 <= col < len(filled[row]):
            continue
        if filled[row][col] not in _FLOODABLE:
            continue
        filled[row][col] = VISITED
        pending.extend(
            ((col - 1, row), (col + 1, row), (col, row - 1), (col, row + 1))
        )
    return filled


def check_limits(grid: Sequence[Sequence[str]]) -> bool:
    """True if the map is closed: its border is made of walls."""
    if not grid or not grid[0]:
        return False
    width = len(grid[0])
    last = len(grid) - 1
    for index, row in enumerate(grid):
        if index in (0, last):
            if any(cell != WALL for cell in row):
                return False
        elif len(row) < width or row[0] != WALL or row[width - 1] != WALL:
            return False
    return True


def check_after(grid: Iterable[Iterable[str]]) -> bool:
    """True if only walls, floor and visited tiles remain after a fill."""
    return all(cell in _SETTLED for row in grid for cell in row)


def validate_paths(grid: Sequence[Sequence[str]], row: int, col: int) -> bool:
    """True if the map is closed and every special tile is reachable from (row, col)."""
    if not check_limits(grid):
        return False
    return check_after(flood_fill(grid, col, row))


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


@dataclass
class GameMap:
    """A loaded map: its tiles, row by row, and the collectibles left."""

    grid: Grid
    items: int

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def length(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> GameMap:
        """Load and check a map file."""
        return cls.from_lines(read_map_lines(path))

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> GameMap:
        """Build a map from its lines, newlines included.

        The map must be rectangular, hold only map characters, at least one
        collectible, exactly one exit and exactly one player.
        """
        measure_length(lines)
        check_chars(lines)
        grid = [list(_strip_newline(line)) for line in lines]
        counts = count_tiles(grid)
        if counts[ITEM] < 1:
            raise MapError("bad map: no collectible")
        if counts[EXIT] != 1 or counts[PLAYER] != 1:
            raise MapError("bad map: needs exactly one exit and one player")
        return cls(grid=grid, items=counts[ITEM])

    def _check_bounds(self, row: int, col: int) -> None:
        if not 0 <= row < self.height or not 0 <= col < len(self.grid[row]):
            raise IndexError(f"position ({row}, {col}) is outside the map")

    def tile(self, row: int, col: int) -> str:
        """Return the tile at (row, col)."""
        self._check_bounds(row, col)
        return self.grid[row][col]

    def set_tile(self, row: int, col: int, value: str) -> None:
        """Replace the tile at (row, col)."""
        if not is_map_char(value):
            raise ValueError(f"not a map tile: {value!r}")
        self._check_bounds(row, col)
        self.grid[row][col] = value

    def player_position(self) -> tuple[int, int]:
        """Return (row, column) of the player."""
        position = find_tile(self.grid, PLAYER)
        if position is None:
            raise MapError("map has no player")
        return position