"""Boggle boards: a fixed grid of tiles and the adjacency between them."""

import functools
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

# A tile is one face of a die: a single letter, or the "qu" digraph.
Tile = str

DIGRAPH = "qu"

# (row, col) steps to the eight surrounding cells: NW, N, NE, W, E, SW, S, SE.
COMPASS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


@functools.cache
def adjacency(rows: int, cols: int) -> tuple[tuple[int, ...], ...]:
    """For each row-major cell index, the indices of the cells around it."""
    table = []
    for r in range(rows):
        for c in range(cols):
            around = [
                (r + dr) * cols + (c + dc)
                for dr, dc in COMPASS
                if 0 <= r + dr < rows and 0 <= c + dc < cols
            ]
            table.append(tuple(around))
    return tuple(table)


def is_tile(tile: str) -> bool:
    if tile == DIGRAPH:
        return True
    return len(tile) == 1 and "a" <= tile <= "z"


def format_tile(tile: Tile) -> str:
    return tile.capitalize() if tile == DIGRAPH else tile.upper()


@dataclass(frozen=True)
class BoardPosition:
    row: int
    col: int
    tile: Tile


class Board:
    """An immutable rows x cols grid of tiles."""

    _tiles: tuple[tuple[Tile, ...], ...]

    def __init__(self, tiles: Sequence[Sequence[Tile]]):
        if not tiles or not tiles[0]:
            raise ValueError("Board must have at least one cell")
        cols = len(tiles[0])
        for row in tiles:
            if len(row) != cols:
                raise ValueError(f"Board is not rectangular: {tiles!r}")
            for tile in row:
                if not is_tile(tile):
                    raise ValueError(f"Invalid tile {tile!r}")
        self._tiles = tuple(tuple(row) for row in tiles)

    @staticmethod
    def from_string(text: str, dims: tuple[int, int] | None = None) -> "Board":
        """Parse a board from a row-major string.

        "abcd efgh ..." with spaces is read one tile per token, so "q" and "u"
        can be separate tiles. Without spaces each character is a tile and "q"
        stands for the "qu" face, e.g. "qaaaaaaaa" is a 3x3 board with Qu in
        the corner. If dims is omitted, the board must be square.
        """
        text = text.strip().lower()
        if " " in text:
            cells = text.split()
        else:
            cells = [DIGRAPH if c == "q" else c for c in text]
        n = len(cells)
        if dims is None:
            side = math.isqrt(n)
            if side * side != n:
                raise ValueError(f"{text!r} is not a square board; pass dims")
            dims = (side, side)
        rows, cols = dims
        if rows * cols != n:
            raise ValueError(f"{text!r} has {n} tiles, expected {rows}x{cols}")
        return Board([cells[r * cols : (r + 1) * cols] for r in range(rows)])

    @property
    def rows(self) -> int:
        return len(self._tiles)

    @property
    def cols(self) -> int:
        return len(self._tiles[0])

    @property
    def dims(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def tile(self, row: int, col: int) -> Tile:
        if not self.in_bounds(row, col):
            raise IndexError(
                f"({row}, {col}) is off the {self.rows}x{self.cols} board"
            )
        return self._tiles[row][col]

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def position(self, idx: int) -> tuple[int, int]:
        return divmod(idx, self.cols)

    def cells(self) -> list[Tile]:
        """All tiles in row-major order."""
        return [tile for row in self._tiles for tile in row]

    def adjacency(self) -> tuple[tuple[int, ...], ...]:
        """Neighbor indices of every cell, see cells()."""
        return adjacency(self.rows, self.cols)

    def neighbors(self, row: int, col: int) -> list[BoardPosition]:
        """Cells adjacent to (row, col), diagonals included, in compass order.

        Edges clip rather than wrap. A cell off the board has no neighbors.
        """
        if not self.in_bounds(row, col):
            return []
        out = []
        for idx in self.adjacency()[self.index(row, col)]:
            r, c = self.position(idx)
            out.append(BoardPosition(r, c, self._tiles[r][c]))
        return out

    def __iter__(self) -> Iterator[BoardPosition]:
        for r, row in enumerate(self._tiles):
            for c, tile in enumerate(row):
                yield BoardPosition(r, c, tile)

    def __eq__(self, other):
        return isinstance(other, Board) and self._tiles == other._tiles

    def __hash__(self):
        return hash(self._tiles)

    def __repr__(self):
        return f"Board({[list(row) for row in self._tiles]!r})"

    def __str__(self):
        return "\n".join(
            "".join(f" {format_tile(tile):<2}" for tile in row).rstrip()
            for row in self._tiles
        )
