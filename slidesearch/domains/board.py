from __future__ import annotations
from collections import Counter
from typing import Hashable, Iterable, Optional, Sequence, Tuple

from slidesearch.search.errors import DimensionMismatch

Token = Hashable
Cells = Tuple[Tuple[Token, ...], ...]
Pos = Tuple[int, int]


def to_cells(grid: Iterable[Iterable[Token]]) -> Cells:
    """Deep-copy any nested row sequence into an immutable grid."""
    return tuple(tuple(row) for row in grid)


def swapped_cells(cells: Cells, a: Pos, b: Pos) -> Cells:
    grid = [list(row) for row in cells]
    (r1, c1), (r2, c2) = a, b
    grid[r1][c1], grid[r2][c2] = grid[r2][c2], grid[r1][c1]
    return to_cells(grid)


class Board:
    """
    Grid snapshot plus search metadata.

    Identity is the cell content only: g/h/f and the parent link never take
    part in ==, hash() or the goal test.
    """
    __slots__ = ("cells", "g", "h", "f", "parent")

    def __init__(self, grid: Iterable[Iterable[Token]], g: int = 0, h: float = 0,
                 f: float = 0, parent: Optional["Board"] = None):
        self.cells: Cells = to_cells(grid)
        self.g = g
        self.h = h
        self.f = f
        self.parent = parent

    @property
    def n(self) -> int:
        return len(self.cells)

    def is_square(self) -> bool:
        return all(len(row) == len(self.cells) for row in self.cells)

    def at(self, row: int, col: int) -> Token:
        return self.cells[row][col]

    def find(self, token: Token) -> Optional[Pos]:
        """Row-major first occurrence of token, None when absent."""
        for r, row in enumerate(self.cells):
            for c, t in enumerate(row):
                if t == token:
                    return r, c
        return None

    def tokens(self) -> Counter:
        return Counter(t for row in self.cells for t in row)

    def copy(self) -> "Board":
        return Board(self.cells, g=self.g, h=self.h, f=self.f, parent=self.parent)

    def swap(self, a: Pos, b: Pos) -> "Board":
        """New parentless board with the tokens at a and b exchanged."""
        return Board(swapped_cells(self.cells, a, b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __repr__(self) -> str:
        return f"Board({[list(r) for r in self.cells]!r}, g={self.g}, h={self.h}, f={self.f})"


def ensure_same_shape(initial: Board, goal: Board) -> int:
    """Return the common side length or raise DimensionMismatch."""
    for name, b in (("initial", initial), ("goal", goal)):
        if b.n < 2:
            raise DimensionMismatch(f"{name} board must be at least 2x2, got {b.n} rows")
        if not b.is_square():
            raise DimensionMismatch(f"{name} board is not square: row lengths {[len(r) for r in b.cells]}")
    if initial.n != goal.n:
        raise DimensionMismatch(f"initial board is {initial.n}x{initial.n}, goal is {goal.n}x{goal.n}")
    return initial.n


def diff_positions(a: Sequence[Sequence[Token]], b: Sequence[Sequence[Token]]) -> list:
    """Cells where two equally sized grids disagree."""
    return [(r, c) for r, row in enumerate(a) for c, t in enumerate(row) if t != b[r][c]]
