from __future__ import annotations
from typing import Iterator, List, Tuple

from slidesearch.domains.board import Board, Pos, Token, swapped_cells
from slidesearch.domains.tokens import category
from slidesearch.search.errors import ConfigurationError

# (name, dr, dc) in generation order
DIRECTIONS: Tuple[Tuple[str, int, int], ...] = (
    ("N", -1, 0),
    ("S", 1, 0),
    ("E", 0, 1),
    ("W", 0, -1),
)


class BlankSwapMoves:
    """Classic sliding rule: the blank trades places with one of its 4 neighbours."""
    name = "blank"

    def __init__(self, blank: Token = 0):
        self.blank = blank

    def is_legal_swap(self, a: Token, b: Token) -> bool:
        return (a == self.blank) != (b == self.blank)

    def swaps(self, board: Board) -> Iterator[Tuple[Pos, Pos]]:
        z = board.find(self.blank)
        if z is None:
            return
        r, c = z
        n = board.n
        for _, dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n:
                yield (r, c), (nr, nc)

    def validate(self, board: Board) -> None:
        if board.find(self.blank) is None:
            raise ConfigurationError(f"blank token {self.blank!r} not found on the initial board")


class TypedSwapMoves:
    """
    Neighbouring tokens may swap only across categories
    (number<->A, number<->B, A<->B). Each unordered pair is visited once.
    """
    name = "typed"

    def __init__(self, marker_a: Token = "R", marker_b: Token = "G"):
        self.marker_a = marker_a
        self.marker_b = marker_b

    def is_legal_swap(self, a: Token, b: Token) -> bool:
        ca = category(a, self.marker_a, self.marker_b)
        cb = category(b, self.marker_a, self.marker_b)
        return ca is not None and cb is not None and ca != cb

    def swaps(self, board: Board) -> Iterator[Tuple[Pos, Pos]]:
        n = board.n
        for r in range(n):
            for c in range(n):
                for nr, nc in ((r, c + 1), (r + 1, c)):
                    if nr < n and nc < n and self.is_legal_swap(board.at(r, c), board.at(nr, nc)):
                        yield (r, c), (nr, nc)

    def validate(self, board: Board) -> None:
        unknown = sorted({repr(t) for row in board.cells for t in row
                          if category(t, self.marker_a, self.marker_b) is None})
        if unknown:
            raise ConfigurationError(
                f"typed moves only know numbers, {self.marker_a!r} and {self.marker_b!r}; "
                f"found {', '.join(unknown)}")


def build_moves(rule: str, blank: Token = 0, marker_a: Token = "R", marker_b: Token = "G"):
    key = str(rule).strip().lower()
    if key in ("blank", "sliding"):
        return BlankSwapMoves(blank)
    if key in ("typed", "colored", "coloured"):
        return TypedSwapMoves(marker_a, marker_b)
    raise ConfigurationError(f"unknown move rule: {rule!r}")


def children(board: Board, moves, hfun, evaluate) -> List[Board]:
    """Successors of board, each scored and linked back to board."""
    out: List[Board] = []
    for a, b in moves.swaps(board):
        cells = swapped_cells(board.cells, a, b)
        g = board.g + 1
        h = hfun(cells)
        out.append(Board(cells, g=g, h=h, f=evaluate(g, h), parent=board))
    return out
