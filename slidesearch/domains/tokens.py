from __future__ import annotations
from typing import Iterable, List, Optional

from slidesearch.domains.board import Cells, Token, to_cells

NUMERIC = "numeric"
MARKER_A = "marker_a"
MARKER_B = "marker_b"


def is_numeric(token: Token) -> bool:
    if isinstance(token, bool):
        return False
    if isinstance(token, int):
        return True
    return isinstance(token, str) and token.isdecimal()


def category(token: Token, marker_a: Token = "R", marker_b: Token = "G") -> Optional[str]:
    """Broad category used by the typed swap rule; None for unknown tokens."""
    if is_numeric(token):
        return NUMERIC
    if token == marker_a:
        return MARKER_A
    if token == marker_b:
        return MARKER_B
    return None


def sorted_goal(grid: Iterable[Iterable[Token]], marker_a: Token = "R", marker_b: Token = "G") -> Cells:
    """
    Typed-mode goal: numbers ascending, then every marker A, then every
    marker B, filled row-major into a grid of the same shape.
    """
    cells = to_cells(grid)
    flat = [t for row in cells for t in row]
    nums = sorted((t for t in flat if is_numeric(t)), key=int)
    reds = [t for t in flat if t == marker_a]
    greens = [t for t in flat if t == marker_b]
    rest = [t for t in flat if category(t, marker_a, marker_b) is None]
    ordered: List[Token] = nums + reds + greens + rest
    n = len(cells[0]) if cells else 0
    return tuple(tuple(ordered[r * n:(r + 1) * n]) for r in range(len(cells)))
