from __future__ import annotations
from slidesearch.domains.board import Cells


def misplaced(s: Cells, goal: Cells) -> int:
    """Number of cells whose token differs from the goal at the same position."""
    return sum(1 for row, grow in zip(s, goal) for t, gt in zip(row, grow) if t != gt)
