from __future__ import annotations
from typing import Dict, Optional, Tuple

from slidesearch.domains.board import Cells, Pos, Token


def goal_positions(goal: Cells) -> Dict[Token, Pos]:
    """First (row-major) goal position of every token value."""
    pos: Dict[Token, Pos] = {}
    for r, row in enumerate(goal):
        for c, t in enumerate(row):
            pos.setdefault(t, (r, c))
    return pos


def manhattan(s: Cells, goal: Cells, goal_pos: Optional[Dict[Token, Pos]] = None) -> int:
    """
    Sum of taxi distances of the misplaced tokens.

    Repeated tokens are measured against their first occurrence in the goal.
    A token missing from the goal counts 1, so only the goal itself scores 0.
    """
    if goal_pos is None:
        goal_pos = goal_positions(goal)
    dist = 0
    for r, (row, grow) in enumerate(zip(s, goal)):
        for c, (t, gt) in enumerate(zip(row, grow)):
            if t == gt:
                continue
            target: Optional[Tuple[int, int]] = goal_pos.get(t)
            if target is None:
                dist += 1
                continue
            gr, gc = target
            dist += abs(r - gr) + abs(c - gc)
    return dist
