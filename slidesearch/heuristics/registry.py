from __future__ import annotations
from functools import partial
from typing import Callable

from slidesearch.domains.board import Cells
from slidesearch.heuristics.manhattan import goal_positions, manhattan
from slidesearch.heuristics.misplaced import misplaced
from slidesearch.search.errors import ConfigurationError

HeuristicFn = Callable[[Cells], int]

_ALIASES = {
    "misplaced": "misplaced", "misplaced_count": "misplaced", "misplaced-count": "misplaced",
    "m": "misplaced", "1": "misplaced",
    "manhattan": "manhattan", "taxi": "manhattan", "taxi_distance": "manhattan",
    "taxi-distance": "manhattan", "d": "manhattan", "2": "manhattan",
}


def heuristic_name(name) -> str:
    """Canonical heuristic name for a selector (name or numeric code)."""
    key = str(name).strip().lower()
    if key not in _ALIASES:
        raise ConfigurationError(f"unknown heuristic: {name!r}")
    return _ALIASES[key]


def build_heuristic(name, goal: Cells) -> HeuristicFn:
    canon = heuristic_name(name)
    if canon == "misplaced":
        return partial(misplaced, goal=goal)
    return partial(manhattan, goal=goal, goal_pos=goal_positions(goal))
