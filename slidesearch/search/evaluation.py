from __future__ import annotations
from typing import Callable

from slidesearch.search.errors import ConfigurationError

EvaluationFn = Callable[[int, float], float]


def greedy(g: int, h: float) -> float:
    return h


def uniform_cost(g: int, h: float) -> float:
    return g


def a_star_score(g: int, h: float) -> float:
    return g + h


_POLICIES = {"h": greedy, "g": uniform_cost, "g+h": a_star_score}

_ALIASES = {
    "h": "h", "greedy": "h", "1": "h",
    "g": "g", "uniform": "g", "ucs": "g", "2": "g",
    "g+h": "g+h", "f": "g+h", "astar": "g+h", "a*": "g+h", "3": "g+h",
}


def evaluation_name(name) -> str:
    key = str(name).strip().lower().replace(" ", "")
    if key not in _ALIASES:
        raise ConfigurationError(f"unknown evaluation policy: {name!r}")
    return _ALIASES[key]


def build_evaluation(name) -> EvaluationFn:
    """f = h, f = g or f = g + h."""
    return _POLICIES[evaluation_name(name)]
