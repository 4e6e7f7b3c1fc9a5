from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable, Optional

from slidesearch.heuristics.registry import heuristic_name
from slidesearch.search.errors import ConfigurationError
from slidesearch.search.evaluation import evaluation_name

TIE_BREAKS = ("fifo", "lifo", "h", "g")
MOVE_RULES = ("blank", "typed")


@dataclass
class SearchConfig:
    """
    Options of one search run. Selectors are normalised to their canonical
    names; anything unknown fails here, before the search starts.
    """
    heuristic: str = "manhattan"
    evaluation: str = "g+h"
    moves: str = "blank"
    blank: Hashable = 0
    marker_a: Hashable = "R"
    marker_b: Hashable = "G"
    tie_break: str = "fifo"
    max_expanded: Optional[int] = None
    timeout_sec: Optional[float] = None
    return_path: bool = True

    def __post_init__(self):
        self.heuristic = heuristic_name(self.heuristic)
        self.evaluation = evaluation_name(self.evaluation)
        self.moves = str(self.moves).strip().lower()
        if self.moves not in MOVE_RULES:
            raise ConfigurationError(f"unknown move rule: {self.moves!r} (expected one of {MOVE_RULES})")
        if self.tie_break not in TIE_BREAKS:
            raise ConfigurationError(f"unknown tie_break: {self.tie_break!r} (expected one of {TIE_BREAKS})")
        if self.marker_a == self.marker_b:
            raise ConfigurationError("marker_a and marker_b must differ")
        if self.max_expanded is not None and self.max_expanded < 0:
            raise ConfigurationError("max_expanded must be >= 0")
        if self.timeout_sec is not None and self.timeout_sec < 0:
            raise ConfigurationError("timeout_sec must be >= 0")
