"""
Puzzle definitions on disk.

Whitespace separated tokens:

    n
    n*n initial tokens
    [n*n goal tokens]
    [evaluation code  heuristic code]

Digit tokens are read as ints, everything else (R, G, ...) stays a string.
A puzzle holding marker tokens is a typed-swap puzzle; when its goal is
omitted, the sorted goal (numbers ascending, then R, then G) is derived.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union
import logging

from slidesearch.domains.board import Cells, Token
from slidesearch.domains.tokens import sorted_goal
from slidesearch.search.config import SearchConfig
from slidesearch.search.errors import PuzzleFormatError

logger = logging.getLogger(__name__)


@dataclass
class PuzzleSpec:
    n: int
    initial: Cells
    goal: Cells
    moves: str = "blank"
    evaluation: Optional[str] = None
    heuristic: Optional[str] = None
    marker_a: Token = "R"
    marker_b: Token = "G"

    def to_config(self, **overrides) -> SearchConfig:
        """SearchConfig from the file's codes; non-None overrides win."""
        opts = {"moves": self.moves, "marker_a": self.marker_a, "marker_b": self.marker_b}
        if self.evaluation is not None: opts["evaluation"] = self.evaluation
        if self.heuristic is not None:  opts["heuristic"] = self.heuristic
        opts.update({k: v for k, v in overrides.items() if v is not None})
        return SearchConfig(**opts)


def parse_token(raw: str) -> Token:
    return int(raw) if raw.isdecimal() else raw


def _grid(tokens: List[Token], n: int) -> Cells:
    return tuple(tuple(tokens[r * n:(r + 1) * n]) for r in range(n))


def parse_puzzle(text: str, marker_a: Token = "R", marker_b: Token = "G") -> PuzzleSpec:
    raw = text.split()
    if not raw:
        raise PuzzleFormatError("empty puzzle definition")
    if not raw[0].isdecimal():
        raise PuzzleFormatError(f"board size must be a positive integer, got {raw[0]!r}")
    n = int(raw[0])
    if n < 2:
        raise PuzzleFormatError(f"board size must be at least 2, got {n}")
    cells = n * n
    body = raw[1:]
    if len(body) < cells:
        raise PuzzleFormatError(f"expected {cells} initial tokens, found {len(body)}")

    initial = [parse_token(t) for t in body[:cells]]
    rest = body[cells:]
    typed = any(t in (marker_a, marker_b) for t in initial)

    goal: Optional[Cells] = None
    if len(rest) >= cells:
        goal = _grid([parse_token(t) for t in rest[:cells]], n)
        rest = rest[cells:]
    if len(rest) > 2:
        raise PuzzleFormatError(f"unexpected trailing tokens: {' '.join(rest)}")
    evaluation = rest[0] if len(rest) >= 1 else None
    heuristic = rest[1] if len(rest) == 2 else None

    init_grid = _grid(initial, n)
    if goal is None:
        if not typed:
            raise PuzzleFormatError("goal board missing (only typed puzzles derive their goal)")
        goal = sorted_goal(init_grid, marker_a, marker_b)
        logger.debug("derived goal %s", goal)

    return PuzzleSpec(n=n, initial=init_grid, goal=goal, moves="typed" if typed else "blank",
                      evaluation=evaluation, heuristic=heuristic, marker_a=marker_a, marker_b=marker_b)


def load_puzzle(path: Union[str, Path], **kwargs) -> PuzzleSpec:
    path = Path(path)
    logger.info("loading puzzle %s", path)
    return parse_puzzle(path.read_text(encoding="utf-8"), **kwargs)
