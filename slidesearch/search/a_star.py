from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Iterable, List, Optional, Tuple
from time import perf_counter
import heapq
import itertools
import logging

from slidesearch.domains.board import Board, Cells, Token, ensure_same_shape
from slidesearch.domains.moves import build_moves, children
from slidesearch.heuristics.registry import build_heuristic
from slidesearch.search.config import SearchConfig
from slidesearch.search.evaluation import build_evaluation

logger = logging.getLogger(__name__)

OK = "ok"
EXHAUSTED = "exhausted"
TIMEOUT = "timeout"
MAX_EXPANDED = "max_expanded"


def reconstruct_path(node: Optional[Board]) -> List[Board]:
    path: List[Board] = []
    while node is not None:
        path.append(node)
        node = node.parent
    path.reverse()
    return path


@dataclass
class SearchResult:
    """
    Outcome of one run. termination is "ok", "exhausted" (no path exists
    under the active move rule) or a budget stop ("timeout", "max_expanded").
    """
    termination: str
    path: Optional[List[Board]] = field(default=None, repr=False)
    g: Optional[int] = None
    swaps: int = 0
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_open: int = 0
    peak_closed: int = 0
    time: float = 0.0
    algorithm: str = "A*"
    heuristic: str = ""
    evaluation: str = ""
    tie_break: str = ""

    @property
    def solved(self) -> bool:
        return self.termination == OK

    @property
    def exhausted(self) -> bool:
        return self.termination == EXHAUSTED

    @property
    def aborted(self) -> bool:
        return self.termination in (TIMEOUT, MAX_EXPANDED)

    def as_row(self) -> dict:
        row = asdict(self)
        row.pop("path")
        return row


class SlidingAStar:
    """
    A* over n x n token grids with pluggable heuristic, evaluation policy and
    move rule.

    open:   heap of (priority, seq, board) plus a cells -> board index of the
            live entries; replaced entries stay in the heap and are skipped.
    closed: cells -> board. Closed boards are never reopened, even when a
            cheaper duplicate turns up later.
    """

    def __init__(self, initial: Iterable[Iterable[Token]], goal: Iterable[Iterable[Token]],
                 config: Optional[SearchConfig] = None, **options):
        if config is None:
            config = SearchConfig(**options)
        elif options:
            raise TypeError("pass either a SearchConfig or keyword options, not both")
        self.config = config
        self.initial = initial if isinstance(initial, Board) else Board(initial)
        self.goal = goal if isinstance(goal, Board) else Board(goal)
        self.n = ensure_same_shape(self.initial, self.goal)

        self.hfun = build_heuristic(config.heuristic, self.goal.cells)
        self.evaluate = build_evaluation(config.evaluation)
        self.moves = build_moves(config.moves, config.blank, config.marker_a, config.marker_b)
        self.moves.validate(self.initial)

        h0 = self.hfun(self.initial.cells)
        self.initial = Board(self.initial.cells, h=h0, f=self.evaluate(0, h0))

        self.open: Dict[Cells, Board] = {}
        self.closed: Dict[Cells, Board] = {}

    def _priority(self, b: Board, ctr: int) -> Tuple:
        tb = self.config.tie_break
        if tb == "h":    return (b.f, b.h, ctr)
        if tb == "g":    return (b.f, -b.g, ctr)
        if tb == "lifo": return (b.f, 0, -ctr)
        return (b.f, 0, ctr)

    def is_goal(self, board: Board) -> bool:
        return board == self.goal

    def expand(self, board: Board) -> List[Board]:
        return children(board, self.moves, self.hfun, self.evaluate)

    def solve(self) -> SearchResult:
        cfg = self.config
        t0 = perf_counter()
        open_heap: List[Tuple[Tuple, int, Board]] = []
        counter = itertools.count()
        self.open = {}
        self.closed = {}

        def push(b: Board):
            ctr = next(counter)
            heapq.heappush(open_heap, (self._priority(b, ctr), ctr, b))
            self.open[b.cells] = b

        expanded = generated = duplicates = 0
        peak_open = 1
        peak_closed = 0

        def result(termination: str, goal_node: Optional[Board] = None) -> SearchResult:
            path = reconstruct_path(goal_node) if goal_node is not None else None
            res = SearchResult(
                termination=termination,
                path=path if cfg.return_path else None,
                g=goal_node.g if goal_node is not None else None,
                swaps=len(path) - 1 if path else 0,
                expanded=expanded, generated=generated, duplicates=duplicates,
                peak_open=peak_open, peak_closed=peak_closed,
                time=perf_counter() - t0,
                heuristic=cfg.heuristic, evaluation=cfg.evaluation, tie_break=cfg.tie_break,
            )
            logger.debug("A* %s: expanded=%d generated=%d swaps=%d time=%.4fs",
                         termination, expanded, generated, res.swaps, res.time)
            return res

        logger.debug("A* start: n=%d heuristic=%s evaluation=%s moves=%s h0=%s",
                     self.n, cfg.heuristic, cfg.evaluation, cfg.moves, self.initial.h)
        push(self.initial)

        while self.open:
            if cfg.timeout_sec is not None and (perf_counter() - t0) > cfg.timeout_sec:
                return result(TIMEOUT)
            if cfg.max_expanded is not None and expanded >= cfg.max_expanded:
                return result(MAX_EXPANDED)

            _, _, node = heapq.heappop(open_heap)
            if self.open.get(node.cells) is not node:
                continue  # stale entry, replaced by a cheaper copy

            del self.open[node.cells]
            self.closed[node.cells] = node
            expanded += 1
            peak_closed = max(peak_closed, len(self.closed))

            if self.is_goal(node):
                return result(OK, node)

            for child in self.expand(node):
                generated += 1
                if child.cells in self.closed:
                    duplicates += 1
                    continue
                old = self.open.get(child.cells)
                if old is not None:
                    duplicates += 1
                    if child.f < old.f:
                        push(child)
                    continue
                push(child)
            peak_open = max(peak_open, len(self.open))

        return result(EXHAUSTED)


def a_star(start, goal, config: Optional[SearchConfig] = None, **options) -> SearchResult:
    """One-shot helper: build a SlidingAStar and solve."""
    return SlidingAStar(start, goal, config, **options).solve()
