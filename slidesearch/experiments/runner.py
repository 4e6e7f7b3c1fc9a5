#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from slidesearch.domains.board import Cells
from slidesearch.domains.puzzlen import NPuzzle, make_unsolvable_variant
from slidesearch.experiments.common import setup_logging
from slidesearch.search.a_star import SearchResult, SlidingAStar
from slidesearch.search.config import SearchConfig

logger = logging.getLogger(__name__)

HEADER = [
    "algorithm", "heuristic", "evaluation", "depth", "seed",
    "expanded", "generated", "duplicates", "swaps", "g", "time_sec",
    "peak_open", "peak_closed", "tie_break", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: Cells


def _gen(inst_scramble: Callable[[int, int], Cells], inst_is_solvable: Callable[[Cells], bool],
         depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = inst_scramble(d, seed)
            seed += 1
            attempts += 1
            if inst_is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def row_for(res: SearchResult, inst: Instance, solvable_flag: int) -> list:
    return [
        res.algorithm, res.heuristic, res.evaluation, inst.depth, inst.seed,
        res.expanded, res.generated, res.duplicates, res.swaps,
        "" if res.g is None else res.g, f"{res.time:.6f}",
        res.peak_open, res.peak_closed, res.tie_break, res.termination, solvable_flag,
    ]


def run(n: int, depths: List[int], per_depth: int, heuristics: List[str], evaluations: List[str],
        out: Path, tie_break: str = "fifo", timeout_sec: Optional[float] = None,
        max_expanded: Optional[int] = None, include_unsolvable: bool = False) -> int:
    """Write one CSV row per (instance, heuristic, evaluation); return the row count."""
    dom = NPuzzle(n)
    configs = [SearchConfig(heuristic=h, evaluation=e, tie_break=tie_break, timeout_sec=timeout_sec,
                            max_expanded=max_expanded, return_path=False)
               for h in heuristics for e in evaluations]
    insts = _gen(dom.scramble, dom.is_solvable, depths, per_depth)
    out.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            cases = [(inst.state, 1)]
            # Optional unsolvable variants (flip parity).
            if include_unsolvable:
                cases.append((make_unsolvable_variant(inst.state, dom.blank), 0))
            for state, solvable_flag in cases:
                for cfg in configs:
                    r = SlidingAStar(state, dom.GOAL, cfg).solve()
                    w.writerow(row_for(r, inst, solvable_flag))
                    rows += 1
            logger.info("seed=%d depth=%d done", inst.seed, inst.depth)
    return rows


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="A* N-puzzle experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--heuristics", nargs="+", default=["misplaced", "manhattan"])
    ap.add_argument("--evaluations", nargs="+", default=["g+h"])
    ap.add_argument("--tie_break", choices=["fifo", "lifo", "h", "g"], default="fifo")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--max_expanded", type=int, default=None)
    ap.add_argument("--include_unsolvable", action="store_true", help="Also test unsolvable variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("-v", "--verbose", action="count", default=0)
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    rows = run(args.n, args.depths, args.per_depth, args.heuristics, args.evaluations, args.out,
               tie_break=args.tie_break, timeout_sec=args.timeout_sec,
               max_expanded=args.max_expanded, include_unsolvable=args.include_unsolvable)
    print(f"Wrote {args.out} ({rows} rows)")


if __name__ == "__main__":
    main()
