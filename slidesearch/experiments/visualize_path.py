#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from slidesearch.domains.board import Cells
from slidesearch.domains.puzzlen import NPuzzle
from slidesearch.domains.tokens import MARKER_A, MARKER_B, category
from slidesearch.experiments.common import add_search_args, setup_logging
from slidesearch.puzzles.loader import load_puzzle
from slidesearch.search.a_star import SlidingAStar
from slidesearch.search.config import SearchConfig

FILL = {MARKER_A: "#D55E00", MARKER_B: "#009E73"}


def draw_board(cells: Cells, out_path: Path, blank=0):
    n = len(cells)
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1, color="black")
        ax.plot([i, i], [0, n], linewidth=1, color="black")
    # tiles
    for r, row in enumerate(cells):
        for c, t in enumerate(row):
            if t == blank: continue
            color = FILL.get(category(t))
            if color is not None:
                ax.add_patch(plt.Rectangle((c, r), 1, 1, color=color, alpha=0.6))
            ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def build_instance(args):
    """(start, goal, config) from a puzzle file or a seeded N-puzzle scramble."""
    search = dict(tie_break=args.tie_break, timeout_sec=args.timeout_sec, max_expanded=args.max_expanded)
    if args.puzzle is not None:
        spec = load_puzzle(args.puzzle)
        return spec.initial, spec.goal, spec.to_config(heuristic=args.heuristic, evaluation=args.evaluation, **search)
    dom = NPuzzle(args.n)
    cfg = SearchConfig(heuristic=args.heuristic or "manhattan", evaluation=args.evaluation or "g+h", **search)
    return dom.scramble(args.depth, args.seed), dom.GOAL, cfg


def build_parser():
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--puzzle", type=Path, default=None, help="Puzzle file (otherwise a scrambled N-puzzle)")
    add_search_args(p, defaults=False)
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    start, goal, cfg = build_instance(args)
    res = SlidingAStar(start, goal, cfg).solve()
    if not res.solved:
        print(f"No path ({res.termination}). Try smaller depth.")
        return

    outdir = Path(args.outdir)
    blank = cfg.blank if cfg.moves == "blank" else None
    for i, b in enumerate(res.path):
        draw_board(b.cells, outdir / f"step_{i:03d}.png", blank=blank)
    print(f"Saved {len(res.path)} frames to {outdir}")


if __name__ == "__main__":
    main()
