#!/usr/bin/env python3
"""Solve one puzzle file and dump the path (console and optional file)."""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from slidesearch.experiments.common import add_search_args, setup_logging
from slidesearch.puzzles.loader import load_puzzle
from slidesearch.puzzles.render import render_path, render_summary
from slidesearch.search.a_star import SlidingAStar
from slidesearch.search.errors import SearchError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A* sliding / typed-swap puzzle solver")
    ap.add_argument("puzzle", type=Path, help="Puzzle definition file")
    add_search_args(ap, defaults=False)
    ap.add_argument("--moves", choices=["blank", "typed"], default=None,
                    help="Override the move rule inferred from the puzzle tokens")
    ap.add_argument("--style", choices=["plain", "grid"], default="plain")
    ap.add_argument("--out", type=Path, default=None, help="Also write the dump here")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        spec = load_puzzle(args.puzzle)
        cfg = spec.to_config(heuristic=args.heuristic, evaluation=args.evaluation,
                             moves=args.moves, tie_break=args.tie_break,
                             timeout_sec=args.timeout_sec, max_expanded=args.max_expanded)
        result = SlidingAStar(spec.initial, spec.goal, cfg).solve()
    except (OSError, SearchError) as e:
        logger.error("%s", e)
        return 2

    text = (render_path(result.path, args.style) + "\n") if result.solved else ""
    text += render_summary(result)
    print(text, end="")
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(text)
        logger.info("wrote %s", args.out)
    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
