from __future__ import annotations
import argparse
import logging
from typing import Optional


def setup_logging(verbosity: int = 0, format_string: Optional[str] = None) -> None:
    """-v -> INFO, -vv -> DEBUG; warnings only by default."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"
    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


def add_search_args(ap: argparse.ArgumentParser, defaults: bool = True) -> None:
    """Options shared by every tool that runs a search."""
    ap.add_argument("--heuristic", default="manhattan" if defaults else None,
                    help="misplaced | manhattan (or file codes 1 | 2)")
    ap.add_argument("--evaluation", default="g+h" if defaults else None,
                    help="h | g | g+h (or file codes 1 | 2 | 3)")
    ap.add_argument("--tie_break", choices=["fifo", "lifo", "h", "g"], default="fifo")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-search wall time")
    ap.add_argument("--max_expanded", type=int, default=None, help="Per-search expansion budget")
    ap.add_argument("-v", "--verbose", action="count", default=0)
