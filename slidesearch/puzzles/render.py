from __future__ import annotations
from typing import Iterable

from slidesearch.domains.board import Board


def render_board(board: Board, style: str = "plain") -> str:
    """
    plain: every cell followed by a space, one row per line.
    grid:  cells joined by '|', rows separated by a '--'-per-cell ruler.
    """
    rows = [[str(t) for t in row] for row in board.cells]
    if style == "plain":
        return "\n".join("".join(f"{t} " for t in row) for row in rows) + "\n"
    if style == "grid":
        ruler = "-".join("--" for _ in range(board.n))
        return ("\n" + ruler + "\n").join("|".join(row) for row in rows) + "\n"
    raise ValueError(f"unknown board style: {style!r}")


def render_path(path: Iterable[Board], style: str = "plain") -> str:
    return "\n".join(render_board(b, style) for b in path)


def render_summary(result) -> str:
    if not result.solved:
        head = "no solution" if result.exhausted else f"search aborted ({result.termination})"
        return f"{head}\nNumber of boards searched: {result.expanded}\n"
    return (f"Runtime: {result.time * 1000:.0f} ms\n"
            f"Number of swaps: {result.swaps}\n"
            f"Number of boards searched: {result.expanded}\n")
