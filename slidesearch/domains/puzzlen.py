from __future__ import annotations
from typing import Dict, List, Tuple
import random

from slidesearch.domains.board import Cells, Pos, swapped_cells


class NPuzzle:
    """Generic N×N sliding-tile instances (0 is the blank) for batch experiments."""
    def __init__(self, n: int, blank: int = 0):
        assert n >= 2
        self.N = n
        self.blank = blank
        flat = list(range(1, n * n)) + [blank]
        self.GOAL: Cells = tuple(tuple(flat[r * n:(r + 1) * n]) for r in range(n))
        # Precompute neighbours for blank moves
        self._nei: Dict[Pos, Tuple[Pos, ...]] = {}
        for r in range(n):
            for c in range(n):
                moves = []
                if r > 0:       moves.append((r - 1, c))
                if r < n - 1:   moves.append((r + 1, c))
                if c < n - 1:   moves.append((r, c + 1))
                if c > 0:       moves.append((r, c - 1))
                self._nei[(r, c)] = tuple(moves)

    def _blank_pos(self, s: Cells) -> Pos:
        for r, row in enumerate(s):
            for c, t in enumerate(row):
                if t == self.blank:
                    return r, c
        raise ValueError("no blank on board")

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: int) -> Cells:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = self._blank_pos(s)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            s = swapped_cells(s, z, j)
            last_blank = z
        return s

    def is_solvable(self, s: Cells) -> bool:
        """Solvability rules (goal has the blank bottom-right):
           - N odd: inversions must be even
           - N even: (inversions + blank_row_from_bottom) must be ODD
             (row count is 1-based from the bottom)
        """
        arr = [x for row in s for x in row if x != self.blank]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.N - self._blank_pos(s)[0]
        return ((inv + blank_row_from_bottom) % 2) == 1


def make_unsolvable_variant(s: Cells, blank: int = 0) -> Cells:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    n = len(s)
    flat: List = [t for row in s for t in row]
    i = next(k for k, v in enumerate(flat) if v != blank)
    j = next(k for k, v in enumerate(flat[i + 1:], start=i + 1) if v != blank)
    flat[i], flat[j] = flat[j], flat[i]
    return tuple(tuple(flat[r * n:(r + 1) * n]) for r in range(n))
