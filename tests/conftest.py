from collections import deque

import pytest

from slidesearch.domains.board import Board
from slidesearch.domains.moves import BlankSwapMoves


def bfs_reachable(start, moves=None, target=None):
    """Brute-force distances from start; stops early once target is reached."""
    moves = moves or BlankSwapMoves(0)
    start = Board(start)
    dist = {start.cells: 0}
    q = deque([start])
    while q:
        b = q.popleft()
        if b.cells == target:
            break
        for a, c in moves.swaps(b):
            nxt = b.swap(a, c)
            if nxt.cells not in dist:
                dist[nxt.cells] = dist[b.cells] + 1
                q.append(nxt)
    return dist


@pytest.fixture
def goal3():
    return ((1, 2, 3), (4, 5, 6), (7, 8, 0))


@pytest.fixture
def scrambled3():
    # two blank moves away from goal3
    return ((1, 2, 3), (4, 0, 6), (7, 5, 8))
