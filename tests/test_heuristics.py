import random

import pytest

from slidesearch.heuristics.manhattan import goal_positions, manhattan
from slidesearch.heuristics.misplaced import misplaced
from slidesearch.heuristics.registry import build_heuristic, heuristic_name
from slidesearch.search.errors import ConfigurationError

GOAL = ((1, 2), (3, 0))


def test_misplaced_counts_cells():
    assert misplaced(((0, 1), (3, 2)), GOAL) == 3
    assert misplaced(GOAL, GOAL) == 0


def test_manhattan_sums_taxi_distance():
    # 0 -> (1,1): 2, 1 -> (0,0): 1, 2 -> (0,1): 1
    assert manhattan(((0, 1), (3, 2)), GOAL) == 4
    assert manhattan(GOAL, GOAL) == 0


def test_manhattan_uses_first_goal_occurrence():
    goal = ((1, "R"), ("R", "G"))
    assert goal_positions(goal)["R"] == (0, 1)
    # R at (0,0) measured to (0,1); 1 at (0,1) measured to (0,0)
    assert manhattan((("R", 1), ("R", "G")), goal) == 2


def test_manhattan_token_absent_from_goal():
    assert manhattan(((9, 2), (3, 0)), GOAL) == 1


@pytest.mark.parametrize("name", ["misplaced", "manhattan"])
@pytest.mark.parametrize("seed", range(20))
def test_non_negative_and_zero_only_on_goal(name, seed):
    rng = random.Random(seed)
    goal = ((1, 2, 3), (4, 5, 6), (7, 8, 0))
    flat = [t for row in goal for t in row]
    rng.shuffle(flat)
    state = tuple(tuple(flat[r * 3:(r + 1) * 3]) for r in range(3))
    h = build_heuristic(name, goal)
    assert h(goal) == 0
    assert h(state) >= 0
    assert (h(state) == 0) == (state == goal)


@pytest.mark.parametrize("sel,canon", [
    ("misplaced", "misplaced"), ("M", "misplaced"), (1, "misplaced"), ("misplaced-count", "misplaced"),
    ("manhattan", "manhattan"), ("taxi", "manhattan"), ("2", "manhattan"), ("Taxi_Distance", "manhattan"),
])
def test_selector_aliases(sel, canon):
    assert heuristic_name(sel) == canon


@pytest.mark.parametrize("sel", ["linear_conflict", "3", "", None])
def test_unknown_selector(sel):
    with pytest.raises(ConfigurationError):
        build_heuristic(sel, GOAL)
