import pytest

from slidesearch.domains.board import Board, diff_positions, swapped_cells
from slidesearch.domains.moves import BlankSwapMoves, TypedSwapMoves, build_moves, children
from slidesearch.domains.tokens import category, is_numeric, sorted_goal
from slidesearch.heuristics.registry import build_heuristic
from slidesearch.search.errors import ConfigurationError
from slidesearch.search.evaluation import build_evaluation


def _kids(grid, moves):
    return [Board(grid).swap(a, b).cells for a, b in moves.swaps(Board(grid))]


def test_blank_centre_has_four_children_in_nsew_order():
    grid = ((1, 2, 3), (4, 0, 5), (6, 7, 8))
    assert _kids(grid, BlankSwapMoves()) == [
        ((1, 0, 3), (4, 2, 5), (6, 7, 8)),
        ((1, 2, 3), (4, 7, 5), (6, 0, 8)),
        ((1, 2, 3), (4, 5, 0), (6, 7, 8)),
        ((1, 2, 3), (0, 4, 5), (6, 7, 8)),
    ]


@pytest.mark.parametrize("grid,expected", [
    (((0, 1, 2), (3, 4, 5), (6, 7, 8)), 2),
    (((1, 0, 2), (3, 4, 5), (6, 7, 8)), 3),
    (((1, 2, 3), (4, 5, 6), (7, 8, 0)), 2),
])
def test_blank_edge_and_corner(grid, expected):
    kids = _kids(grid, BlankSwapMoves())
    assert len(kids) == expected
    assert len(set(kids)) == expected


def test_blank_children_move_the_blank():
    grid = ((1, 2, 3), (4, 0, 5), (6, 7, 8))
    for kid in _kids(grid, BlankSwapMoves()):
        diff = diff_positions(grid, kid)
        assert len(diff) == 2
        assert any(grid[r][c] == 0 for r, c in diff)


def test_blank_validate_requires_blank():
    with pytest.raises(ConfigurationError):
        BlankSwapMoves(0).validate(Board([[1, 2], [3, 4]]))


def test_custom_blank_token():
    kids = _kids((("_", "a"), ("b", "c")), BlankSwapMoves("_"))
    assert kids == [(("b", "a"), ("_", "c")), (("a", "_"), ("b", "c"))]


@pytest.mark.parametrize("a,b,legal", [
    (1, 2, False), ("R", "R", False), ("G", "G", False),
    (1, "R", True), ("G", 3, True), ("R", "G", True), ("G", "R", True),
    ("7", "R", True), ("X", "R", False), (True, "R", False),
])
def test_typed_swap_legality(a, b, legal):
    assert TypedSwapMoves().is_legal_swap(a, b) is legal


def test_typed_children_each_pair_once():
    grid = ((1, "R"), ("G", 2))
    kids = _kids(grid, TypedSwapMoves())
    assert kids == [
        (("R", 1), ("G", 2)),
        (("G", "R"), (1, 2)),
        ((1, 2), ("G", "R")),
        ((1, "R"), (2, "G")),
    ]


def test_typed_children_only_cross_category():
    grid = ((1, "R", 3), ("G", 2, "R"), (4, "G", 5))
    moves = TypedSwapMoves()
    for kid in _kids(grid, moves):
        (r1, c1), (r2, c2) = diff_positions(grid, kid)
        assert category(grid[r1][c1]) != category(grid[r2][c2])


def test_typed_all_numeric_board_is_stuck():
    assert _kids(((1, 2), (3, 4)), TypedSwapMoves()) == []


def test_children_metadata():
    goal = ((1, 2), (3, 0))
    parent = Board([[1, 2], [0, 3]], g=4)
    hfun = build_heuristic("misplaced", goal)
    evaluate = build_evaluation("g+h")
    kids = children(parent, BlankSwapMoves(), hfun, evaluate)
    assert len(kids) == 2
    for k in kids:
        assert k.parent is parent
        assert k.g == 5
        assert k.h == hfun(k.cells)
        assert k.f == k.g + k.h
        assert k.tokens() == parent.tokens()


def test_build_moves():
    assert isinstance(build_moves("blank"), BlankSwapMoves)
    assert isinstance(build_moves("Typed", marker_a="X", marker_b="Y"), TypedSwapMoves)
    with pytest.raises(ConfigurationError):
        build_moves("diagonal")


def test_sorted_goal():
    assert sorted_goal([[3, "G"], ["R", 1]]) == ((1, 3), ("R", "G"))
    assert sorted_goal([["G", "2", "R"], ["R", "1", "G"], [9, "G", 0]]) == (
        (0, "1", "2"), (9, "R", "R"), ("G", "G", "G"))


def test_sorted_goal_keeps_unknown_tokens_last():
    assert sorted_goal([["²", "R"], ["G", 1]]) == ((1, "R"), ("G", "²"))


@pytest.mark.parametrize("token,numeric", [
    (0, True), (12, True), ("7", True), ("²", False), ("R", False), (False, False),
])
def test_is_numeric(token, numeric):
    assert is_numeric(token) is numeric


def test_typed_validate_rejects_unknown_tokens():
    moves = TypedSwapMoves()
    moves.validate(Board([[1, "R"], ["G", 0]]))
    with pytest.raises(ConfigurationError, match="'X'"):
        moves.validate(Board([[1, "X"], ["R", "G"]]))
    TypedSwapMoves("X", "Y").validate(Board([[1, "X"], ["Y", 2]]))


def test_swapped_cells_leaves_source_alone():
    cells = ((1, 2), (3, 0))
    assert swapped_cells(cells, (1, 1), (0, 1)) == ((1, 0), (3, 2))
    assert cells == ((1, 2), (3, 0))
