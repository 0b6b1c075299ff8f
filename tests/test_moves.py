from blockbot.field import Grid
from blockbot.moves import MoveType, choose_moves, format_moves, plan_moves
from blockbot.search import Best, PlacementSearch
from blockbot.shape import ShapeType
from blockbot.stats import SearchStats


def test_plan_moves_turns_then_shifts_right_then_drops():
    moves = plan_moves(Best(score=1.0, offset=-3, rotation=2))
    assert moves == [
        MoveType.TURNRIGHT,
        MoveType.TURNRIGHT,
        MoveType.RIGHT,
        MoveType.RIGHT,
        MoveType.RIGHT,
        MoveType.DROP,
    ]


def test_plan_moves_shifts_left_for_positive_offset():
    assert plan_moves(Best(offset=2)) == [MoveType.LEFT, MoveType.LEFT, MoveType.DROP]
    assert plan_moves(Best()) == [MoveType.DROP]


def test_format_moves_uses_protocol_words():
    assert format_moves([MoveType.TURNRIGHT, MoveType.LEFT, MoveType.DROP]) == "turnright,left,drop"


def test_choose_moves_on_empty_board():
    moves = choose_moves(Grid(), "I", (3, -1), None, 0)
    assert format_moves(moves) == "right,right,right,drop"


def test_choose_moves_uses_given_search_and_next_piece():
    stats = SearchStats()
    moves = choose_moves(
        Grid(),
        ShapeType.T,
        (3, -1),
        ShapeType.O,
        0,
        search=PlacementSearch(stats=stats),
    )
    assert moves[-1] is MoveType.DROP
    assert stats.searches == 1
    assert stats.lookaheads > 0
