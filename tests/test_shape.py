import pytest

from blockbot.shape import BOX_SIZES, Piece, ShapeType, shape_cells


@pytest.mark.parametrize("shape", list(ShapeType))
def test_four_clockwise_turns_restore_cells(shape):
    piece = Piece(shape, position=(2, 5))
    original = sorted(piece.cells())
    for _ in range(4):
        piece.rotate_clockwise()
    assert piece.rotation == 0
    assert sorted(piece.cells()) == original


@pytest.mark.parametrize("shape", list(ShapeType))
def test_rotations_stay_inside_box(shape):
    size = BOX_SIZES[shape]
    for rotation in range(4):
        cells = shape_cells(shape, rotation)
        assert len(cells) == 4
        assert all(0 <= x < size and 0 <= y < size for x, y in cells)


def test_i_piece_turns_clockwise_around_fixed_anchor():
    piece = Piece(ShapeType.I, position=(0, 0))
    assert sorted(piece.cells()) == [(0, 1), (1, 1), (2, 1), (3, 1)]
    piece.rotate_clockwise()
    assert piece.position == (0, 0)
    assert sorted(piece.cells()) == [(2, 0), (2, 1), (2, 2), (2, 3)]
    piece.rotate_clockwise()
    assert sorted(piece.cells()) == [(0, 2), (1, 2), (2, 2), (3, 2)]


def test_t_piece_points_right_after_one_turn():
    piece = Piece(ShapeType.T, position=(0, 0))
    piece.rotate_clockwise()
    assert sorted(piece.cells()) == [(1, 0), (1, 1), (1, 2), (2, 1)]


def test_translate_and_copy_are_independent():
    piece = Piece(ShapeType.L, position=(3, -1))
    clone = piece.copy()
    clone.translate(-2, 4)
    clone.rotate_clockwise()
    assert piece.position == (3, -1)
    assert piece.rotation == 0
    assert clone.position == (1, 3)
    assert clone.top == 3


def test_spawn_positions():
    assert Piece.spawn(ShapeType.T).position == (3, -1)
    assert Piece.spawn("O").position == (4, -1)
    assert Piece.spawn("I").size == 4
    assert Piece.spawn("O").size == 2
    with pytest.raises(ValueError):
        Piece.spawn("X")
