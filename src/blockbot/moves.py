"""Turn a search result into the primitive moves sent back to the game."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from .field import Grid
from .search import Best, PlacementSearch, find_best
from .shape import Cell, Piece, ShapeType


class MoveType(str, Enum):
    """Primitive moves understood by the game engine."""

    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TURNLEFT = "turnleft"
    TURNRIGHT = "turnright"
    DROP = "drop"


def plan_moves(best: Best) -> List[MoveType]:
    """Return the move sequence reaching ``best`` from the starting position.

    Rotations come first, then the horizontal shift, then a hard drop.
    """

    moves = [MoveType.TURNRIGHT] * best.rotation
    if best.offset < 0:
        moves.extend([MoveType.RIGHT] * -best.offset)
    else:
        moves.extend([MoveType.LEFT] * best.offset)
    moves.append(MoveType.DROP)
    return moves


def choose_moves(
    grid: Grid,
    shape: ShapeType | str,
    position: Cell,
    next_shape: Optional[ShapeType | str],
    combo: int,
    *,
    search: Optional[PlacementSearch] = None,
) -> List[MoveType]:
    """Pick the moves for the piece currently falling at ``position``.

    The next piece, when known, is considered from its spawn position.
    """

    piece = Piece(ShapeType(shape), position=position)
    next_piece = Piece.spawn(next_shape) if next_shape is not None else None
    if search is None:
        best = find_best(grid, piece, combo, next_piece)
    else:
        best = search.search(grid, piece, combo, next_piece)
    return plan_moves(best)


def format_moves(moves: Iterable[MoveType]) -> str:
    """Join ``moves`` into the comma separated form used by the game."""

    return ",".join(move.value for move in moves)


__all__ = ["MoveType", "plan_moves", "choose_moves", "format_moves"]
