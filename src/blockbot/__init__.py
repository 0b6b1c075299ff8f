"""Placement search for a falling-block puzzle bot."""

from .shape import Piece, ShapeType, shape_cells
from .field import CellType, Grid
from .search import Best, PlacementSearch, find_best
from .moves import MoveType, choose_moves, format_moves, plan_moves
from .stats import SearchStats

__all__ = [
    "Piece",
    "ShapeType",
    "CellType",
    "Grid",
    "Best",
    "PlacementSearch",
    "SearchStats",
    "MoveType",
    "find_best",
    "choose_moves",
    "plan_moves",
    "format_moves",
    "shape_cells",
]
