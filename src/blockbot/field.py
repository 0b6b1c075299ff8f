"""Grid representation and heuristic evaluation of the playing field."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from .shape import Piece


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

# Heuristic weights used by :meth:`Grid.evaluate`.
HEIGHT_WEIGHT = -5
LINE_WEIGHT = 3
HOLE_WEIGHT = -10

Cells = NDArray[np.uint8]


class CellType(IntEnum):
    """State of a single cell, numbered as in the board encoding."""

    EMPTY = 0
    SHAPE = 1
    BLOCK = 2
    SOLID = 3


_RENDER_CHARS = {
    CellType.EMPTY: ".",
    CellType.SHAPE: "+",
    CellType.BLOCK: "#",
    CellType.SOLID: "X",
}


class Grid:
    """Playing field holding one :class:`CellType` per cell.

    Cells are stored in a ``(height, width)`` array indexed ``[y, x]`` with row
    ``0`` at the top.  Rows above the board (negative ``y``) are allowed for
    pieces in flight but never stored.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.cells: Cells = np.zeros((height, width), dtype=np.uint8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from row-major cell codes.

        Raises:
            ValueError: If the rows are ragged or contain an unknown code.
        """

        if len(rows) == 0 or len({len(row) for row in rows}) != 1:
            raise ValueError("Rows must be non-empty and of equal length")
        cells = np.asarray(rows, dtype=np.int16)
        if cells.min() < min(CellType) or cells.max() > max(CellType):
            raise ValueError("Unknown cell code")
        grid = cls(width=cells.shape[1], height=cells.shape[0])
        grid.cells = cells.astype(np.uint8)
        return grid

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[CellType]:
        """Return the state at ``(x, y)`` or ``None`` outside the board."""

        if self.in_bounds(x, y):
            return CellType(int(self.cells[y, x]))
        return None

    def set_cell(self, x: int, y: int, state: CellType) -> None:
        """Set the state at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        if not self.in_bounds(x, y):
            raise IndexError("Cell out of bounds")
        self.cells[y, x] = np.uint8(state)

    def place(self, piece: Piece) -> None:
        """Settle ``piece`` into the grid as ``BLOCK`` cells.

        Cells falling outside the board are skipped.
        """

        for x, y in piece.cells():
            if self.in_bounds(x, y):
                self.cells[y, x] = CellType.BLOCK

    # Validity -------------------------------------------------------------
    def _collides(self, x: int, y: int) -> bool:
        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return int(self.cells[y, x]) in (CellType.BLOCK, CellType.SOLID)

    def is_valid(self, piece: Piece) -> bool:
        """Return ``True`` if ``piece`` is inside the side and bottom walls
        and overlaps no ``BLOCK`` or ``SOLID`` cell.

        Cells above the top row are accepted.
        """

        return not any(self._collides(x, y) for x, y in piece.cells())

    def is_valid_at_rest(self, piece: Piece) -> bool:
        """Like :meth:`is_valid` but also require the piece to be fully on the board."""

        return self.is_valid(piece) and all(y >= 0 for _, y in piece.cells())

    def _can_move(self, piece: Piece, dx: int, dy: int) -> bool:
        moved = piece.copy()
        moved.translate(dx, dy)
        return self.is_valid(moved)

    def can_shift_left(self, piece: Piece) -> bool:
        return self._can_move(piece, -1, 0)

    def can_descend(self, piece: Piece) -> bool:
        return self._can_move(piece, 0, 1)

    def drop(self, piece: Piece) -> Piece:
        """Return a copy of ``piece`` moved straight down until it rests."""

        rested = piece.copy()
        while self.can_descend(rested):
            rested.translate(0, 1)
        return rested

    # Lines and holes ------------------------------------------------------
    def count_completed_lines(self) -> int:
        """Count rows that contain neither an ``EMPTY`` nor a ``SOLID`` cell."""

        filled = (self.cells != CellType.EMPTY) & (self.cells != CellType.SOLID)
        return int(np.count_nonzero(np.all(filled, axis=1)))

    def clear_completed_lines(self) -> int:
        """Remove rows made entirely of ``BLOCK`` cells and return how many went.

        Rows above a removed row drop down and empty rows enter at the top.
        """

        full_rows = np.all(self.cells == CellType.BLOCK, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.cells[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.cells.dtype)
            self.cells = np.vstack((new_rows, remaining))
        return cleared

    def count_holes(self) -> int:
        """Count ``EMPTY`` cells lying below a ``BLOCK`` in the same column."""

        covered = np.logical_or.accumulate(self.cells == CellType.BLOCK, axis=0)
        return int(np.count_nonzero(covered & (self.cells == CellType.EMPTY)))

    def evaluate(self, piece: Piece, combo: int) -> float:
        """Score the grid after ``piece`` has come to rest in it.

        Lower resting positions, simultaneous line clears (scaled by ``combo``)
        and fewer holes all raise the score.  Must be called before the
        completed lines are cleared.
        """

        height_term = (self.height - piece.top - piece.size) * HEIGHT_WEIGHT
        line_term = self.count_completed_lines() * combo * LINE_WEIGHT
        hole_term = self.count_holes() * HOLE_WEIGHT
        return float(height_term + line_term + hole_term)

    # Copies and views -----------------------------------------------------
    def copy(self) -> "Grid":
        grid = Grid(self.width, self.height)
        grid.cells = self.cells.copy()
        return grid

    def to_rows(self) -> List[List[int]]:
        return self.cells.astype(int).tolist()

    def render(self, piece: Optional[Piece] = None) -> str:
        """Return an ASCII picture of the grid with ``piece`` overlaid as ``SHAPE``."""

        rows = [[_RENDER_CHARS[CellType(int(v))] for v in row] for row in self.cells]
        if piece is not None:
            for x, y in piece.cells():
                if self.in_bounds(x, y):
                    rows[y][x] = _RENDER_CHARS[CellType.SHAPE]
        return "\n".join("".join(row) for row in rows)
