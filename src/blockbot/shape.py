"""Piece definitions and basic behaviour.

Every shape is described by the cells it fills inside a square rotation box.
The anchor of a :class:`Piece` is the top-left corner of that box, so rotating
a piece never moves its anchor; only the filled cells inside the box change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Cell = Tuple[int, int]  # (x, y)
RotationState = List[Cell]


class ShapeType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


# Side length of each shape's rotation box.
BOX_SIZES: Dict[ShapeType, int] = {
    ShapeType.I: 4,
    ShapeType.J: 3,
    ShapeType.L: 3,
    ShapeType.O: 2,
    ShapeType.S: 3,
    ShapeType.T: 3,
    ShapeType.Z: 3,
}

# Spawn orientation of every shape as (x, y) offsets inside its box.
_BASE_SHAPES: Dict[ShapeType, RotationState] = {
    ShapeType.I: [(0, 1), (1, 1), (2, 1), (3, 1)],
    ShapeType.J: [(0, 0), (0, 1), (1, 1), (2, 1)],
    ShapeType.L: [(2, 0), (0, 1), (1, 1), (2, 1)],
    ShapeType.O: [(0, 0), (1, 0), (0, 1), (1, 1)],
    ShapeType.S: [(1, 0), (2, 0), (0, 1), (1, 1)],
    ShapeType.T: [(1, 0), (0, 1), (1, 1), (2, 1)],
    ShapeType.Z: [(0, 0), (1, 0), (1, 1), (2, 1)],
}

ROTATIONS = 4

# Anchors used when a piece enters the board; ``O`` sits one column further
# right so its footprint stays centred.
SPAWN_POSITION: Cell = (3, -1)
O_SPAWN_POSITION: Cell = (4, -1)


def _rotate(state: RotationState, size: int) -> RotationState:
    """Return ``state`` rotated 90 degrees clockwise inside a ``size`` box."""

    rotated = [(size - 1 - y, x) for x, y in state]
    return sorted(rotated, key=lambda cell: (cell[1], cell[0]))


def _generate_rotations(state: RotationState, size: int) -> List[RotationState]:
    rotations = [sorted(state, key=lambda cell: (cell[1], cell[0]))]
    for _ in range(ROTATIONS - 1):
        rotations.append(_rotate(rotations[-1], size))
    return rotations


SHAPE_ROTATIONS: Dict[ShapeType, List[RotationState]] = {
    kind: _generate_rotations(state, BOX_SIZES[kind])
    for kind, state in _BASE_SHAPES.items()
}


def shape_cells(shape: ShapeType, rotation: int) -> RotationState:
    """Return the box offsets for ``shape`` at ``rotation``.

    Values of ``rotation`` are wrapped so any integer is accepted.
    """

    return SHAPE_ROTATIONS[shape][rotation % ROTATIONS]


@dataclass
class Piece:
    """A piece at a given rotation and anchor position."""

    shape: ShapeType
    rotation: int = 0
    position: Cell = SPAWN_POSITION  # (x, y) of the box's top-left corner

    @classmethod
    def spawn(cls, shape: ShapeType | str) -> "Piece":
        """Return ``shape`` at its entry point one row above the board."""

        shape = ShapeType(shape)
        position = O_SPAWN_POSITION if shape is ShapeType.O else SPAWN_POSITION
        return cls(shape, position=position)

    @property
    def size(self) -> int:
        """Side length of the rotation box, i.e. the vertical span used when scoring."""

        return BOX_SIZES[self.shape]

    @property
    def top(self) -> int:
        return self.position[1]

    def rotate_clockwise(self) -> None:
        self.rotation = (self.rotation + 1) % ROTATIONS

    def translate(self, dx: int, dy: int) -> None:
        """Move the anchor by ``dx`` columns and ``dy`` rows."""

        x, y = self.position
        self.position = (x + dx, y + dy)

    def cells(self) -> List[Cell]:
        """Return the board coordinates covered by this piece."""

        x, y = self.position
        return [(x + dx, y + dy) for dx, dy in shape_cells(self.shape, self.rotation)]

    def copy(self) -> "Piece":
        return Piece(self.shape, self.rotation, self.position)
