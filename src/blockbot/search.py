"""Exhaustive placement search with one piece of lookahead.

For every rotation of the current piece the search walks from the leftmost to
the rightmost reachable column, drops the piece, and scores the resulting grid
with :meth:`blockbot.field.Grid.evaluate`.  When the next piece is known, each
candidate grid has its lines cleared and the best score of the next piece on
that grid is added to the candidate's own score.

Example usage
-------------

>>> from blockbot.field import Grid
>>> from blockbot.shape import Piece, ShapeType
>>> best = find_best(Grid(), Piece.spawn(ShapeType.I), combo=0)
>>> (best.rotation, best.offset, best.score)
(0, -3, 10.0)

Notes
-----
- ``offset`` counts columns to the left of the starting position; negative
  values mean the piece has to move right.
- Among equally scored placements the one enumerated last wins, and a best
  score of exactly ``0.0`` is always replaced by the next candidate.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .field import Grid
from .shape import ROTATIONS, Piece
from .stats import SearchStats


LOGGER = logging.getLogger(__name__)

# Score a fresh search starts from; any scored placement beats it.
INITIAL_SCORE = -1000.0

# Factor applied to the combo counter before it reaches ``Grid.evaluate``.
COMBO_MULTIPLIER = 2


@dataclass
class Best:
    """Best placement found so far by a search."""

    score: float = INITIAL_SCORE
    offset: int = 0
    rotation: int = 0
    evaluated: int = 0


@dataclass
class _Counters:
    placements: int = 0
    lookaheads: int = 0


class PlacementSearch:
    """Pick the rotation and horizontal offset that maximise the grid score.

    Key properties
    - Depth: one ply, or two when ``lookahead`` is enabled and a next piece is
      given.  The nested search never looks further ahead.
    - Inputs are not mutated: the piece is copied before rotating and every
      candidate is scored on its own grid copy.
    - ``stats`` accumulates counters and timings of top-level searches.
    """

    def __init__(
        self,
        *,
        lookahead: bool = True,
        combo_multiplier: int = COMBO_MULTIPLIER,
        stats: Optional[SearchStats] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.lookahead = lookahead
        self.combo_multiplier = combo_multiplier
        self.stats = stats
        self._clock = clock or time.perf_counter

    def search(
        self,
        grid: Grid,
        piece: Piece,
        combo: int,
        next_piece: Optional[Piece] = None,
    ) -> Best:
        """Return the best placement of ``piece`` on ``grid``.

        ``combo`` is the caller's count of consecutive clearing turns.
        ``next_piece`` should sit at its spawn position; it is ignored when
        lookahead is disabled.
        """

        counters = _Counters()
        start = self._clock()
        best = self._search(
            grid, piece, combo, next_piece if self.lookahead else None, counters
        )
        elapsed = self._clock() - start
        if self.stats is not None:
            self.stats.record(
                elapsed,
                placements=counters.placements,
                lookaheads=counters.lookaheads,
            )
        LOGGER.debug(
            "Best for %s (combo %d): rotation=%d offset=%d score=%.1f "
            "[%d placements, %d lookaheads, %.3fms]",
            piece.shape.value,
            combo,
            best.rotation,
            best.offset,
            best.score,
            counters.placements,
            counters.lookaheads,
            elapsed * 1000.0,
        )
        return best

    def _search(
        self,
        grid: Grid,
        piece: Piece,
        combo: int,
        next_piece: Optional[Piece],
        counters: _Counters,
    ) -> Best:
        best = Best()
        working = piece.copy()

        for rotation in range(ROTATIONS):
            if rotation:
                working.rotate_clockwise()

            scratch = working.copy()
            offset = 0
            while grid.can_shift_left(scratch):
                scratch.translate(-1, 0)
                offset += 1

            while grid.is_valid(scratch):
                rested = grid.drop(scratch)
                if grid.is_valid_at_rest(rested):
                    score = self._score(grid, rested, combo, next_piece, counters)
                    best.evaluated += 1
                    if score >= best.score or best.score == 0.0:
                        best.score = score
                        best.offset = offset
                        best.rotation = rotation
                offset -= 1
                scratch.translate(1, 0)
        return best

    def _score(
        self,
        grid: Grid,
        rested: Piece,
        combo: int,
        next_piece: Optional[Piece],
        counters: _Counters,
    ) -> float:
        counters.placements += 1
        branch = grid.copy()
        branch.place(rested)
        score = branch.evaluate(rested, combo * self.combo_multiplier)
        if next_piece is not None:
            cleared = branch.clear_completed_lines()
            counters.lookaheads += 1
            follow_up = self._search(
                branch, next_piece.copy(), combo + cleared, None, counters
            )
            score += follow_up.score
        return score


_DEFAULT_SEARCH = PlacementSearch()


def find_best(
    grid: Grid, piece: Piece, combo: int, next_piece: Optional[Piece] = None
) -> Best:
    """Run the default two-ply :class:`PlacementSearch`."""

    return _DEFAULT_SEARCH.search(grid, piece, combo, next_piece)


__all__ = ["Best", "PlacementSearch", "find_best", "INITIAL_SCORE", "COMBO_MULTIPLIER"]
