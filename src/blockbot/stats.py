"""Counters and timings collected while searching for placements."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass
class SearchStats:
    """Aggregated information over a number of top-level searches."""

    searches: int = 0
    placements: int = 0
    lookaheads: int = 0
    total: float = 0.0
    min_time: Optional[float] = None
    max_time: float = 0.0

    def record(self, elapsed: float, *, placements: int, lookaheads: int) -> None:
        """Update the aggregates with one finished search."""

        self.searches += 1
        self.placements += placements
        self.lookaheads += lookaheads
        self.total += elapsed
        if self.min_time is None or elapsed < self.min_time:
            self.min_time = elapsed
        if elapsed > self.max_time:
            self.max_time = elapsed

    @property
    def average(self) -> float:
        """Return the average search time in seconds."""

        return self.total / self.searches if self.searches else 0.0

    def reset(self) -> None:
        self.searches = 0
        self.placements = 0
        self.lookaheads = 0
        self.total = 0.0
        self.min_time = None
        self.max_time = 0.0

    def as_dict(self) -> Dict[str, float | int]:
        summary = asdict(self)
        summary["min_time"] = self.min_time if self.min_time is not None else 0.0
        summary["average"] = self.average
        return summary


__all__ = ["SearchStats"]
