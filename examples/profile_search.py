"""Profile the placement search using :mod:`blockbot.stats`.

Run with::

    PYTHONPATH=src python examples/profile_search.py

Each turn plays the chosen placement on a shared board, clearing lines and
tracking the combo counter, and starts over on a fresh board when no viable
placement is left.  Pass ``--help`` to see the available options.
"""

from __future__ import annotations

import argparse
import logging
import random

from blockbot.field import Grid
from blockbot.search import PlacementSearch
from blockbot.shape import Piece, ShapeType
from blockbot.stats import SearchStats


LOGGER = logging.getLogger(__name__)


def play_turn(grid: Grid, search: PlacementSearch, current: ShapeType, upcoming: ShapeType, combo: int) -> int | None:
    """Play one turn on ``grid`` and return the new combo, or ``None`` on top-out."""

    piece = Piece.spawn(current)
    best = search.search(grid, piece, combo, Piece.spawn(upcoming))
    if best.evaluated == 0:
        return None
    for _ in range(best.rotation):
        piece.rotate_clockwise()
    piece.translate(-best.offset, 0)
    grid.place(grid.drop(piece))
    cleared = grid.clear_completed_lines()
    return combo + 1 if cleared else 0


def run_game(turns: int, search: PlacementSearch, rng: random.Random) -> int:
    grid = Grid()
    combo = 0
    shapes = list(ShapeType)
    upcoming = rng.choice(shapes)
    for turn in range(turns):
        current, upcoming = upcoming, rng.choice(shapes)
        result = play_turn(grid, search, current, upcoming, combo)
        if result is None:
            LOGGER.info("Topped out after %d turns", turn)
            return turn
        combo = result
    return turns


def format_stats(stats: SearchStats) -> str:
    summary = stats.as_dict()
    return (
        f"searches={int(summary['searches'])}, placements={int(summary['placements'])}, "
        f"lookaheads={int(summary['lookaheads'])}, avg={summary['average'] * 1000.0:.3f}ms, "
        f"min={summary['min_time'] * 1000.0:.3f}ms, max={summary['max_time'] * 1000.0:.3f}ms"
    )


def log_stats(stats: SearchStats, *, index: int) -> str:
    message = format_stats(stats)
    LOGGER.info("Game %d performance: %s", index, message)
    return message


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--turns", type=int, default=100, help="Maximum turns per game.")
    parser.add_argument("--games", type=int, default=1, help="How many games to play.")
    parser.add_argument("--seed", type=int, default=42, help="Seed for the piece sequence.")
    parser.add_argument(
        "--no-lookahead",
        dest="lookahead",
        action="store_false",
        help="Search the current piece only.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    rng = random.Random(args.seed)
    stats = SearchStats()
    search = PlacementSearch(lookahead=args.lookahead, stats=stats)
    for game_idx in range(1, args.games + 1):
        run_game(args.turns, search, rng)
        log_stats(stats, index=game_idx)
        stats.reset()


if __name__ == "__main__":
    main()
