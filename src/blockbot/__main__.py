"""Small command line demo for the placement search.

Run with: `python -m blockbot --current T --next O`

The current piece starts at its spawn position on an empty board.  The chosen move
sequence is printed together with the board showing where the piece rests.
"""

from __future__ import annotations

import argparse
import logging

from . import Grid, MoveType, Piece, PlacementSearch, ShapeType, format_moves, plan_moves


def _final_piece(grid: Grid, piece: Piece, moves: list[MoveType]) -> Piece:
    final = piece.copy()
    for move in moves:
        if move is MoveType.TURNRIGHT:
            final.rotate_clockwise()
        elif move is MoveType.LEFT:
            final.translate(-1, 0)
        elif move is MoveType.RIGHT:
            final.translate(1, 0)
    return grid.drop(final)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    shapes = [s.value for s in ShapeType]
    parser.add_argument("--current", choices=shapes, default="T", help="Falling piece.")
    parser.add_argument("--next", choices=shapes, default=None, help="Preview piece.")
    parser.add_argument("--combo", type=int, default=0, help="Current combo counter.")
    parser.add_argument(
        "--no-lookahead",
        dest="lookahead",
        action="store_false",
        help="Ignore the preview piece.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g. DEBUG, INFO).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    grid = Grid()
    piece = Piece.spawn(args.current)
    next_piece = Piece.spawn(args.next) if args.next else None
    best = PlacementSearch(lookahead=args.lookahead).search(grid, piece, args.combo, next_piece)
    moves = plan_moves(best)

    print(format_moves(moves))
    print(grid.render(_final_piece(grid, piece, moves)))


if __name__ == "__main__":
    main()
