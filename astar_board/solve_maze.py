"""
Solve a board file with A* and print it with the path marked.

Example:
    python solve_maze.py board.txt --start 0 0 --goal 4 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import matplotlib.pyplot as plt
from grid_planner import solve_board
from render_board import print_board, show_board


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find a shortest 4-connected path on a board with A*."
    )
    parser.add_argument(
        "board",
        type=str,
        nargs="?",
        default="board.txt",
        help="Board file, one comma-separated row per line (0 = free).",
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        default=[0, 0],
        metavar=("X", "Y"),
        help="Start cell as row and column.",
    )
    parser.add_argument(
        "--goal",
        type=int,
        nargs=2,
        default=[4, 5],
        metavar=("X", "Y"),
        help="Goal cell as row and column.",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Also show the solved board in a matplotlib window.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s: %(message)s",
    )

    start = (args.start[0], args.start[1])
    goal = (args.goal[0], args.goal[1])
    try:
        result = solve_board(args.board, start, goal)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if not result.found:
        print("No path found")
        return 1

    print_board(result.board)
    if args.plot:
        show_board(result.board, title=f"A* {start} -> {goal}")
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
