# board.py
import logging
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """
    State of a single board cell.

    Cells only move forward: EMPTY -> CLOSED -> PATH. OBSTACLE never changes.
    START and FINISH are written over the two endpoints once a path is found.
    """

    EMPTY = 0
    OBSTACLE = 1
    CLOSED = 2
    PATH = 3
    START = 4
    FINISH = 5


Board = List[List[CellState]]  # board[x][y], rows may differ in length
Coordinate = Tuple[int, int]  # (x, y) where x is the row, y the column


def in_bounds(board: Board, coord: Coordinate) -> bool:
    """
    Return True if coord indexes an existing cell. Each row is checked
    against its own length, so ragged boards are fine.
    """
    x, y = coord
    return 0 <= x < len(board) and 0 <= y < len(board[x])


def parse_line(line: str) -> List[CellState]:
    """
    Parse one text row such as "0,1,0,0," into cell states.

    Rules:
      - 0 is EMPTY, any other integer is OBSTACLE
      - whitespace around values and a trailing comma are ignored
      - parsing stops at the first token that is not an integer; the cells
        read before it are kept
    """
    parsed: List[CellState] = []
    for token in line.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            n = int(token)
        except ValueError:
            logger.debug("Stopping row parse at token %r", token)
            break
        parsed.append(CellState.EMPTY if n == 0 else CellState.OBSTACLE)
    return parsed


def read_board(path: str) -> Board:
    """
    Read a board file, one row per line.

    A missing or unreadable file gives an empty board instead of raising.
    """
    try:
        with open(path, encoding="utf-8") as f:
            board = [parse_line(line) for line in f]
    except OSError as exc:
        logger.warning("Could not read board %s: %s", path, exc)
        return []

    logger.debug("Loaded %d rows from %s", len(board), path)
    return board


def board_from_occupancy(occ: np.ndarray) -> Board:
    """
    Convert a 2D occupancy grid (nonzero = occupied, shape (H, W)) into a
    board indexed as board[row][col].
    """
    occ = np.asarray(occ)
    if occ.ndim != 2:
        raise ValueError(f"Expected a 2D occupancy grid, got shape {occ.shape}")
    return [
        [CellState.OBSTACLE if v != 0 else CellState.EMPTY for v in row]
        for row in occ.tolist()
    ]


def board_to_array(board: Board, fill: int = -1) -> np.ndarray:
    """
    Return the board as an int array of shape (rows, longest row).
    Missing cells of short rows are set to fill.
    """
    width = max((len(row) for row in board), default=0)
    arr = np.full((len(board), width), fill, dtype=np.int64)
    for x, row in enumerate(board):
        arr[x, : len(row)] = [int(cell) for cell in row]
    return arr


def random_board(
    rows: int,
    cols: int,
    obstacle_fraction: float = 0.2,
    seed: Optional[int] = None,
) -> Board:
    """
    Create a random rectangular board.

    Each cell independently becomes an obstacle with probability
    obstacle_fraction. The same seed always gives the same board.
    """
    if not 0.0 <= obstacle_fraction <= 1.0:
        raise ValueError("obstacle_fraction must lie in [0, 1]")

    rng = np.random.default_rng(seed)
    occ = (rng.random((rows, cols)) < obstacle_fraction).astype(np.uint8)
    return board_from_occupancy(occ)
