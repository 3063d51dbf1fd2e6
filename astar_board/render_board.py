from typing import Dict

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from board import Board, CellState, board_to_array

GLYPHS: Dict[CellState, str] = {
    CellState.OBSTACLE: "⛰️   ",
    CellState.PATH: "🚗   ",
    CellState.START: "🚦   ",
    CellState.FINISH: "🏁   ",
}
DEFAULT_GLYPH = "0   "

# One color per CellState value, in enum order.
STATE_COLORS = ["white", "dimgray", "lightsteelblue", "orange", "green", "red"]


def cell_string(cell: CellState) -> str:
    """
    Glyph for one cell. EMPTY and leftover CLOSED cells share the default.
    """
    return GLYPHS.get(cell, DEFAULT_GLYPH)


def board_to_text(board: Board) -> str:
    return "\n".join("".join(cell_string(cell) for cell in row) for row in board)


def print_board(board: Board) -> None:
    for row in board:
        print("".join(cell_string(cell) for cell in row))


def show_board(board: Board, ax=None, title: str = "A* Board"):
    """
    Draw the board with one color per cell state.

    Rows are drawn top to bottom, so the picture matches the text layout.
    Cells missing from short rows are left blank.
    """
    if ax is None:
        _, ax = plt.subplots()

    arr = np.ma.masked_less(board_to_array(board), 0)
    cmap = ListedColormap(STATE_COLORS)
    ax.imshow(arr, cmap=cmap, vmin=0, vmax=len(STATE_COLORS) - 1, origin="upper")
    ax.set_title(title)
    ax.set_xlabel("y")
    ax.set_ylabel("x")
    return ax
