import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from board import CellState
from grid_planner import search
from render_board import DEFAULT_GLYPH, board_to_text, cell_string, print_board, show_board


def test_cell_string_glyphs():
    assert cell_string(CellState.OBSTACLE) == "⛰️   "
    assert cell_string(CellState.PATH) == "🚗   "
    assert cell_string(CellState.START) == "🚦   "
    assert cell_string(CellState.FINISH) == "🏁   "
    assert cell_string(CellState.EMPTY) == DEFAULT_GLYPH
    assert cell_string(CellState.CLOSED) == DEFAULT_GLYPH


def test_board_to_text_rows():
    board = [
        [CellState.START, CellState.OBSTACLE],
        [CellState.FINISH],
    ]
    assert board_to_text(board) == "🚦   ⛰️   \n🏁   "


def test_print_board_matches_text(capsys):
    board = [[CellState.EMPTY] * 3 for _ in range(2)]
    result = search(board, (0, 0), (1, 2))
    print_board(result.board)
    out = capsys.readouterr().out
    assert out == board_to_text(result.board) + "\n"
    assert out.splitlines()[0].startswith("🚦")


def test_show_board_masks_ragged_cells():
    board = [[CellState.EMPTY, CellState.OBSTACLE, CellState.PATH], [CellState.START]]
    ax = show_board(board, title="ragged")
    image = ax.get_images()[0].get_array()

    assert ax.get_title() == "ragged"
    assert image.shape == (2, 3)
    assert np.ma.is_masked(image)
    assert image.mask.tolist() == [[False, False, False], [False, True, True]]
    plt.close(ax.figure)
