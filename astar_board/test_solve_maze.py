import os

import pytest
from solve_maze import main, parse_args

BOARD_FILE = os.path.join(os.path.dirname(__file__), "board.txt")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.board == "board.txt"
    assert args.start == [0, 0]
    assert args.goal == [4, 5]
    assert not args.plot


def test_main_prints_solved_board(capsys):
    assert main([BOARD_FILE]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("🚦")
    assert lines[4].endswith("🏁   ")


def test_main_no_path(tmp_path, capsys):
    path = tmp_path / "walled.txt"
    path.write_text("0,1,0,\n1,0,0,\n")
    assert main([str(path), "--start", "0", "0", "--goal", "1", "2"]) == 1
    assert "No path found" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "No path found" in capsys.readouterr().out


def test_main_goal_off_board(capsys):
    assert main([BOARD_FILE, "--goal", "9", "9"]) == 2
    assert "outside the board" in capsys.readouterr().err


def test_main_bad_coordinate_type():
    with pytest.raises(SystemExit):
        parse_args(["--start", "a", "0"])


def test_main_start_on_obstacle(capsys):
    assert main([BOARD_FILE, "--start", "0", "1"]) == 2
    assert "obstacle" in capsys.readouterr().err
