"""
Tests for the front ends: board renderer, console game and Tkinter UI.

Usage:
    pytest test_display.py
"""

import sys
from pathlib import Path

import cv2
import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from display import BoardRenderer, DisplayConfig
from logic import GameSession, GameState, MoveStatus, Player
from main import TicTacToeConsole, main, parse_move


def scripted_input(lines):
    """Fake input() that replays lines, then hits end of input."""
    remaining = list(lines)

    def _input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


def test_render_shape_and_background():
    renderer = BoardRenderer()
    image = renderer.render(GameState())
    size = DisplayConfig.CELL_IMAGE_SIZE * 3
    assert image.shape == (size, size, 3)
    assert image.dtype == np.uint8
    # Bottom-right corner of cell 8 is plain background
    assert tuple(image[size - 10, size - 10]) == DisplayConfig.CELL_BG_COLOR


def test_render_markers():
    renderer = BoardRenderer()
    cfg = renderer.config
    game = GameState()
    game.attempt_move(0)   # X
    game.attempt_move(3)   # O

    image = renderer.render(game)
    half = cfg.CELL_IMAGE_SIZE // 2
    radius = half - cfg.MARKER_MARGIN

    # X crosses the middle of cell 0
    assert tuple(image[half, half]) == cfg.X_COLOR
    # O is a ring around the middle of cell 3, hollow in the centre
    ring_y = cfg.CELL_IMAGE_SIZE + half
    assert tuple(image[ring_y, half + radius]) == cfg.O_COLOR
    assert tuple(image[ring_y, half]) == cfg.CELL_BG_COLOR


def test_render_highlights_winning_line():
    renderer = BoardRenderer()
    cfg = renderer.config
    game = GameState()
    for index in [0, 3, 1, 4, 2]:
        game.attempt_move(index)

    image = renderer.render(game)
    half = cfg.CELL_IMAGE_SIZE // 2
    radius = half - cfg.MARKER_MARGIN

    # Winning cell keeps the winner's color
    assert np.allclose(image[half, half], cfg.X_COLOR, atol=2)
    # Losing O ring is dimmed toward the background
    ring = image[cfg.CELL_IMAGE_SIZE + half, half + radius].astype(int)
    assert ring[2] < cfg.O_COLOR[2] - 40


def test_cell_at():
    renderer = BoardRenderer()
    cell = renderer.config.CELL_IMAGE_SIZE
    assert renderer.cell_at(1, 1) == 0
    assert renderer.cell_at(cell * 2 + 5, 5) == 2
    assert renderer.cell_at(cell + 5, cell * 2 + 5) == 7
    assert renderer.cell_at(-1, 10) is None
    assert renderer.cell_at(cell * 3, 10) is None
    # Scaled display
    assert renderer.cell_at(299, 299, width=300, height=300) == 8


def test_save_snapshot(tmp_path):
    renderer = BoardRenderer()
    game = GameState()
    game.attempt_move(4)
    path = tmp_path / "out" / "board.png"

    written = renderer.save(renderer.render(game), str(path))

    assert written == str(path)
    loaded = cv2.imread(str(path))
    assert loaded.shape == (renderer.size, renderer.size, 3)


def test_parse_move():
    assert parse_move("4") == 4
    assert parse_move("1 2") == 5
    assert parse_move("2,0") == 6
    for bad in ("9", "x", "1 2 3", "3 0", "4.0"):
        with pytest.raises(ValueError):
            parse_move(bad)


def test_console_plays_two_rounds(capsys):
    lines = [
        "0", "3", "1", "4", "2",      # X wins the top row
        "5",                          # rejected, round is over
        "r",
        "4", "4",                     # second 4 is rejected
        "0", "q",
    ]
    console = TicTacToeConsole(input_fn=scripted_input(lines))

    session = console.start()

    out = capsys.readouterr().out
    assert "X wins with cells [0, 1, 2]" in out
    assert "Round is over" in out
    assert "already occupied" in out
    assert session.scoreboard.x_wins == 1
    assert session.game_state.move_count == 2
    assert session.game_state.current_player == Player.X


def test_console_snapshot(tmp_path):
    path = tmp_path / "final.png"
    lines = ["0", "1", "2", "4", "3", "5", "7", "6", "8"]
    console = TicTacToeConsole(input_fn=scripted_input(lines), snapshot_path=str(path))

    session = console.start()

    assert session.scoreboard.ties == 1
    assert path.exists()


def test_main_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "1.0.0" in capsys.readouterr().out


def test_ui_headless():
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("Tk unavailable in headless environment")

    root.withdraw()
    try:
        from ui import TicTacToeUI

        session = GameSession()
        app = TicTacToeUI(root, session=session)
        assert app.status_text() == "Player X's turn"

        for index in [0, 3, 1, 4]:
            assert app.select_cell(index).accepted
        assert app.announcement == "Player O placed a queen"

        result = app.select_cell(2)
        assert result.status == MoveStatus.ROUND_OVER
        assert app.status_text() == "X wins!"
        assert app.score_label.cget("text") == "X: 1  O: 0"

        assert app.select_cell(5).status == MoveStatus.GAME_ALREADY_OVER

        app.new_round()
        assert app.status_text() == "Player X's turn"
        assert app.score_label.cget("text") == "X: 1  O: 0"
    finally:
        root.destroy()


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
