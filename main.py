"""
Main entry point for Tic Tac Toe Classic.

Two players share one device. By default the Tkinter UI is launched;
--no-ui plays in the terminal instead.

Console commands:
    0-8        place a piece by cell index
    row col    place a piece by position (0-2 each)
    r          start a new round (scores are kept)
    s          show the scores
    q          quit
"""

import sys
from typing import Callable, Optional

from logic import __version__
from logic.game_state import MoveStatus, cell_to_index
from logic.session import GameSession
from logic.win_checker import Win


def parse_move(text: str) -> int:
    """
    Parse a console move.

    Args:
        text: "4", "1 1" or "1,1".

    Returns:
        Cell index (0-8).

    Raises:
        ValueError: If the text is not a move.
    """
    parts = text.replace(",", " ").split()
    if len(parts) == 1:
        index = int(parts[0])
        if not 0 <= index <= 8:
            raise ValueError(f"Cell {index} is off the board. Use 0-8.")
        return index
    if len(parts) == 2:
        return cell_to_index(int(parts[0]), int(parts[1]))
    raise ValueError(f"Can't read move {text!r}. Type a cell 0-8 or 'row col'.")


class TicTacToeConsole:
    """
    Terminal front end.

    Game flow:
    1. Show the board
    2. Read a move for the current player
    3. Report a win or tie and the score
    4. Repeat until 'q' or end of input
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        input_fn: Callable[[str], str] = input,
        snapshot_path: Optional[str] = None,
    ):
        """
        Initialize the console game.

        Args:
            session: Session to play. A new one is created if not provided.
            input_fn: Where moves come from (input() by default).
            snapshot_path: If set, save a PNG of each finished board here.
        """
        self.session = session or GameSession()
        self.input_fn = input_fn
        self.snapshot_path = snapshot_path
        self.is_running = False

    def start(self) -> GameSession:
        """Run the console game until the players quit."""
        print("\n" + "=" * 40)
        print("   Tic Tac Toe Classic")
        print("=" * 40)

        self.is_running = True
        print(self.session.game_state.render_text())

        while self.is_running:
            player = self.session.game_state.current_player
            try:
                line = self.input_fn(f"\n{player.symbol}> ").strip().lower()
            except EOFError:
                break

            if not line:
                continue
            if line == "q":
                break
            if line == "s":
                self._print_scores()
            elif line == "r":
                self._new_round()
            else:
                self._handle_move(line)

        self.is_running = False
        self._print_scores()
        print("Goodbye!")
        return self.session

    def _handle_move(self, line: str):
        try:
            index = parse_move(line)
        except ValueError as e:
            print(f"  ✗ {e}")
            return

        result = self.session.play(index)
        if not result.accepted:
            if result.status == MoveStatus.GAME_ALREADY_OVER:
                print("  ✗ Round is over. Type 'r' for a new round.")
            else:
                print(f"  ✗ {result.message}")
            return

        print(self.session.game_state.render_text())

        if result.status == MoveStatus.ROUND_OVER:
            if isinstance(result.outcome, Win):
                print(f"\n🏆 {result.outcome.player.symbol} wins with cells {list(result.outcome.line)}!")
            else:
                print("\n🤝 It's a tie!")
            self._print_scores()
            if self.snapshot_path:
                self._save_snapshot()
            print("Type 'r' for a new round or 'q' to quit.")

    def _new_round(self):
        print("\nResetting game...")
        self.session.new_round()
        print(self.session.game_state.render_text())

    def _print_scores(self):
        board = self.session.scoreboard
        print(f"\nScore: X {board.x_wins}  |  O {board.o_wins}  |  Ties {board.ties}")

    def _save_snapshot(self):
        from display.board_renderer import BoardRenderer

        renderer = BoardRenderer()
        renderer.save(renderer.render(self.session.game_state), self.snapshot_path)


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe Classic")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of the window"
    )
    parser.add_argument(
        "--snapshot",
        metavar="PATH",
        help="Console mode: save a PNG of each finished board to PATH"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    # Console mode (--no-ui)
    if args.no_ui:
        console = TicTacToeConsole(snapshot_path=args.snapshot)
        try:
            console.start()
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        return 0

    import tkinter as tk
    from ui import TicTacToeUI

    try:
        ui = TicTacToeUI()
    except tk.TclError as e:
        print(f"ERROR: Could not open a window ({e}). Try --no-ui.")
        return 1

    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
