"""
Tic Tac Toe Classic UI
A graphical interface for two players on one device, using Tkinter.

Shows:
- Running score (kept across rounds)
- Whose turn it is, or who won
- The board, with the winning line highlighted
- New Round, Save Board and Quit buttons
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from display.config import DisplayConfig
from display.board_renderer import BoardRenderer
from logic.game_state import Player, MoveResult
from logic.session import GameSession
from logic.win_checker import Win, Tie


class TicTacToeUI:
    """
    Main UI class for Tic Tac Toe Classic.
    """

    def __init__(self, root: Optional[tk.Tk] = None,
                 session: Optional[GameSession] = None,
                 config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.session = session or GameSession()
        self.renderer = BoardRenderer(self.config)

        self._photo: Optional[ImageTk.PhotoImage] = None
        self.announcement = ""

        self.root = root or tk.Tk()
        self._create_ui()
        self.refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.WINDOW_BG)
        self.root.minsize(cfg.WINDOW_MIN_WIDTH, cfg.WINDOW_MIN_HEIGHT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.WINDOW_BG)
        style.configure('TLabel', background=cfg.WINDOW_BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground=cfg.TITLE_TEXT_COLOR)
        style.configure('Score.TLabel', font=('Segoe UI', 13))
        style.configure('Turn.TLabel', font=('Segoe UI', 13, 'bold'))

        ttk.Label(main_frame, text=cfg.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 5))

        self.score_label = ttk.Label(main_frame, text="", style='Score.TLabel')
        self.score_label.pack()

        self.turn_label = ttk.Label(main_frame, text="", style='Turn.TLabel')
        self.turn_label.pack(pady=(0, 10))

        size = self.renderer.size
        self.board_canvas = tk.Canvas(main_frame, width=size, height=size, bg=cfg.WINDOW_BG,
                                      highlightthickness=0, cursor='hand2')
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=15)

        self.reset_btn = tk.Button(
            control_frame,
            text="🔄 New Round",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self.new_round
        )
        self.reset_btn.pack(side=tk.LEFT, padx=5)

        self.save_btn = tk.Button(
            control_frame,
            text="💾 Save Board",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self.save_board
        )
        self.save_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_canvas_click(self, event):
        """Translate a click on the board into a cell selection."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is not None:
            self.select_cell(index)

    def select_cell(self, index: int) -> MoveResult:
        """
        Play the current player's piece at index and redraw.

        Rejected moves (occupied cell, round over) are ignored.
        """
        result = self.session.play(index)
        if result.accepted:
            symbol = result.player.symbol
            self.announcement = self.config.PLACED_FORMAT.format(
                player=self.config.PLAYER_LABELS[symbol],
                piece=self.config.PIECE_NAMES[symbol],
            )
            self.refresh()
        return result

    def new_round(self):
        """Clear the board, keep the score."""
        print("Starting new round...")
        self.session.new_round()
        self.announcement = ""
        self.refresh()

    def save_board(self) -> Optional[str]:
        """Save the current board as a PNG."""
        image = self.renderer.render(self.session.game_state)
        return self.renderer.save(image)

    def refresh(self):
        """Update score, turn indicator and board."""
        self._update_score()
        self._update_turn_indicator()
        self._update_board_canvas()

    def _update_score(self):
        self.score_label.configure(text=self.session.scoreboard.format(self.config.SCORE_FORMAT))

    def status_text(self) -> str:
        """Text for the turn indicator."""
        cfg = self.config
        outcome = self.session.game_state.evaluate()
        if isinstance(outcome, Win):
            return cfg.WIN_FORMAT.format(symbol=outcome.player.symbol)
        if isinstance(outcome, Tie):
            return cfg.TIE_MESSAGE
        player = self.session.game_state.current_player
        return cfg.TURN_FORMAT.format(player=cfg.PLAYER_LABELS[player.symbol])

    def _status_color(self) -> str:
        cfg = self.config
        outcome = self.session.game_state.evaluate()
        if isinstance(outcome, Tie):
            return cfg.NEUTRAL_TEXT_COLOR
        player = outcome.player if isinstance(outcome, Win) else self.session.game_state.current_player
        return cfg.X_TEXT_COLOR if player == Player.X else cfg.O_TEXT_COLOR

    def _update_turn_indicator(self):
        self.turn_label.configure(text=self.status_text(), foreground=self._status_color())

    def _update_board_canvas(self):
        """Draw the rendered board onto the canvas."""
        frame = self.renderer.render(self.session.game_state)
        image = Image.fromarray(self.renderer.to_rgb(frame))
        photo = ImageTk.PhotoImage(image, master=self.root)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self._photo = photo  # Keep reference

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
