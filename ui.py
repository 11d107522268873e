"""
TicTacToe UI
A graphical interface for N x N TicTacToe using Tkinter.

Shows:
- The board as a grid of buttons
- Whose turn it is
- The game result, with the winning line highlighted
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from ttt_engine import BoardEngine, EngineConfig, Outcome


class TicTacToeUI:
    """
    Main UI class. Owns one engine for the lifetime of the window
    and forwards clicks to it.
    """

    def __init__(self, engine: Optional[BoardEngine] = None, config: Optional[EngineConfig] = None):
        """Initialize the UI."""
        self.config = config or (engine.config if engine else EngineConfig())
        self.engine = engine or BoardEngine(config=self.config)

        self._create_ui()
        self._update_board_display()
        self._update_game_info()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND_COLOR)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND_COLOR)
        style.configure('TLabel', background=cfg.BACKGROUND_COLOR, foreground='white', font=cfg.LABEL_FONT)
        style.configure('Result.TLabel', foreground=cfg.RESULT_COLOR)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Board grid
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        side = self.engine.side
        self.board_cells = []
        for position in range(self.engine.size):
            cell = tk.Button(
                self.board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=3,
                height=1,
                bg=cfg.CELL_COLOR,
                fg='white',
                activebackground=cfg.CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                command=lambda p=position: self._on_cell_click(p)
            )
            cell.grid(row=position // side, column=position % side, padx=2, pady=2)
            self.board_cells.append(cell)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        self.result_label = ttk.Label(main_frame, text="", style='Result.TLabel')
        self.result_label.pack(pady=5)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, position: int):
        """Play the current turn's marker at the clicked cell."""
        self.engine.perform_move(position, self.engine.get_current_turn())
        self._update_board_display()
        self._check_win()
        self._update_game_info()

    def _check_win(self):
        """Show the result once the game ends."""
        outcome = self.engine.check_for_winner()
        if outcome in (Outcome.NO_WINNER_YET, Outcome.ALREADY_OVER):
            return

        self.result_label.configure(text=self.engine.result_message())
        for position in self.engine.get_winning_line() or ():
            self.board_cells[position].configure(bg=self.config.WIN_CELL_COLOR)

    def _update_board_display(self):
        """Update the board grid from the engine."""
        for cell, marker in zip(self.board_cells, self.engine.get_current_board()):
            if marker is None:
                cell.configure(text="", bg=self.config.CELL_COLOR)
            else:
                cell.configure(text=marker.value, fg=self.config.MARKER_COLORS[marker.value])

    def _update_game_info(self):
        """Update the turn label."""
        if self.engine.is_game_over:
            self.turn_label.configure(text="Game over")
        else:
            self.turn_label.configure(text=f"Turn: {self.engine.get_current_turn().value}")

    def _reset_game(self):
        """Start a new game."""
        self.engine.clear_board()
        self._update_board_display()
        self.result_label.configure(text="")
        self._update_game_info()
        print("Game reset")

    def _quit(self):
        """Close the window."""
        self.root.destroy()

    def run(self):
        """Start the Tkinter main loop."""
        self.root.mainloop()


def main(size: Optional[int] = None, config: Optional[EngineConfig] = None):
    """Open a window for a new game."""
    app = TicTacToeUI(BoardEngine(size, config))
    app.run()


if __name__ == "__main__":
    main()
