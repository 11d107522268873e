"""
Win checker for N x N TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from functools import lru_cache
from typing import Optional, Sequence, Tuple

import numpy as np

from .game_state import GameState, Marker, Outcome, side_length

Line = Tuple[int, ...]


@lru_cache(maxsize=None)
def winning_lines(size: int) -> Tuple[Line, ...]:
    """
    Build every winning line for a board of `size` cells.

    Lines come in checking order: all columns, all rows, the
    top-left to bottom-right diagonal, then the top-right to
    bottom-left diagonal.

    Args:
        size: Total number of cells (perfect square).

    Returns:
        Tuple of lines, each a tuple of board positions.
    """
    side = side_length(size)
    grid = np.arange(size).reshape(side, side)

    lines = []
    lines.extend(tuple(col) for col in grid.T.tolist())
    lines.extend(tuple(row) for row in grid.tolist())
    lines.append(tuple(np.diagonal(grid).tolist()))
    lines.append(tuple(np.fliplr(grid).diagonal().tolist()))
    return tuple(lines)


class WinChecker:
    """
    Checks for win conditions in N x N TicTacToe.

    Win condition: a full row, column or main diagonal
    holding the same marker.
    """

    def evaluate(self, board: Sequence[Optional[Marker]]) -> Outcome:
        """
        Evaluate a board without touching any game state.

        Args:
            board: Flat row-major board.

        Returns:
            X_WINS, O_WINS, TIE or NO_WINNER_YET.
        """
        winner, _ = self._find_winner(board)
        if winner is not None:
            return Outcome.win_for(winner)
        if all(cell is not None for cell in board):
            return Outcome.TIE
        return Outcome.NO_WINNER_YET

    def check_winner(self, game_state: GameState) -> Optional[Marker]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Marker, or None if no winner yet.
        """
        winner, _ = self._find_winner(game_state.board)
        return winner

    def check_draw(self, game_state: GameState) -> bool:
        """True if the board is full with no completed line."""
        return self.evaluate(game_state.board) == Outcome.TIE

    def update_game_state(self, game_state: GameState) -> Outcome:
        """
        Detect a result and latch it into the game state.

        Evaluation is pure; the state is only written when a win or
        tie is found for the first time. A state that is already over
        is not re-scanned.

        Args:
            game_state: The game state to update.

        Returns:
            The detected outcome, or ALREADY_OVER.
        """
        if game_state.is_game_over:
            return Outcome.ALREADY_OVER

        outcome = self.evaluate(game_state.board)
        if outcome.is_terminal:
            game_state.is_game_over = True
            game_state.outcome = outcome
        return outcome

    def get_winning_line(self, game_state: GameState) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as a tuple of positions, or None.
        """
        _, line = self._find_winner(game_state.board)
        return line

    def _find_winner(
        self,
        board: Sequence[Optional[Marker]]
    ) -> Tuple[Optional[Marker], Optional[Line]]:
        """Return the first completed line and its marker."""
        for line in winning_lines(len(board)):
            winner = self._check_line(board, line)
            if winner is not None:
                return winner, line
        return None, None

    def _check_line(
        self,
        board: Sequence[Optional[Marker]],
        line: Line
    ) -> Optional[Marker]:
        """
        Check if a single line has a winner.

        Returns:
            The marker filling the whole line, None otherwise.
        """
        first = board[line[0]]
        if first is None:
            return None  # Empty cell, no winner on this line
        for pos in line[1:]:
            if board[pos] != first:
                return None
        return first
