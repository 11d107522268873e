"""
Tests for line enumeration and pure board evaluation.
"""

import pytest

from ttt_engine import GameState, Marker, Outcome, WinChecker
from ttt_engine.errors import InvalidBoardSizeError
from ttt_engine.win_checker import winning_lines

X, O = Marker.X, Marker.O


def board_from(rows):
    """Build a flat board from strings like 'XO.'."""
    symbols = {"X": X, "O": O, ".": None}
    return [symbols[ch] for row in rows for ch in row]


class TestWinningLines:
    def test_3x3_lines_in_checking_order(self):
        assert winning_lines(9) == (
            (0, 3, 6), (1, 4, 7), (2, 5, 8),   # columns
            (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
            (0, 4, 8),                         # main diagonal
            (2, 4, 6),                         # anti-diagonal
        )

    def test_4x4_diagonals(self):
        lines = winning_lines(16)
        assert len(lines) == 10
        assert lines[-2] == (0, 5, 10, 15)
        assert lines[-1] == (3, 6, 9, 12)

    def test_single_cell(self):
        assert winning_lines(1) == ((0,), (0,), (0,), (0,))

    @pytest.mark.parametrize("size", [4, 9, 16, 25, 36])
    def test_line_count_and_length(self, size):
        side = int(size ** 0.5)
        lines = winning_lines(size)
        assert len(lines) == 2 * side + 2
        assert all(len(line) == side for line in lines)
        assert all(isinstance(pos, int) for line in lines for pos in line)

    def test_cached_per_size(self):
        assert winning_lines(25) is winning_lines(25)

    def test_rejects_non_square(self):
        with pytest.raises(InvalidBoardSizeError):
            winning_lines(10)


class TestEvaluate:
    def setup_method(self):
        self.checker = WinChecker()

    def test_empty_board(self):
        assert self.checker.evaluate([None] * 9) == Outcome.NO_WINNER_YET

    def test_column(self):
        board = board_from(["XO.", "XO.", "X.."])
        assert self.checker.evaluate(board) == Outcome.X_WINS

    def test_row(self):
        board = board_from(["X.X", "OOO", "X.."])
        assert self.checker.evaluate(board) == Outcome.O_WINS

    def test_anti_diagonal(self):
        board = board_from(["XXO", ".O.", "OX."])
        assert self.checker.evaluate(board) == Outcome.O_WINS

    def test_tie(self):
        board = board_from(["XOX", "XOO", "OXX"])
        assert self.checker.evaluate(board) == Outcome.TIE

    def test_mixed_line_is_not_a_win(self):
        board = board_from(["XXO", "...", "..."])
        assert self.checker.evaluate(board) == Outcome.NO_WINNER_YET

    def test_evaluate_does_not_touch_state(self):
        state = GameState(size=9, board=board_from(["XXX", "OO.", "..."]))
        assert self.checker.evaluate(state.board) == Outcome.X_WINS
        assert state.is_game_over is False
        assert state.outcome is None


class TestUpdateGameState:
    def setup_method(self):
        self.checker = WinChecker()

    def test_latches_win(self):
        state = GameState(size=9, board=board_from(["XXX", "OO.", "..."]))
        assert self.checker.update_game_state(state) == Outcome.X_WINS
        assert state.is_game_over
        assert state.outcome == Outcome.X_WINS

    def test_no_latch_while_ongoing(self):
        state = GameState(size=9, board=board_from(["XX.", "OO.", "..."]))
        assert self.checker.update_game_state(state) == Outcome.NO_WINNER_YET
        assert not state.is_game_over

    def test_already_over(self):
        state = GameState(size=9, board=board_from(["XXX", "OO.", "..."]))
        self.checker.update_game_state(state)
        assert self.checker.update_game_state(state) == Outcome.ALREADY_OVER

    def test_check_winner_and_draw(self):
        win = GameState(size=9, board=board_from(["O..", ".O.", "XXO"]))
        tie = GameState(size=9, board=board_from(["XOX", "XOO", "OXX"]))
        assert self.checker.check_winner(win) == O
        assert self.checker.get_winning_line(win) == (0, 4, 8)
        assert self.checker.check_draw(win) is False
        assert self.checker.check_winner(tie) is None
        assert self.checker.check_draw(tie) is True
