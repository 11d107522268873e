"""
Tests for move validation and game state helpers.
"""

import numpy as np
import pytest

from ttt_engine import BoundsError, GameState, Marker, MoveResult, MoveValidator
from ttt_engine.errors import InvalidBoardSizeError, InvalidMarkerError


class TestMoveValidator:
    def setup_method(self):
        self.validator = MoveValidator()
        self.state = GameState(size=9)

    def test_valid_move(self):
        result = self.validator.validate_move(self.state, 4)
        assert result.is_valid
        assert result.result == MoveResult.ACCEPTED
        assert result.error_message is None

    def test_occupied(self):
        self.state.board[4] = Marker.O
        result = self.validator.validate_move(self.state, 4)
        assert result.result == MoveResult.REJECTED_OCCUPIED
        assert "occupied by O" in result.error_message

    def test_out_of_range(self):
        result = self.validator.validate_move(self.state, 9)
        assert result.result == MoveResult.REJECTED_OUT_OF_BOUNDS
        assert "0-8" in result.error_message

    def test_game_over_first(self):
        self.state.board[4] = Marker.X
        self.state.is_game_over = True
        assert self.validator.validate_move(self.state, 4).result == MoveResult.REJECTED_GAME_OVER
        assert self.validator.validate_move(self.state, -3).result == MoveResult.REJECTED_GAME_OVER

    def test_numpy_integer_position(self):
        assert self.validator.validate_move(self.state, np.int64(8)).is_valid

    def test_require_in_bounds(self):
        assert self.validator.require_in_bounds(self.state, 0) == 0
        with pytest.raises(BoundsError) as exc_info:
            self.validator.require_in_bounds(self.state, 9)
        assert exc_info.value.position == 9
        assert exc_info.value.size == 9

    def test_require_marker(self):
        assert self.validator.require_marker(Marker.O) == Marker.O
        with pytest.raises(InvalidMarkerError):
            self.validator.require_marker("O")

    def test_valid_moves(self):
        self.state.board[0] = Marker.X
        self.state.board[8] = Marker.O
        assert self.validator.get_valid_moves(self.state) == [1, 2, 3, 4, 5, 6, 7]
        self.state.is_game_over = True
        assert self.validator.get_valid_moves(self.state) == []


class TestGameState:
    def test_defaults(self):
        state = GameState()
        assert state.size == 9
        assert state.side == 3
        assert state.board == [None] * 9
        assert state.current_turn == Marker.X

    def test_board_length_must_match(self):
        with pytest.raises(InvalidBoardSizeError):
            GameState(size=9, board=[None] * 4)

    def test_copy_is_independent(self):
        state = GameState(size=4)
        state.board[0] = Marker.X
        clone = state.copy()
        clone.board[1] = Marker.O
        assert state.board[1] is None
        assert clone.board[0] == Marker.X
        assert clone.side == 2

    def test_reset(self):
        state = GameState(size=4, board=[Marker.X] * 4, current_turn=Marker.O, is_game_over=True)
        state.reset()
        assert state.board == [None] * 4
        assert state.current_turn == Marker.X
        assert not state.is_game_over
        assert state.outcome is None

    def test_marker_opposite(self):
        assert Marker.X.opposite() == Marker.O
        assert Marker.O.opposite() == Marker.X
