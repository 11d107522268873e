"""
Move validator for N x N TicTacToe.
Validates that moves follow the rules.
"""

from numbers import Integral
from typing import Optional, List
from dataclasses import dataclass

from .errors import BoundsError, InvalidMarkerError
from .game_state import GameState, Marker, MoveResult


@dataclass
class ValidationResult:
    """Result of move validation."""
    result: MoveResult
    error_message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.result == MoveResult.ACCEPTED


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells

    The marker being placed is not checked against the current turn.
    """

    def validate_move(self, game_state: GameState, position) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            position: Board position to place a marker (0 to size-1).

        Returns:
            ValidationResult with the move result and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                result=MoveResult.REJECTED_GAME_OVER,
                error_message="Game is already over!"
            )

        if not self.in_bounds(game_state, position):
            return ValidationResult(
                result=MoveResult.REJECTED_OUT_OF_BOUNDS,
                error_message=f"Invalid position {position!r}. Must be 0-{game_state.size - 1}."
            )

        occupant = game_state.board[position]
        if occupant is not None:
            return ValidationResult(
                result=MoveResult.REJECTED_OCCUPIED,
                error_message=f"Cell {position} is already occupied by {occupant.value}!"
            )

        return ValidationResult(result=MoveResult.ACCEPTED)

    def in_bounds(self, game_state: GameState, position) -> bool:
        """True if position is an integer index on the board."""
        if isinstance(position, bool) or not isinstance(position, Integral):
            return False
        return 0 <= position < game_state.size

    def require_in_bounds(self, game_state: GameState, position) -> int:
        """
        Check a position for direct cell access.

        Raises:
            BoundsError: If position is not on the board.
        """
        if not self.in_bounds(game_state, position):
            raise BoundsError(position, game_state.size)
        return position

    def require_marker(self, player) -> Marker:
        """
        Check the value a move would place.

        Raises:
            InvalidMarkerError: If player is not a Marker.
        """
        if not isinstance(player, Marker):
            raise InvalidMarkerError(player)
        return player

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of free positions, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
