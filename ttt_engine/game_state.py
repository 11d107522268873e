"""
Game state management for N x N TicTacToe.
Tracks the board, current player, and game result.
"""

import math
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .errors import InvalidBoardSizeError


class Marker(Enum):
    """The two players' symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Marker":
        """Get the opposite marker."""
        return Marker.O if self == Marker.X else Marker.X


class Outcome(Enum):
    """Result of checking the board for a winner."""
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    TIE = "tie"
    NO_WINNER_YET = "no_winner_yet"
    ALREADY_OVER = "already_over"

    @classmethod
    def win_for(cls, marker: Marker) -> "Outcome":
        """Get the winning outcome for a marker."""
        return cls.X_WINS if marker == Marker.X else cls.O_WINS

    @property
    def is_terminal(self) -> bool:
        """True for outcomes that end the game."""
        return self in (Outcome.X_WINS, Outcome.O_WINS, Outcome.TIE)

    @property
    def winner(self) -> Optional[Marker]:
        if self == Outcome.X_WINS:
            return Marker.X
        if self == Outcome.O_WINS:
            return Marker.O
        return None


class MoveResult(Enum):
    """
    Result of a move attempt.

    Only ACCEPTED is truthy, so a result can be tested like a boolean.
    """
    ACCEPTED = "accepted"
    REJECTED_OCCUPIED = "rejected_occupied"
    REJECTED_GAME_OVER = "rejected_game_over"
    REJECTED_OUT_OF_BOUNDS = "rejected_out_of_bounds"

    def __bool__(self) -> bool:
        return self == MoveResult.ACCEPTED


def side_length(size: int) -> int:
    """
    Get the side length of a square board.

    Args:
        size: Total number of cells.

    Returns:
        Integer square root of size.

    Raises:
        InvalidBoardSizeError: If size is not a positive perfect square.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidBoardSizeError(size)
    side = math.isqrt(size)
    if side * side != size:
        raise InvalidBoardSizeError(size)
    return side


@dataclass
class GameState:
    """
    The complete state of an N x N TicTacToe game.

    Tracks:
    - The board as a flat row-major list (None means empty)
    - Current player
    - Game status (ongoing, won, tie)
    """

    # Total number of cells (perfect square)
    size: int = 9

    # Flat board, cell (row, col) lives at row * side + col
    board: List[Optional[Marker]] = field(default_factory=list)

    # Current player's turn
    current_turn: Marker = Marker.X

    # Game result
    is_game_over: bool = False
    outcome: Optional[Outcome] = None

    def __post_init__(self):
        self.side = side_length(self.size)
        if not self.board:
            self.board = [None] * self.size
        elif len(self.board) != self.size:
            raise InvalidBoardSizeError(len(self.board))

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty positions on the board.

        Returns:
            List of positions in ascending order.
        """
        return [pos for pos, cell in enumerate(self.board) if cell is None]

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return all(cell is not None for cell in self.board)

    def reset(self):
        """Return every field to its initial value. X moves first."""
        self.board = [None] * self.size
        self.current_turn = Marker.X
        self.is_game_over = False
        self.outcome = None

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            size=self.size,
            board=list(self.board),
            current_turn=self.current_turn,
            is_game_over=self.is_game_over,
            outcome=self.outcome,
        )
