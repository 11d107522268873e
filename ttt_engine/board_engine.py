"""
Board engine for N x N TicTacToe.

Ties together the game state, move validation and win detection
behind the small call surface a UI drives:

    engine = BoardEngine(9)
    engine.perform_move(4, engine.get_current_turn())
    outcome = engine.check_for_winner()
"""

from typing import Optional, List, Tuple

from .config import EngineConfig
from .game_state import GameState, Marker, MoveResult, Outcome
from .move_validator import MoveValidator
from .win_checker import WinChecker, Line

Board = Tuple[Optional[Marker], ...]


class BoardEngine:
    """
    Rules engine for one game.

    Game flow:
    1. Caller passes the current turn's marker to perform_move()
    2. Caller calls check_for_winner() once per move
    3. A win or tie latches the game as over until clear_board()

    Each UI window or console session owns its own engine.
    """

    def __init__(self, size: Optional[int] = None, config: Optional[EngineConfig] = None):
        """
        Initialize the engine with an empty board.

        Args:
            size: Total number of cells, a perfect square. Defaults to
                config.DEFAULT_GAME_SIZE.
            config: Engine settings.

        Raises:
            InvalidBoardSizeError: If size is not a positive perfect square.
        """
        self.config = config or EngineConfig()
        self.state = GameState(
            size=self.config.DEFAULT_GAME_SIZE if size is None else size,
            current_turn=Marker.X,
        )
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.state.size

    @property
    def side(self) -> int:
        """Side length of the board."""
        return self.state.side

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def outcome(self) -> Optional[Outcome]:
        """Latched result, None while the game is ongoing."""
        return self.state.outcome

    def get_current_turn(self) -> Marker:
        """Get the marker whose turn it is."""
        return self.state.current_turn

    def perform_move(self, position: int, player: Marker) -> MoveResult:
        """
        Place a marker if the move is legal.

        The marker is taken from the caller and is not checked
        against the current turn; pass get_current_turn() to keep
        turns consistent, or use perform_current_move().

        Args:
            position: Board position from 0 to size-1.
            player: Marker to place.

        Raises:
            InvalidMarkerError: If player is not a Marker.

        Returns:
            ACCEPTED if the marker was placed and the turn flipped,
            otherwise the reason the move was rejected. The board and
            turn are unchanged on rejection.
        """
        player = self.validator.require_marker(player)
        validation = self.validator.validate_move(self.state, position)
        if not validation.is_valid:
            if self.config.VERBOSE:
                print(validation.error_message)
            return validation.result

        self.state.board[position] = player
        self.state.current_turn = self.state.current_turn.opposite()
        return MoveResult.ACCEPTED

    def perform_current_move(self, position: int) -> MoveResult:
        """Place the current turn's marker at position."""
        return self.perform_move(position, self.state.current_turn)

    def check_for_winner(self) -> Outcome:
        """
        Check the board for a win or tie and latch it.

        Lines are checked in order: columns, rows, the main diagonal,
        the anti-diagonal, then a full board counts as a tie. The
        first win or tie found ends the game; later calls return
        ALREADY_OVER without scanning until clear_board().

        Returns:
            X_WINS, O_WINS, TIE, NO_WINNER_YET or ALREADY_OVER.
        """
        outcome = self.win_checker.update_game_state(self.state)
        if self.config.VERBOSE and outcome.is_terminal:
            print(self.result_message())
        return outcome

    def get_current_board(self) -> Board:
        """Get a read-only snapshot of the board."""
        return tuple(self.state.board)

    def clear_board(self) -> Board:
        """
        Empty the board and start a new game.

        Allowed at any time, including mid-game and after the game
        is over.

        Returns:
            The empty board.
        """
        self.state.reset()
        return self.get_current_board()

    def get_cell(self, position: int) -> Optional[Marker]:
        """
        Get the marker at a position.

        Raises:
            BoundsError: If position is not on the board.
        """
        return self.state.board[self.validator.require_in_bounds(self.state, position)]

    def get_empty_positions(self) -> List[int]:
        """Get all positions that can still be played."""
        return self.validator.get_valid_moves(self.state)

    def get_winning_line(self) -> Optional[Line]:
        """Get the positions of the latched winning line, if any."""
        if self.state.outcome is None or self.state.outcome.winner is None:
            return None
        return self.win_checker.get_winning_line(self.state)

    def result_message(self) -> str:
        """Get the text to display for the latched result."""
        outcome = self.state.outcome
        if outcome is None:
            return ""
        if outcome == Outcome.TIE:
            return "It's a tie!"
        return f"{outcome.winner.value} wins!"

    def render(self) -> str:
        """Render the board as text, one row per line."""
        side = self.side
        empty = self.config.EMPTY_SYMBOL
        cell_width = len(str(self.size - 1))
        rows = []
        for row in range(side):
            cells = []
            for col in range(side):
                marker = self.state.board[row * side + col]
                symbol = empty if marker is None else marker.value
                cells.append(symbol.center(cell_width + 2))
            rows.append("|".join(cells))
        separator = "+".join(["-" * (cell_width + 2)] * side)
        return f"\n{separator}\n".join(rows)

    def print_board(self):
        """Print the board and game info to console."""
        print(self.render())
        if self.state.is_game_over:
            print(f"\n{self.result_message()}")
        else:
            print(f"\nCurrent turn: {self.state.current_turn.value}")
