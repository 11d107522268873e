"""
Logic module for N x N TicTacToe.
Handles board state, rules, and win detection.
"""

from .config import EngineConfig
from .errors import BoundsError, InvalidBoardSizeError, InvalidMarkerError
from .game_state import GameState, Marker, MoveResult, Outcome
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .board_engine import BoardEngine

__version__ = "1.0.0"
