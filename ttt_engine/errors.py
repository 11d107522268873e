"""
Exceptions raised by the TicTacToe engine.

Rule violations (occupied cell, game over) are reported through return
values, not exceptions. These cover misuse of the engine itself.
"""


class InvalidBoardSizeError(ValueError):
    """Board cell count is not a positive perfect square."""

    def __init__(self, size):
        super().__init__(f"Board size must be a positive perfect square, got {size!r}")
        self.size = size


class BoundsError(IndexError):
    """Position lies outside the board."""

    def __init__(self, position, size: int):
        super().__init__(f"Position {position!r} is outside the board (0-{size - 1})")
        self.position = position
        self.size = size


class InvalidMarkerError(ValueError):
    """Value placed on the board is not one of the two markers."""

    def __init__(self, player):
        super().__init__(f"Player must be Marker.X or Marker.O, got {player!r}")
        self.player = player
