"""
Engine configuration for TicTacToe.
Board size and display settings.
"""


class EngineConfig:
    """
    Configuration class for engine and display settings.
    Create an instance and override attributes to customize a game.
    """

    # ==================== BOARD SETTINGS ====================
    # Total number of cells. Must be a perfect square (9 = 3x3, 16 = 4x4)
    DEFAULT_GAME_SIZE = 9

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_SYMBOL = " "

    # Print rejected moves and results to the console
    VERBOSE = False

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    BACKGROUND_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    WIN_CELL_COLOR = "#065f46"
    MARKER_COLORS = {
        "X": "#8acaff",
        "O": "#ff8a8a",
    }
    RESULT_COLOR = "#ffd700"
    CELL_FONT = ("Segoe UI", 24, "bold")
    LABEL_FONT = ("Segoe UI", 12)

    def __init__(self, **overrides):
        self.MARKER_COLORS = dict(type(self).MARKER_COLORS)
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown config setting: {name}")
            setattr(self, name, value)
