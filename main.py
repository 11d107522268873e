"""
Main entry point for N x N TicTacToe.

Two front ends drive the same engine:
- Tkinter window (ui.py)
- Console mode, reading board positions from the keyboard

Run this script to play TicTacToe with two players at one keyboard!
"""

from typing import Callable, Optional

from ttt_engine import BoardEngine, EngineConfig, MoveResult


class ConsoleGame:
    """
    Console front end for one game.

    Commands:
    - a board position (0 to size-1) places the current marker
    - r resets the board
    - q quits
    """

    def __init__(self, engine: BoardEngine, input_fn: Callable[[str], str] = input):
        """
        Initialize the console game.

        Args:
            engine: Engine owned by this session.
            input_fn: Function used to read a command.
        """
        self.engine = engine
        self.input_fn = input_fn
        self.is_running = False

    def start(self):
        """Run the read-play-print loop until quit or end of input."""
        self.is_running = True
        print("\n" + "="*60)
        print(f"   TicTacToe {self.engine.side}x{self.engine.side}")
        print("="*60)
        self.engine.print_board()

        while self.is_running:
            try:
                command = self.input_fn(f"\n{self.engine.get_current_turn().value} > ")
            except EOFError:
                break
            self.handle_command(command)

    def handle_command(self, command: str) -> Optional[MoveResult]:
        """
        Handle one line of input.

        Returns:
            The move result when the command was a move, else None.
        """
        command = command.strip().lower()

        if command in ("q", "quit"):
            self.is_running = False
            return None

        if command in ("r", "reset"):
            self.engine.clear_board()
            print("Board cleared!")
            self.engine.print_board()
            return None

        try:
            position = int(command)
        except ValueError:
            print(f"Unknown command: {command!r}. Enter 0-{self.engine.size - 1}, r or q.")
            return None

        result = self.engine.perform_move(position, self.engine.get_current_turn())
        if result == MoveResult.REJECTED_OCCUPIED:
            print(f"Cell {position} is already taken!")
        elif result == MoveResult.REJECTED_OUT_OF_BOUNDS:
            print(f"Position must be 0-{self.engine.size - 1}!")
        elif result == MoveResult.REJECTED_GAME_OVER:
            print("Game is over! Enter r to play again.")

        if result:
            self._check_win()
        return result

    def _check_win(self):
        """Print the board and the result, if any."""
        outcome = self.engine.check_for_winner()
        print()
        self.engine.print_board()
        if outcome.is_terminal:
            print("\n" + "="*60)
            print("Enter r to play again or q to quit.")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="N x N TicTacToe")
    parser.add_argument(
        "--size",
        type=int,
        default=EngineConfig.DEFAULT_GAME_SIZE,
        help="Number of cells, a perfect square (default: 9 for 3x3)"
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Play in a Tkinter window instead of the console"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print rejected moves and results"
    )

    args = parser.parse_args()

    config = EngineConfig(VERBOSE=args.verbose)
    try:
        engine = BoardEngine(args.size, config)
    except ValueError as e:
        parser.error(str(e))

    if args.gui:
        from ui import TicTacToeUI
        TicTacToeUI(engine).run()
        return

    game = ConsoleGame(engine)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
