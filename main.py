"""
Main script for the TicTacToe minigame.

This script ties together:
- Logic (game engine, move validation, heuristic AI)
- Display (board rendering, snapshots)
- The Tkinter window or a console game

Run this script to play TicTacToe against the AI!
"""

import argparse
import sys
from typing import Callable, Optional

from board_view import BoardRenderer
from logging_setup import setup_logging
from tictactoe import GameEngine, RejectReason
from tictactoe.config import GameConfig


class TicTacToeConsole:
    """
    Console game: the human types a cell number, the AI answers at once.

    Commands:
        0-8  play that cell
        r    restart (score is kept)
        s    save a snapshot of the board
        q    quit
    """

    REJECT_MESSAGES = {
        RejectReason.OUT_OF_RANGE: "Pick a cell from 0 to 8.",
        RejectReason.CELL_OCCUPIED: "That cell is taken.",
        RejectReason.GAME_OVER: "Game over! Type 'r' to play again.",
        RejectReason.NOT_PLAYERS_TURN: "Wait for the AI.",
    }

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        renderer: Optional[BoardRenderer] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        self.engine = engine or GameEngine()
        self.renderer = renderer or BoardRenderer()
        self.input_func = input_func or input
        self.is_running = False

    def start(self):
        """Play until the user quits."""
        self.is_running = True
        self._show()

        while self.is_running:
            try:
                command = self.input_func("\nYour move (0-8, r=restart, s=snapshot, q=quit): ")
            except EOFError:
                break
            self.handle_command(command.strip().lower())

        print("Goodbye!")

    def handle_command(self, command: str):
        """Run one line of user input."""
        if command == "q":
            self.is_running = False
        elif command == "r":
            self.engine.restart()
            print("\nNew game!")
            self._show()
        elif command == "s":
            try:
                path = self.renderer.save(self.engine.state)
            except OSError as e:
                print(f"Snapshot failed: {e}")
            else:
                print(f"Saved: {path}")
        elif command.isdecimal():
            self._play(int(command))
        else:
            print(self.REJECT_MESSAGES[RejectReason.OUT_OF_RANGE])

    def _play(self, cell: int):
        result = self.engine.apply_move(cell)
        if not result.accepted:
            print(self.REJECT_MESSAGES.get(result.reason, result.message))
            return

        if self.engine.is_ai_pending:
            print(f"\n>>> {self.engine.status_text()}")
            ai_result = self.engine.compute_and_apply_ai_move()
            print(f">>> AI plays cell {ai_result.cell} ({self.engine.ai.last_reason})")

        self._show()

    def _show(self):
        """Print board, status and score."""
        self.engine.state.print_board()
        score = self.engine.score
        print(f"{self.engine.status_text()}   [X {score.wins_x} - O {score.wins_o}]")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against a heuristic AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.AI_DELAY_MS,
        metavar="MS",
        help=f"Pause before the AI moves in the window (default: {GameConfig.AI_DELAY_MS})"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level"
    )

    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")

    setup_logging(args.log_level)

    if args.no_ui:
        game = TicTacToeConsole()
        try:
            game.start()
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        return 0

    # Imported here so console mode works without Tk
    from ui import TicTacToeUI
    ui = TicTacToeUI(ai_delay_ms=args.delay)
    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
