"""
cli.py - Command-line interface for the Connect Four engine

This module provides a hot-seat CLI for two players sharing a terminal,
and a replay command that plays a fixed list of columns and prints the
outcome.
"""

import argparse
import sys
from typing import List, Optional

from connect4.debug import debug, DebugLevel
from connect4.utils import COLS, is_valid_column
from connect4.game.rules import GameState

# Special return codes from get_human_move
QUIT = -1
RESTART = -2
HISTORY = -3


class SimpleCLI:
    """Simple command-line front end for Connect Four."""

    def __init__(self, game: Optional[GameState] = None):
        """Initialize the CLI."""
        self.game = game if game is not None else GameState()
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (ignored with --debug)')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game in the terminal')

        replay_parser = subparsers.add_parser('replay', help='Play a list of columns and show the result')
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma separated columns, numbered from 1 (e.g. "4,4,3")')

        self.args = parser.parse_args(argv)
        self.configure_debug()
        return self.args

    def configure_debug(self) -> None:
        """Apply the logging options from the parsed arguments."""
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.configure(level=DebugLevel[self.args.debug_level.upper()])

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI and return a process exit status."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
            return 0
        elif self.args.command == 'replay':
            return 0 if self.replay(self.args.moves) else 1

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> None:
        """Play Connect Four interactively until the players quit."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column (1-{COLS}) to drop a piece.")
        print("Other commands: 'r' to restart, 'h' for move history, 'q' to quit.")

        self.game.reset()
        print(self.game.render())

        while True:
            while not self.game.is_game_over:
                move = self.get_human_move()

                if move is None:
                    continue
                elif move == QUIT:
                    print("Quitting game.")
                    self.print_score()
                    return
                elif move == RESTART:
                    self.game.reset()
                    print("Game restarted.")
                    print(self.game.render())
                    continue
                elif move == HISTORY:
                    self.print_history()
                    continue

                if self.game.play(move):
                    print(self.game.render())
                else:
                    print(self.describe_rejection(move))

            self.print_result()
            self.print_score()

            if not self.ask_play_again():
                return
            self.game.reset()
            print(self.game.render())

    def get_human_move(self) -> Optional[int]:
        """
        Read one command from the current player.

        Returns:
            Column index (0-based), a special command code, or None if the
            input was not understood
        """
        player = self.game.current_player
        try:
            user_input = input(f"{player} ({player.symbol}) move [1-{COLS}/r/h/q]: ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART
        elif user_input == 'h':
            return HISTORY

        try:
            move = int(user_input) - 1
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

        if not is_valid_column(move):
            print(f"Column must be between 1 and {COLS}.")
            return None
        return move

    def ask_play_again(self) -> bool:
        try:
            answer = input("Play again? (y/n): ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer.startswith('y')

    def describe_rejection(self, column: int) -> str:
        """Explain why ``play`` refused a column, using the engine's accessors."""
        if self.game.is_game_over:
            return "The game is over."
        if not is_valid_column(column):
            return f"Column must be between 1 and {COLS}."
        if self.game.is_column_full(column):
            return f"Column {column + 1} is full."
        return f"Invalid move: {column + 1}"

    def print_history(self) -> None:
        if not self.game.move_history:
            print("No moves yet.")
            return
        for number, entry in enumerate(self.game.move_history, start=1):
            print(f"{number:2d}. {entry}")

    def print_result(self) -> None:
        print("Game over!")
        if self.game.winner is not None:
            print(f"{self.game.winner} wins!")
        else:
            print("It's a draw!")

    def print_score(self) -> None:
        print(f"Score - Red: {self.game.player1_wins}, Yellow: {self.game.player2_wins}")

    def replay(self, moves: str) -> bool:
        """
        Play a comma separated list of 1-based columns from a fresh board.

        Returns:
            True if every move was accepted
        """
        try:
            columns = [int(token) - 1 for token in moves.split(',') if token.strip()]
        except ValueError:
            print(f"Could not parse moves: {moves!r}")
            return False

        self.game.reset()
        for index, column in enumerate(columns, start=1):
            if not self.game.play(column):
                print(f"Move {index} rejected: {self.describe_rejection(column)}")
                print(self.game.render())
                return False

        print(self.game.render())
        self.print_history()
        if self.game.is_game_over:
            self.print_result()
        else:
            print(f"{self.game.current_player} to move.")
        return True


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
