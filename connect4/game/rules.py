"""
rules.py - Rules engine for Connect Four

This module provides the GameState class, which owns the board, the turn
order, the move history, win/draw detection and the win tallies kept
across games, together with the immutable WinningPlay value.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from connect4.debug import debug
from connect4.game.board import Board
from connect4.utils import (COLS, CONNECT_N, MAX_MOVES, DIRECTION_VECTORS,
                            Piece, GameResult, is_valid_column)

Position = Tuple[int, int]


@dataclass(frozen=True)
class WinningPlay:
    """The four connected cells that won a game (empty until someone wins)."""
    moves: Tuple[Position, ...] = ()

    def contains(self, row: int, col: int) -> bool:
        """Check if a cell is one of the winning pieces."""
        return any(r == row and c == col for r, c in self.moves)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __bool__(self) -> bool:
        return bool(self.moves)


class GameState:
    """
    Connect Four rules engine.

    Red always opens. ``play`` is the only way to change the board during a
    game; it returns False without side effects for any rejected move.
    ``reset`` starts a new game but keeps the win counters, which last for
    the lifetime of the instance.
    """

    def __init__(self):
        """Initialize a new engine with an empty board and zero statistics."""
        debug.debug("Initializing GameState", "game")
        self.board = Board()
        self._player1_wins = 0
        self._player2_wins = 0
        self.reset()

    def reset(self) -> None:
        """Start a new game. Win statistics are preserved."""
        debug.debug("Resetting game", "game")
        self.board.clear()
        self._current_player = Piece.RED
        self._move_count = 0
        self._winner: Optional[Piece] = None
        self._winning_play = WinningPlay()
        self._move_history: List[str] = []
        self._is_draw = False
        self._last_move: Optional[Position] = None

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def current_player(self) -> Piece:
        return self._current_player

    @property
    def winner(self) -> Optional[Piece]:
        """The winning player, or None if nobody has won yet."""
        return self._winner

    @property
    def winning_play(self) -> WinningPlay:
        return self._winning_play

    @property
    def move_history(self) -> Tuple[str, ...]:
        return tuple(self._move_history)

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def last_move(self) -> Optional[Position]:
        return self._last_move

    @property
    def is_draw(self) -> bool:
        return self._is_draw

    @property
    def is_game_over(self) -> bool:
        return self._winner is not None or self._is_draw

    @property
    def player1_wins(self) -> int:
        """Games won by Red since this engine was created."""
        return self._player1_wins

    @property
    def player2_wins(self) -> int:
        """Games won by Yellow since this engine was created."""
        return self._player2_wins

    def wins_for(self, player: Piece) -> int:
        if player == Piece.RED:
            return self._player1_wins
        elif player == Piece.YELLOW:
            return self._player2_wins
        raise ValueError(f"No win tally for {player!r}")

    @property
    def result(self) -> GameResult:
        if self._winner is not None:
            return GameResult.win_for(self._winner)
        if self._is_draw:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def get_piece(self, row: int, col: int) -> Piece:
        """Piece at (row, col); EMPTY for anything off the board."""
        return self.board.get_piece(row, col)

    def is_column_full(self, column: int) -> bool:
        """True if the column is out of range or already holds six pieces."""
        return self.board.is_column_full(column)

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns ``play`` would currently accept.

        Returns:
            List of valid column indices (empty once the game is over)
        """
        if self.is_game_over:
            return []
        return [col for col in range(COLS) if not self.is_column_full(col)]

    def get_state(self) -> np.ndarray:
        return self.board.get_state()

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def play(self, column: int) -> bool:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column to play in (0-indexed)

        Returns:
            True if the move was made, False if the game is over, the
            column is out of range or the column is full
        """
        if self.is_game_over:
            debug.debug(f"Rejected column {column}: game is over ({self.result.name})", "game")
            return False

        if not is_valid_column(column):
            debug.debug(f"Rejected column {column}: out of range", "game")
            return False

        if self.is_column_full(column):
            debug.debug(f"Rejected column {column}: column is full", "game")
            return False

        player = self._current_player
        row = self.board.drop_piece(column, player)
        self._move_count += 1
        self._last_move = (row, column)
        self._move_history.append(f"{player.display_name} plays column {column + 1}")

        debug.start_timer("win_check")
        winning_line = self._find_winning_line(row, column)
        debug.end_timer("win_check", "game")

        if winning_line:
            self._winner = player
            self._winning_play = WinningPlay(tuple(winning_line))
            if player == Piece.RED:
                self._player1_wins += 1
            else:
                self._player2_wins += 1
            debug.info(f"{player} wins with {list(self._winning_play)}", "game")
            return True

        if self._move_count >= MAX_MOVES:
            self._is_draw = True
            debug.info("Game ends in a draw", "game")
            return True

        self._current_player = player.other()
        debug.debug(f"{player} played column {column}; {self._current_player} to move", "game")
        return True

    def _find_winning_line(self, row: int, col: int) -> List[Position]:
        """
        Check the lines through a freshly placed piece.

        Directions are tried in DIRECTION_VECTORS order and the first one
        holding CONNECT_N or more wins. The first CONNECT_N cells of that run,
        in scan order, are returned; an empty list means no win.
        """
        for direction, (dr, dc) in DIRECTION_VECTORS.items():
            positions = self.board.scan_line(row, col, dr, dc)
            if len(positions) >= CONNECT_N:
                debug.trace(f"{direction.name} run of {len(positions)} at ({row}, {col})", "game")
                return positions[:CONNECT_N]
        return []

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            The board, with the winning line (if any) in lower case
        """
        return self.board.render(highlight=self._winning_play.moves)

    def __str__(self) -> str:
        return self.render()
