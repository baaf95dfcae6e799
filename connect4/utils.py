"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module holds the board geometry, the piece and result enumerations,
the direction vectors used by win detection, and the ASCII renderer.
"""

from enum import Enum, auto
from typing import Iterable, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MAX_MOVES = ROWS * COLS


class Piece(Enum):
    """Enumeration representing cell contents and the two players."""
    EMPTY = 0
    RED = 1     # First player
    YELLOW = 2  # Second player

    def other(self) -> 'Piece':
        """Get the opposing player (EMPTY has no opponent)."""
        if self == Piece.RED:
            return Piece.YELLOW
        elif self == Piece.YELLOW:
            return Piece.RED
        return Piece.EMPTY

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. 'Red'."""
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        if self == Piece.RED:
            return "X"
        elif self == Piece.YELLOW:
            return "O"
        return "."

    def __str__(self):
        return self.display_name


class GameResult(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    RED_WIN = auto()
    YELLOW_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, piece: Piece) -> 'GameResult':
        if piece == Piece.RED:
            return cls.RED_WIN
        elif piece == Piece.YELLOW:
            return cls.YELLOW_WIN
        raise ValueError(f"No win result for {piece!r}")


class Direction(Enum):
    """Line directions checked by win detection, in check order."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # bottom-left to top-right


# Direction vectors (row, col). Dict order is the order wins are checked in,
# which decides the reported line when one move completes several.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def is_valid_column(column: int) -> bool:
    return 0 <= column < COLS


def render_board_ascii(grid: np.ndarray,
                       highlight: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Render the board as ASCII art.

    Pieces are drawn as X (Red) and O (Yellow); cells listed in
    ``highlight`` are drawn in lower case. Columns are numbered from 1.

    Args:
        grid: The game board
        highlight: Optional (row, col) cells to mark, e.g. a winning line

    Returns:
        ASCII representation of the board
    """
    marked = set(highlight or ())
    border = "+" + "-" * (COLS * 2 + 1) + "+"

    lines = [border]
    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            symbol = Piece(int(grid[row, col])).symbol
            if (row, col) in marked:
                symbol = symbol.lower()
            cells.append(symbol)
        lines.append("| " + " ".join(cells) + " |")
    lines.append(border)
    lines.append("  " + " ".join(str(col + 1) for col in range(COLS)))

    return "\n".join(lines)
