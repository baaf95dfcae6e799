"""
board.py - Board representation for Connect Four

This module implements the Board class: the fixed 6x7 grid, the column-drop
placement rule, bounds-safe cell reads and the line scan used to detect
four in a row around a freshly placed piece.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect4.debug import debug
from connect4.utils import (ROWS, COLS, CONNECT_N, Piece,
                            is_valid_position, is_valid_column, render_board_ascii)


class Board:
    """
    Represents the Connect Four grid.

    Row 0 is the top of the board; pieces fall to the highest-indexed
    empty row of their column.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.debug("Initializing new Board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)

    def clear(self):
        """Empty every cell in place."""
        self.grid.fill(Piece.EMPTY.value)

    def get_piece(self, row: int, col: int) -> Piece:
        """
        Get the piece at a cell.

        Coordinates outside the board read as EMPTY rather than raising,
        and negative indices never wrap around.
        """
        if not is_valid_position(row, col):
            return Piece.EMPTY
        return Piece(int(self.grid[row, col]))

    def is_column_full(self, column: int) -> bool:
        """True if the column is out of range or its top cell is occupied."""
        if not is_valid_column(column):
            return True
        return self.grid[0, column] != Piece.EMPTY.value

    def landing_row(self, column: int) -> Optional[int]:
        """Row a piece dropped in ``column`` would land in, or None if it can't."""
        if self.is_column_full(column):
            return None
        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == Piece.EMPTY.value:
                return row
        return None

    def drop_piece(self, column: int, piece: Piece) -> Optional[int]:
        """
        Drop a piece into a column.

        Args:
            column: The column to place a piece (0-indexed)
            piece: RED or YELLOW

        Returns:
            The row the piece landed in, or None if the column can't take it
        """
        row = self.landing_row(column)
        if row is None:
            return None

        debug.trace(f"Placing {piece} at ({row}, {column})", "board")
        self.grid[row, column] = piece.value
        return row

    def count_pieces(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self.grid))

    def scan_line(self, row: int, col: int, dr: int, dc: int) -> List[Tuple[int, int]]:
        """
        Collect the run of matching pieces through (row, col) along (dr, dc).

        Up to CONNECT_N - 1 cells are walked on each side of the anchor.
        Cells found in the positive direction are appended, cells found in
        the negative direction are prepended, so the result is ordered from
        the negative end to the positive end.
        """
        piece = self.grid[row, col]
        positions = [(row, col)]

        for step in range(1, CONNECT_N):
            r, c = row + dr * step, col + dc * step
            if not is_valid_position(r, c) or self.grid[r, c] != piece:
                break
            positions.append((r, c))

        for step in range(1, CONNECT_N):
            r, c = row - dr * step, col - dc * step
            if not is_valid_position(r, c) or self.grid[r, c] != piece:
                break
            positions.insert(0, (r, c))

        return positions

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the 2D grid
        """
        return self.grid.copy()

    def render(self, highlight=None) -> str:
        return render_board_ascii(self.grid, highlight)

    def __str__(self) -> str:
        return self.render()
