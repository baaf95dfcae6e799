"""Shared move sequences for engine tests (0-based columns, Red first)."""

from connect4.game.rules import GameState

# Red stacks column 0 while Yellow stacks column 1; Red completes four.
VERTICAL_RED_WIN = [0, 1, 0, 1, 0, 1, 0]

# Red fills row 5 columns 0-3 while Yellow stacks column 6.
HORIZONTAL_RED_WIN = [0, 6, 1, 6, 2, 6, 3]

# Yellow stacks column 1 while Red alternates between columns 0 and 2.
VERTICAL_YELLOW_WIN = [0, 1, 2, 1, 0, 1, 2, 1]

# Red finishes (5,0) (4,1) (3,2) (2,3) with its last piece at (2,3).
ASCENDING_RED_WIN = [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3]

# Mirror image: Red finishes (2,3) (3,4) (4,5) (5,6).
DESCENDING_RED_WIN = [6 - col for col in ASCENDING_RED_WIN]

# Columns 0,1,4,5 end up Red-bottom alternating, columns 2,3,6 Yellow-bottom
# alternating, which leaves no four in a row anywhere on a full board.
DRAW_FILL = [0] * 6 + [1] * 6 + [4] + [2] * 6 + [3] * 6 + [6] * 6 + [4] * 5 + [5] * 6


def play_all(game: GameState, columns):
    """Play every column, asserting each move is accepted."""
    for column in columns:
        assert game.play(column), f"move {column} rejected"
    return game


def snapshot(game: GameState):
    """Everything observable about the engine, for before/after comparisons."""
    return (
        game.get_state().tolist(),
        game.current_player,
        game.move_count,
        game.winner,
        game.winning_play,
        game.move_history,
        game.is_draw,
        game.player1_wins,
        game.player2_wins,
        game.last_move,
    )

# Yellow fills rows 3-5 of columns 0-2 while Red stacks column 3 and tops
# columns 0-2 at row 2; Red's last piece at (2, 3) closes row 2 and column 3.
HORIZONTAL_AND_VERTICAL_RED_WIN = [3, 0, 3, 0, 3, 0, 6, 1, 6, 1, 6, 1,
                                   5, 2, 0, 2, 1, 2, 2, 4, 3]
