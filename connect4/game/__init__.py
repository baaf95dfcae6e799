"""
connect4.game - Core game mechanics for Connect Four

This package contains the board representation, the rules engine
and a Gymnasium adapter around it.
"""

from connect4.game.board import Board
from connect4.game.rules import GameState, WinningPlay
from connect4.game.env import ConnectFourEnv

__all__ = ['Board', 'GameState', 'WinningPlay', 'ConnectFourEnv']
