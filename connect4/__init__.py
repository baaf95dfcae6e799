"""
connect4 - Connect Four rules engine

This package provides the board representation, move application,
win/draw detection and per-session statistics for Connect Four, along
with a Gymnasium adapter and a small hot-seat command-line interface.
"""

# Version number
__version__ = '0.2.0'
