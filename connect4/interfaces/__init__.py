"""
connect4.interfaces - User interfaces for Connect Four

This package contains the command-line front end for the rules engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
