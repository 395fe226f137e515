"""
Board Adapters Module

Converts python-chess Board and Move objects into UCI 'position' commands.

Key Components:
    - position_command: Board (root position + move stack) → 'position ...' line
    - board_moves: Move stack as UCI strings
"""

from chess_uci.board.moves import board_moves, position_command, starts_from_startpos

__all__ = ['board_moves', 'position_command', 'starts_from_startpos']
