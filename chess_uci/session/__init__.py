"""
UCI Session Module

Stateful client for one engine connection.

Key Components:
    - UciSession: Command sending, blocking exchanges, engine identity and ponder state
    - SessionConfig: Encoding, logging and labelling settings
    - Outcome: Result type returned by the try_* methods
    - deadline: External timeout for blocking exchanges
"""

from chess_uci.session.config import SessionConfig
from chess_uci.session.deadline import Deadline, deadline
from chess_uci.session.outcome import Outcome
from chess_uci.session.session import UciSession

__all__ = ['UciSession', 'SessionConfig', 'Outcome', 'Deadline', 'deadline']
