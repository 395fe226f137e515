"""
Utilities: logging setup and in-memory engine channels for testing.
"""

from chess_uci.utils.logs import setup_logger, default_log_file
from chess_uci.utils.testing import (
    BlockingInput,
    FailingInput,
    FailingOutput,
    RecordingOutput,
    ScriptedInput,
)

__all__ = [
    'setup_logger',
    'default_log_file',
    'BlockingInput',
    'FailingInput',
    'FailingOutput',
    'RecordingOutput',
    'ScriptedInput',
]
