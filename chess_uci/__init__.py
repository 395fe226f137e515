"""
chess-uci

A client for the Universal Chess Interface (UCI): send commands to a
running chess engine and read back its answers.

## Architecture

The package is organized into several key modules:

1. **protocol**: Wire format
   - Command formatting ('position startpos moves ...', 'isready', ...)
   - Response parsing ('uciok', 'readyok', 'id name', 'bestmove ... ponder ...')

2. **session**: Engine connection
   - UciSession: blocking request/response exchanges over two channels
   - Outcome: result type for callers that want to see transport errors
   - deadline: optional timeout around a blocking exchange

3. **board**: python-chess adapters
   - Board and Move objects to 'position' commands

4. **utils**: Logging setup and in-memory channels for tests

## Quick Start

```python
import subprocess
from chess_uci import UciSession

process = subprocess.Popen(["stockfish"], stdin=subprocess.PIPE, stdout=subprocess.PIPE)
session = UciSession(process.stdin, process.stdout)

if session.is_uci_ok() and session.is_ready():
    print(session.get_engine_name(), session.get_engine_author())
    session.set_position_start("e2e4 e7e5")
    session.send_raw("go depth 12")
    print(session.get_best_move(), session.get_ponder())

session.stop()
process.wait()
```

Starting and reaping the engine process is left to the caller.

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_uci.errors import (
    ProtocolViolation,
    SessionClosed,
    StreamClosed,
    TransportReadError,
    TransportWriteError,
    UciError,
)
from chess_uci.protocol.responses import BestMove
from chess_uci.session import Outcome, SessionConfig, UciSession, deadline

__all__ = [
    'UciSession',
    'SessionConfig',
    'Outcome',
    'BestMove',
    'deadline',
    'UciError',
    'TransportWriteError',
    'TransportReadError',
    'StreamClosed',
    'ProtocolViolation',
    'SessionClosed',
]
