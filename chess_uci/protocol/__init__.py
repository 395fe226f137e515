"""
UCI Wire Protocol

Pure formatting of client commands and parsing of engine responses.
No I/O happens in this package; UciSession drives it.
"""

from chess_uci.protocol.commands import join_moves, position_fen, position_startpos
from chess_uci.protocol.responses import (
    BestMove,
    EngineId,
    is_bestmove,
    is_readyok,
    is_sentinel,
    is_uciok,
    parse_bestmove,
    parse_id,
)

__all__ = [
    'join_moves',
    'position_fen',
    'position_startpos',
    'BestMove',
    'EngineId',
    'is_bestmove',
    'is_readyok',
    'is_sentinel',
    'is_uciok',
    'parse_bestmove',
    'parse_id',
]
