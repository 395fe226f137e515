"""
UCI Response Parsing

Pure functions over single lines of engine output. The session feeds them
one line at a time while it scans for a sentinel.

Responses understood:
    uciok                               Handshake finished
    readyok                             Ready check answered
    id name <name...>                   Engine name
    id author <author...>               Engine author
    bestmove <move> [ponder <move>]     Search result
"""

from dataclasses import dataclass
from typing import Optional

import chess

from chess_uci.errors import ProtocolViolation

UCIOK = "uciok"
READYOK = "readyok"
BESTMOVE = "bestmove"
PONDER = "ponder"

ID_NAME = "id name"
ID_AUTHOR = "id author"

# Engines report "(none)" (or the null move) when there is no legal move
NO_MOVE_TOKENS = ("(none)", "0000")


@dataclass(frozen=True)
class EngineId:
    """An 'id' line: key is 'name' or 'author'."""

    key: str
    value: str


@dataclass(frozen=True)
class BestMove:
    """
    Parsed 'bestmove' line.

    Attributes:
        move: Best move token exactly as sent by the engine
        ponder: Expected reply, only when the 'ponder' keyword was present
    """

    move: str
    ponder: Optional[str] = None

    @property
    def is_none(self) -> bool:
        """Check if the engine reported that it has no move."""
        return self.move in NO_MOVE_TOKENS

    def to_move(self) -> Optional[chess.Move]:
        """
        Convert the best move to a python-chess Move.

        Returns:
            chess.Move, or None when the engine reported no move

        Raises:
            ValueError: If the token is not valid UCI move notation
        """
        if self.is_none:
            return None
        return chess.Move.from_uci(self.move)

    def to_ponder_move(self) -> Optional[chess.Move]:
        """Convert the ponder move to a python-chess Move (None if absent)."""
        if self.ponder is None or self.ponder in NO_MOVE_TOKENS:
            return None
        return chess.Move.from_uci(self.ponder)


def normalize_line(line: str) -> str:
    """Strip the line terminator and surrounding whitespace."""
    return line.strip()


def is_sentinel(line: str, sentinel: str) -> bool:
    """Case-insensitive full-line match against a sentinel such as 'readyok'."""
    return line.strip().lower() == sentinel.lower()


def is_uciok(line: str) -> bool:
    return is_sentinel(line, UCIOK)


def is_readyok(line: str) -> bool:
    return is_sentinel(line, READYOK)


def parse_id(line: str) -> Optional[EngineId]:
    """
    Extract engine identity from an 'id name' / 'id author' line.

    The prefix is matched case-sensitively anywhere in the line; the value
    is everything after it with surrounding whitespace removed. Lines with
    an empty value are ignored.

    Examples:
        >>> parse_id("id name Stockfish 15")
        EngineId(key='name', value='Stockfish 15')
        >>> parse_id("info string hello") is None
        True
    """
    for prefix, key in ((ID_NAME, "name"), (ID_AUTHOR, "author")):
        index = line.find(prefix)
        if index >= 0:
            value = line[index + len(prefix):].strip()
            if value:
                return EngineId(key=key, value=value)
            return None
    return None


def is_bestmove(line: str) -> bool:
    """Check if the first token of the line is 'bestmove'."""
    tokens = line.split()
    return bool(tokens) and tokens[0] == BESTMOVE


def parse_bestmove(line: str) -> BestMove:
    """
    Parse 'bestmove <move> [ponder <move>]'.

    The ponder move is only taken when the 'ponder' keyword precedes it;
    any other trailing tokens are ignored.

    Args:
        line: A line for which is_bestmove() is True

    Returns:
        BestMove with the move and optional ponder move

    Raises:
        ProtocolViolation: If the line is not a bestmove line or has no move token
    """
    tokens = line.split()
    if not tokens or tokens[0] != BESTMOVE:
        raise ProtocolViolation(f"Not a bestmove line: {line!r}", line=line)
    if len(tokens) < 2:
        raise ProtocolViolation(f"bestmove without a move: {line!r}", line=line)

    ponder = None
    if len(tokens) >= 4 and tokens[2] == PONDER:
        ponder = tokens[3]

    return BestMove(move=tokens[1], ponder=ponder)
