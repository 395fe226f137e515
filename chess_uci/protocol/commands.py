"""
UCI Command Formatting

Pure functions that build the command lines sent to an engine. None of them
perform I/O and none validate their arguments: FEN strings and move lists
are passed through exactly as given.

Commands:
    uci                               Switch engine to UCI mode
    isready                           Synchronization check
    ucinewgame                        Next search is from a different game
    ponderhit                         Opponent played the expected move
    position startpos [moves ...]     Set up the start position
    position fen <FEN> [moves ...]    Set up an arbitrary position
    quit                              Shut the engine down

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

from typing import Iterable, Optional, Union

import chess

UCI = "uci"
ISREADY = "isready"
UCINEWGAME = "ucinewgame"
PONDERHIT = "ponderhit"
QUIT = "quit"

MovesArg = Optional[Union[str, Iterable[Union[str, chess.Move]]]]


def join_moves(moves: MovesArg) -> Optional[str]:
    """
    Normalize a moves argument to the space-separated wire form.

    Args:
        moves: None, a ready-made string, or an iterable of UCI strings
            and/or chess.Move objects

    Returns:
        None if no moves clause should be emitted, otherwise the move list
        (a string is returned unchanged, even if empty)
    """
    if moves is None:
        return None
    if isinstance(moves, str):
        return moves
    return " ".join(m.uci() if isinstance(m, chess.Move) else str(m) for m in moves)


def _with_moves(command: str, moves: MovesArg) -> str:
    joined = join_moves(moves)
    if joined is None:
        return command
    return f"{command} moves {joined}"


def position_startpos(moves: MovesArg = None) -> str:
    """
    Build a 'position startpos' command.

    Examples:
        >>> position_startpos()
        'position startpos'
        >>> position_startpos("e2e4 e7e5")
        'position startpos moves e2e4 e7e5'
    """
    return _with_moves("position startpos", moves)


def position_fen(fen: str, moves: MovesArg = None) -> str:
    """
    Build a 'position fen' command.

    Examples:
        >>> position_fen("8/8/8/8/8/8/8/K6k w - - 0 1")
        'position fen 8/8/8/8/8/8/8/K6k w - - 0 1'
    """
    return _with_moves(f"position fen {fen}", moves)
