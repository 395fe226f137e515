"""
python-chess Adapters

Turn python-chess objects into the strings the UCI 'position' command
expects. Nothing here checks legality: the board's move stack is sent
exactly as it was played.

Data Flow:
    chess.Board → position_command() → "position startpos moves e2e4 e7e5"
"""

from typing import List

import chess

from chess_uci.protocol.commands import position_fen, position_startpos


def board_moves(board: chess.Board) -> List[str]:
    """
    UCI strings of every move played on the board, oldest first.

    Uses board.uci() so castling is written the way the board's variant
    expects (e.g. king-takes-rook in Chess960).
    """
    replay = board.root()
    moves = []
    for move in board.move_stack:
        moves.append(replay.uci(move))
        replay.push(move)
    return moves


def starts_from_startpos(board: chess.Board) -> bool:
    """Check if the board's game began from the standard starting position."""
    return board.root().fen() == chess.STARTING_FEN


def position_command(board: chess.Board) -> str:
    """
    Build the 'position' command that reproduces a board.

    The root position is sent as 'startpos' when it is the standard start
    position and as a FEN otherwise; played moves follow in a 'moves'
    clause, which is omitted when nothing has been played.

    Examples:
        >>> board = chess.Board()
        >>> board.push_san("e4")
        Move.from_uci('e2e4')
        >>> position_command(board)
        'position startpos moves e2e4'
    """
    moves = board_moves(board) or None
    if starts_from_startpos(board):
        return position_startpos(moves)
    return position_fen(board.root().fen(), moves)
