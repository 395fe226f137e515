"""
Unit Tests for python-chess Adapters

Tests that boards are reproduced with the right 'position' command.
"""

import chess

from chess_uci.board import board_moves, position_command, starts_from_startpos


class TestPositionCommand:
    """Tests for board → 'position' conversion."""

    def test_fresh_board(self):
        assert position_command(chess.Board()) == "position startpos"

    def test_startpos_with_moves(self):
        board = chess.Board()
        for san in ["e4", "e5", "Nf3", "Nc6"]:
            board.push_san(san)

        assert position_command(board) == "position startpos moves e2e4 e7e5 g1f3 b8c6"

    def test_custom_root(self):
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        board = chess.Board(fen)
        board.push_san("c5")

        assert position_command(board) == "position fen " + fen + " moves c7c5"

    def test_custom_root_without_moves(self):
        fen = "4k3/8/8/8/8/8/8/4K2R w K - 0 1"

        assert position_command(chess.Board(fen)) == "position fen " + fen


class TestBoardMoves:
    """Tests for move stack extraction."""

    def test_empty(self):
        assert board_moves(chess.Board()) == []

    def test_castling(self):
        board = chess.Board("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        board.push_san("O-O")

        assert board_moves(board) == ["e1g1"]

    def test_promotion(self):
        board = chess.Board("8/P7/8/8/8/8/8/k6K w - - 0 1")
        board.push_san("a8=Q")

        assert board_moves(board) == ["a7a8q"]

    def test_board_not_modified(self):
        board = chess.Board()
        board.push_san("e4")

        board_moves(board)

        assert len(board.move_stack) == 1


def test_starts_from_startpos():
    board = chess.Board()
    board.push_san("e4")

    assert starts_from_startpos(board)
    assert not starts_from_startpos(chess.Board("4k3/8/8/8/8/8/8/4K3 w - - 0 1"))
