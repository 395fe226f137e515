"""
Unit Tests for UCI Command Formatting

Tests for the pure command builders:
    - position startpos with and without moves
    - position fen with and without moves
    - Move lists given as strings, lists and chess.Move objects
"""

import chess
import pytest

from chess_uci.protocol import commands
from chess_uci.protocol.commands import join_moves, position_fen, position_startpos

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPositionStartpos:
    """Tests for 'position startpos'."""

    def test_without_moves(self):
        """Test plain start position."""
        assert position_startpos() == "position startpos"

    @pytest.mark.parametrize("moves", ["e2e4", "e2e4 e7e5 g1f3", "e7e8q"])
    def test_with_move_string(self, moves):
        """Test that the move string is appended verbatim."""
        assert position_startpos(moves) == "position startpos moves " + moves

    def test_with_empty_move_string(self):
        """Test that an empty move string still produces a moves clause."""
        assert position_startpos("") == "position startpos moves "

    def test_with_move_list(self):
        """Test that a list of moves is space-joined."""
        assert position_startpos(["e2e4", "e7e5"]) == "position startpos moves e2e4 e7e5"

    def test_with_chess_moves(self):
        """Test that chess.Move objects are written in UCI notation."""
        moves = [chess.Move.from_uci("g1f3"), chess.Move.from_uci("g8f6")]

        assert position_startpos(moves) == "position startpos moves g1f3 g8f6"


class TestPositionFen:
    """Tests for 'position fen'."""

    def test_without_moves(self):
        """Test FEN is passed through untouched."""
        assert position_fen(KIWIPETE) == "position fen " + KIWIPETE

    def test_with_moves(self):
        """Test FEN followed by a moves clause."""
        assert position_fen(KIWIPETE, "e1g1 e8c8") == "position fen " + KIWIPETE + " moves e1g1 e8c8"

    def test_fen_not_validated(self):
        """Test that invalid FEN text is sent as given."""
        assert position_fen("not a fen") == "position fen not a fen"


class TestJoinMoves:
    """Tests for move list normalization."""

    def test_none_means_no_clause(self):
        assert join_moves(None) is None

    def test_string_unchanged(self):
        assert join_moves("  e2e4  ") == "  e2e4  "

    def test_generator(self):
        """Test that any iterable is accepted."""
        assert join_moves(m for m in ("d2d4", "d7d5")) == "d2d4 d7d5"

    def test_mixed(self):
        assert join_moves(["e2e4", chess.Move.from_uci("c7c5")]) == "e2e4 c7c5"


def test_fixed_commands():
    """Test the literal command constants."""
    assert commands.UCI == "uci"
    assert commands.ISREADY == "isready"
    assert commands.UCINEWGAME == "ucinewgame"
    assert commands.PONDERHIT == "ponderhit"
    assert commands.QUIT == "quit"
