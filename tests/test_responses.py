"""
Unit Tests for UCI Response Parsing

Tests for line-level parsing:
    - Sentinel matching: uciok, readyok (case-insensitive)
    - id name / id author capture
    - bestmove parsing, including the ponder keyword
    - Conversion of best moves to python-chess moves
"""

import chess
import pytest

from chess_uci.errors import ProtocolViolation
from chess_uci.protocol.responses import (
    BestMove,
    EngineId,
    is_bestmove,
    is_readyok,
    is_uciok,
    parse_bestmove,
    parse_id,
)


class TestSentinels:
    """Tests for sentinel line matching."""

    @pytest.mark.parametrize("line", ["readyok", "READYOK", "ReadyOk", "readyok  "])
    def test_readyok_matches(self, line):
        assert is_readyok(line)

    @pytest.mark.parametrize("line", ["readyok now", "ready", "", "info string readyok"])
    def test_readyok_rejects(self, line):
        assert not is_readyok(line)

    def test_uciok(self):
        assert is_uciok("uciok")
        assert is_uciok("UCIOK")
        assert not is_uciok("id name uciok")


class TestParseId:
    """Tests for engine identity lines."""

    def test_name(self):
        assert parse_id("id name Stockfish 15") == EngineId(key="name", value="Stockfish 15")

    def test_author(self):
        assert parse_id("id author T. Romstad") == EngineId(key="author", value="T. Romstad")

    def test_surrounding_whitespace_removed(self):
        assert parse_id("id name   Komodo 14  ").value == "Komodo 14"

    def test_prefix_found_mid_line(self):
        """Test that the prefix may appear anywhere in the line."""
        assert parse_id("xx id name Ethereal").value == "Ethereal"

    def test_prefix_is_case_sensitive(self):
        assert parse_id("ID NAME Stockfish") is None

    def test_empty_value_ignored(self):
        assert parse_id("id name") is None

    def test_other_lines(self):
        assert parse_id("option name Hash type spin default 16") is None
        assert parse_id("uciok") is None


class TestParseBestmove:
    """Tests for bestmove lines."""

    def test_move_and_ponder(self):
        assert parse_bestmove("bestmove e2e4 ponder e7e5") == BestMove(move="e2e4", ponder="e7e5")

    def test_move_only(self):
        best = parse_bestmove("bestmove e2e4")

        assert best.move == "e2e4"
        assert best.ponder is None

    def test_third_token_without_keyword_is_not_ponder(self):
        """Test that a stray third token is not mistaken for a ponder move."""
        assert parse_bestmove("bestmove e2e4 e7e5").ponder is None

    def test_ponder_keyword_without_move(self):
        assert parse_bestmove("bestmove e2e4 ponder").ponder is None

    def test_missing_move_is_violation(self):
        with pytest.raises(ProtocolViolation) as exc_info:
            parse_bestmove("bestmove")

        assert exc_info.value.line == "bestmove"

    def test_not_bestmove_is_violation(self):
        with pytest.raises(ProtocolViolation):
            parse_bestmove("info depth 3")

    def test_is_bestmove(self):
        assert is_bestmove("bestmove e2e4")
        assert is_bestmove("bestmove")
        assert not is_bestmove("bestmoves e2e4")
        assert not is_bestmove("info pv e2e4 bestmove")
        assert not is_bestmove("")


class TestBestMove:
    """Tests for the BestMove result type."""

    def test_to_move(self):
        best = BestMove(move="e7e8q", ponder="a7a6")

        assert best.to_move() == chess.Move.from_uci("e7e8q")
        assert best.to_ponder_move() == chess.Move.from_uci("a7a6")

    def test_no_move(self):
        """Test engines reporting no legal move."""
        for token in ("(none)", "0000"):
            best = BestMove(move=token)

            assert best.is_none
            assert best.to_move() is None

    def test_no_ponder(self):
        assert BestMove(move="e2e4").to_ponder_move() is None

    def test_invalid_move_raises(self):
        with pytest.raises(ValueError):
            BestMove(move="zz99").to_move()
