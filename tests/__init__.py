"""
Unit Tests for chess-uci

This package contains unit tests for all chess-uci components. No engine
binary is needed: sessions run over the in-memory channels from
chess_uci.utils.testing.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_session.py

    # Run with coverage
    pytest tests/ --cov=chess_uci --cov-report=html

    # Run specific test
    pytest tests/test_session.py::TestBestMove::test_bestmove_with_ponder

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
