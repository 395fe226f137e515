#!/usr/bin/env python3
"""
CLI tool for probing a UCI engine binary.

Starts the engine, runs the 'uci' / 'isready' handshake, optionally asks for
a best move, and shuts the engine down again.

Usage:
    python tools/probe_engine.py stockfish

    python tools/probe_engine.py /usr/bin/stockfish \\
        --moves e2e4 e7e5 \\
        --depth 12 \\
        --timeout 10
"""

import argparse
import logging
import shutil
import subprocess
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chess_uci.session import UciSession, deadline
from chess_uci.utils.logs import setup_logger


def start_engine(engine: str) -> subprocess.Popen:
    """
    Launch an engine binary with piped stdin/stdout.

    Args:
        engine: Binary path or a name resolvable on PATH

    Raises:
        FileNotFoundError: If the binary cannot be found
    """
    path = shutil.which(engine) or (engine if Path(engine).is_file() else None)
    if path is None:
        raise FileNotFoundError(
            f"Engine binary not found: {engine}\n"
            "Install with: brew install stockfish (macOS) or apt install stockfish (Linux)"
        )

    return subprocess.Popen(
        [path],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
    )


def probe(args) -> int:
    """Run the probe against one engine. Returns the process exit code."""
    try:
        process = start_engine(args.engine)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    session = UciSession(process.stdin, process.stdout)

    try:
        with deadline(session, args.timeout, process=process) as handshake:
            uci_ok = session.is_uci_ok()
            ready = uci_ok and session.is_ready()

        if not ready:
            reason = "timed out" if handshake.expired else "engine output ended"
            print(f"Error: handshake failed ({reason})")
            return 1

        print(f"Engine: {session.get_engine_name()}")
        print(f"Author: {session.get_engine_author()}")

        if args.depth:
            session.send_new_game()
            if args.fen:
                session.set_position_fen(args.fen, args.moves or None)
            else:
                session.set_position_start(args.moves or None)
            session.send_raw(f"go depth {args.depth}")

            with deadline(session, args.timeout, process=process) as search:
                best_move = session.get_best_move()

            if best_move is None:
                reason = "timed out" if search.expired else "no bestmove received"
                print(f"Error: search failed ({reason})")
                return 1

            print(f"Best move: {best_move}")
            print(f"Ponder: {session.get_ponder() or '-'}")

        return 0

    finally:
        session.stop()
        try:
            process.wait(timeout=2.0)
        except subprocess.TimeoutExpired:
            process.kill()


def main():
    parser = argparse.ArgumentParser(
        description="Probe a UCI chess engine",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "engine",
        help="Engine binary path or name on PATH",
    )
    parser.add_argument(
        "--fen",
        type=str,
        default=None,
        help="Start from this FEN instead of the standard position",
    )
    parser.add_argument(
        "--moves",
        nargs="*",
        default=[],
        help="Moves to play from the start position (UCI notation)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=0,
        help="Search depth for a best move (0 = handshake only)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="Seconds to wait for each engine answer",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log protocol traffic to stderr",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write the log to this file instead of stderr",
    )

    args = parser.parse_args()

    setup_logger(debug=args.verbose, log_file=Path(args.log_file) if args.log_file else None)
    logging.getLogger("chess_uci").debug(f"Probing engine: {args.engine}")

    sys.exit(probe(args))


if __name__ == "__main__":
    main()
