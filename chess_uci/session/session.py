"""
UCI Session

This module implements the client side of the Universal Chess Interface:
it writes commands to a running engine and scans the engine's output for
the lines that answer them.

Protocol Flow:
    Client → "uci"
    Engine → "id name Stockfish 15"
    Engine → "id author T. Romstad"
    Engine → "uciok"
    Client → "isready"
    Engine → "readyok"
    Client → "position startpos moves e2e4"
    Client → "go depth 10"              (sent with send_raw)
    Engine → "info depth 10 score cp 25 ..."
    Engine → "bestmove e7e5 ponder g1f3"
    Client → "quit"

Blocking:
    Every request/response exchange blocks until its sentinel line arrives
    or the engine's output ends. There is no timeout and no locking around
    requests; see chess_uci.session.deadline for an external deadline.

Failures:
    Transport and protocol errors never escape the plain methods, they
    turn into False / None. The try_* methods return an Outcome carrying
    the error instead. Any call after stop() raises SessionClosed.
"""

import io
import logging
import threading
from typing import Callable, Dict, Optional

import chess

from chess_uci.board.moves import position_command
from chess_uci.errors import (
    ProtocolViolation,
    SessionClosed,
    StreamClosed,
    TransportReadError,
    TransportWriteError,
)
from chess_uci.protocol import commands
from chess_uci.protocol.commands import MovesArg
from chess_uci.protocol.responses import (
    BestMove,
    is_bestmove,
    is_readyok,
    is_uciok,
    normalize_line,
    parse_bestmove,
    parse_id,
)
from chess_uci.session.config import SessionConfig
from chess_uci.session.outcome import Outcome

logger = logging.getLogger(__name__)


class UciSession:
    """
    Client for one UCI engine connection.

    The session owns both channels exclusively: nothing else may read from
    the engine's output or write to its input while the session is alive.

    Attributes:
        config: Encoding, logging and labelling settings
        closed: True once stop() has been called

    Methods:
        send_raw: Send a command line as is
        set_position_start / set_position_fen / set_position_board: 'position'
        send_ponder_hit / send_new_game: 'ponderhit' / 'ucinewgame'
        is_uci_ok: 'uci' handshake, captures engine identity
        is_ready: 'isready' synchronization
        get_best_move: Wait for 'bestmove', captures ponder move
        stop: 'quit' and close both channels
    """

    def __init__(self, output, input, config: Optional[SessionConfig] = None):
        """
        Initialize a session over already-open channels.

        Args:
            output: Writable channel to the engine (binary, or text if it is
                an io.TextIOBase or its mode has no 'b')
            input: Channel from the engine providing readline(), returning
                bytes or str and an empty value at end of stream
            config: Session configuration (default: SessionConfig())
        """
        self._output = output
        self._input = input
        self.config = config if config else SessionConfig()

        self._engine_name: Optional[str] = None
        self._engine_author: Optional[str] = None
        self._ponder: Optional[str] = None

        self._closed = False
        self._input_interrupted = False
        # interrupt() runs on a timer thread; guards the two flags above
        self._close_lock = threading.Lock()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self._closed:
            self.stop()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def input_channel(self):
        """Channel the engine's output is read from."""
        return self._input

    @property
    def engine_name(self) -> Optional[str]:
        self._ensure_open("engine_name")
        return self._engine_name

    @property
    def engine_author(self) -> Optional[str]:
        self._ensure_open("engine_author")
        return self._engine_author

    @property
    def ponder(self) -> Optional[str]:
        self._ensure_open("ponder")
        return self._ponder

    def get_engine_name(self) -> str:
        """Engine name from the last successful handshake, or 'Unknown'."""
        self._ensure_open("get_engine_name")
        return self._engine_name if self._engine_name is not None else self.config.unknown_label

    def get_engine_author(self) -> str:
        """Engine author from the last successful handshake, or 'Unknown'."""
        self._ensure_open("get_engine_author")
        return self._engine_author if self._engine_author is not None else self.config.unknown_label

    def get_ponder(self) -> Optional[str]:
        """
        Ponder move from the most recent bestmove line.

        Not cleared between searches: it always describes the last
        completed search, or None if that search had no ponder move.
        """
        self._ensure_open("get_ponder")
        return self._ponder

    # ------------------------------------------------------------------
    # Outbound commands
    # ------------------------------------------------------------------

    def try_send(self, command: str) -> Outcome[None]:
        """
        Send a command line and report whether the write succeeded.

        Args:
            command: Command without line terminator

        Returns:
            Outcome carrying a TransportWriteError on failure
        """
        self._ensure_open("send")

        data = command + self.config.newline
        try:
            if self._writes_text():
                self._output.write(data)
            else:
                self._output.write(data.encode(self.config.encoding))
            self._output.flush()
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Failed to send '{command}': {e}")
            return Outcome.failure(TransportWriteError(f"Failed to send '{command}': {e}"))

        if self.config.log_traffic:
            logger.debug(f">>> {command}")
        return Outcome.success()

    def _writes_text(self) -> bool:
        """Check if the output channel takes str rather than bytes."""
        if isinstance(self._output, io.TextIOBase):
            return True
        mode = getattr(self._output, "mode", None)
        return isinstance(mode, str) and "b" not in mode

    def send_raw(self, command: str):
        """
        Send a command as is.

        Write failures are logged and otherwise ignored; use try_send() to
        observe them.
        """
        self.try_send(command)

    def set_position_start(self, moves: MovesArg = None):
        """
        Set position to start, optionally followed by moves.

        Args:
            moves: Space-separated UCI moves, or an iterable of UCI strings /
                chess.Move objects. None sends no 'moves' clause.
        """
        self.send_raw(commands.position_startpos(moves))

    def set_position_fen(self, fen: str, moves: MovesArg = None):
        """
        Set position to a FEN, optionally followed by moves.

        The FEN is sent as given; it is not validated.
        """
        self.send_raw(commands.position_fen(fen, moves))

    def set_position_board(self, board: chess.Board):
        """Set position to match a python-chess board, including its move stack."""
        self.send_raw(position_command(board))

    def send_ponder_hit(self):
        """Inform engine that the opponent played the expected move."""
        self.send_raw(commands.PONDERHIT)

    def send_new_game(self):
        """Inform engine that the next search will be from a different game."""
        self.send_raw(commands.UCINEWGAME)

    # ------------------------------------------------------------------
    # Request/response exchanges
    # ------------------------------------------------------------------

    def read_until(
        self,
        predicate: Callable[[str], bool],
        on_line: Optional[Callable[[str], None]] = None,
    ) -> Outcome[str]:
        """
        Block until the engine sends a line matching predicate.

        Lines are stripped of their terminator and surrounding whitespace
        before being tested. Non-matching lines are discarded after being
        passed to on_line.

        Args:
            predicate: Returns True for the line that ends the scan
            on_line: Called with every line read, including the match

        Returns:
            Outcome with the matching line, or a StreamClosed /
            TransportReadError if the engine's output ended or failed first
        """
        self._ensure_open("read")

        while True:
            # UnicodeDecodeError is a ValueError
            try:
                raw = self._input.readline()
                if isinstance(raw, bytes):
                    raw = raw.decode(self.config.encoding, errors=self.config.decode_errors)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to read from engine: {e}")
                return Outcome.failure(TransportReadError(f"Failed to read from engine: {e}"))

            if not raw:
                logger.debug("Engine output ended")
                return Outcome.failure(StreamClosed("Engine output ended before expected line"))

            line = normalize_line(raw)

            if self.config.log_traffic:
                logger.debug(f"<<< {line}")

            if on_line is not None:
                on_line(line)
            if predicate(line):
                return Outcome.success(line)

    def try_is_ready(self) -> Outcome[bool]:
        """Send 'isready' and wait for 'readyok'."""
        sent = self.try_send(commands.ISREADY)
        if not sent.ok:
            return Outcome.failure(sent.error)

        result = self.read_until(is_readyok)
        if not result.ok:
            return Outcome.failure(result.error)
        return Outcome.success(True)

    def is_ready(self) -> bool:
        """
        Check if engine is ready.

        Returns:
            True once 'readyok' arrives, False if the engine's output ends
            or fails first
        """
        return self.try_is_ready().ok

    def try_is_uci_ok(self) -> Outcome[bool]:
        """
        Send 'uci' and wait for 'uciok', capturing the engine's id lines.

        Name and author are only stored once 'uciok' arrives; when several
        id lines of the same kind are seen, the last one wins.
        """
        sent = self.try_send(commands.UCI)
        if not sent.ok:
            return Outcome.failure(sent.error)

        seen: Dict[str, str] = {}

        def capture_id(line: str):
            engine_id = parse_id(line)
            if engine_id is not None:
                seen[engine_id.key] = engine_id.value

        result = self.read_until(is_uciok, on_line=capture_id)
        if not result.ok:
            return Outcome.failure(result.error)

        if "name" in seen:
            self._engine_name = seen["name"]
        if "author" in seen:
            self._engine_author = seen["author"]

        logger.info(f"UCI handshake complete: {self.get_engine_name()} by {self.get_engine_author()}")
        return Outcome.success(True)

    def is_uci_ok(self) -> bool:
        """
        Tell the engine to use UCI and check status.

        Returns:
            True once 'uciok' arrives, False if the engine's output ends
            or fails first
        """
        return self.try_is_uci_ok().ok

    def try_get_best_move(self) -> Outcome[BestMove]:
        """
        Wait for a 'bestmove' line and parse it.

        The ponder move is replaced on every successful parse (with None if
        the line has no 'ponder <move>' part). On failure it is untouched.
        """
        result = self.read_until(is_bestmove)
        if not result.ok:
            return Outcome.failure(result.error)

        try:
            best = parse_bestmove(result.value)
        except ProtocolViolation as e:
            logger.warning(f"Malformed bestmove line from engine: {e}")
            return Outcome.failure(e)

        self._ponder = best.ponder
        logger.info(f"Best move: {best.move} (ponder: {best.ponder})")
        return Outcome.success(best)

    def get_best_move(self) -> Optional[str]:
        """
        Get best move of the current search.

        Does not start a search: send 'go ...' with send_raw() first. The
        ponder move is kept and can be read with get_ponder().

        Returns:
            Best move token, or None if the engine's output ended, failed or
            was malformed before a bestmove arrived
        """
        result = self.try_get_best_move()
        if not result.ok:
            return None
        return result.value.move

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    def interrupt(self):
        """
        Close the input channel to end a blocking read.

        Meant to be called from another thread (see deadline). The session
        stays open but every later read reports a failure.

        Unlike every other operation this does not raise SessionClosed after
        stop(): a timer may fire after the session was stopped, and the input
        is already closed by then, so the call does nothing.
        """
        with self._close_lock:
            if self._closed or self._input_interrupted:
                return
            self._input_interrupted = True
        logger.info("Interrupting engine input")
        self._close_channel("input", self._input)

    def stop(self):
        """
        Stop the engine: send 'quit' and close both channels.

        Each channel is closed exactly once and independently of the other;
        close failures are logged and ignored. The session cannot be used
        afterwards.
        """
        self._ensure_open("stop")
        try:
            self.send_raw(commands.QUIT)
        finally:
            with self._close_lock:
                self._closed = True
                close_input = not self._input_interrupted

            if close_input:
                self._close_channel("input", self._input)
            self._close_channel("output", self._output)

        logger.info("UCI session stopped")

    def _close_channel(self, label: str, channel):
        try:
            channel.close()
        except Exception as e:
            logger.warning(f"Error closing {label} channel: {e}")

    def _ensure_open(self, operation: str):
        if self._closed:
            raise SessionClosed(operation)
