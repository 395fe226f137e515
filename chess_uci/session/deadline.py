"""
Deadlines for blocking exchanges.

UciSession blocks until the engine answers. A Deadline runs a timer next to
the blocking call; if it fires first it unblocks the read, and the pending
call returns False / None like any other read failure.

How the read is unblocked depends on the channel:
    - Engine subprocess: pass process=; the engine is killed, so its pipe
      reaches end of stream. Closing the read end of a pipe from another
      thread does not wake a readline() that is already blocked.
    - In-memory channels: the session's input is closed (UciSession.interrupt).
    - Anything else: pass on_expire=.

Usage:
    with deadline(session, 5.0, process=process) as d:
        ready = session.is_ready()
    if d.expired:
        ...
"""

import io
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def _is_os_stream(channel) -> bool:
    """Check if the channel is backed by a file descriptor (pipe, file, socket)."""
    try:
        channel.fileno()
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return False
    return True


class Deadline:
    """
    Timer that unblocks a session read once it expires.

    Attributes:
        seconds: Time allowed before expiry
        expired: True once the timer has fired
    """

    def __init__(
        self,
        session,
        seconds: float,
        on_expire: Optional[Callable[[], None]] = None,
        process=None,
    ):
        """
        Args:
            session: UciSession whose read should be unblocked
            seconds: Time allowed, must be positive
            on_expire: Called on expiry; takes precedence over process
            process: Engine subprocess (subprocess.Popen) killed on expiry

        Raises:
            ValueError: If seconds is not positive, or if the session reads
                from a file descriptor and neither on_expire nor process is
                given
        """
        if seconds <= 0:
            raise ValueError(f"seconds must be positive, got {seconds}")

        if on_expire is None and process is not None:
            on_expire = process.kill
        if on_expire is None:
            if _is_os_stream(session.input_channel):
                raise ValueError(
                    "Closing a pipe does not unblock a pending read; "
                    "pass process= (the engine subprocess) or on_expire="
                )
            on_expire = session.interrupt

        self.seconds = seconds
        self._on_expire = on_expire
        self._expired = threading.Event()
        self._timer = threading.Timer(seconds, self._expire)
        self._timer.daemon = True

    @property
    def expired(self) -> bool:
        return self._expired.is_set()

    def start(self):
        self._timer.start()

    def cancel(self):
        """Stop the timer, waiting for an expiry handler that is already running."""
        self._timer.cancel()
        if self._timer.is_alive() and threading.current_thread() is not self._timer:
            self._timer.join()

    def _expire(self):
        self._expired.set()
        logger.warning(f"Deadline of {self.seconds}s expired, unblocking engine read")
        try:
            self._on_expire()
        except Exception as e:
            logger.error(f"Deadline expiry handler failed: {e}", exc_info=True)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cancel()


def deadline(
    session,
    seconds: float,
    on_expire: Optional[Callable[[], None]] = None,
    process=None,
) -> Deadline:
    """Create a Deadline for use as a context manager."""
    return Deadline(session, seconds, on_expire=on_expire, process=process)
