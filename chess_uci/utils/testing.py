"""
In-memory Engine Channels

Stand-ins for the pipes of an engine process, used to drive a UciSession
without a real engine. Each channel records how often it was closed so that
shutdown behaviour can be checked.

Channels:
    1. ScriptedInput: Replays a fixed list of engine lines, then end of stream
    2. BlockingInput: Lines are fed from another thread; readline() blocks
    3. FailingInput: readline() raises OSError
    4. RecordingOutput: Collects the command lines written by the client
    5. FailingOutput: write() raises BrokenPipeError

Example:
    output = RecordingOutput()
    session = UciSession(output, ScriptedInput(["readyok"]))
    assert session.is_ready()
    assert output.lines == ["isready"]
"""

import queue
from typing import Iterable, List, Optional


class _Channel:
    """Close bookkeeping shared by all fake channels."""

    def __init__(self, close_error: Optional[Exception] = None):
        self.close_calls = 0
        self.closed = False
        self._close_error = close_error

    def close(self):
        self.close_calls += 1
        self.closed = True
        if self._close_error is not None:
            raise self._close_error

    def _check_open(self):
        if self.closed:
            raise ValueError("I/O operation on closed file")


class ScriptedInput(_Channel):
    """
    Engine output that replays the given lines.

    Args:
        lines: Lines the engine "sends", without terminators
        binary: Return bytes (like a subprocess pipe) instead of str
        close_error: Exception raised by close(), after recording the call
    """

    def __init__(self, lines: Iterable[str] = (), binary: bool = True, close_error: Optional[Exception] = None):
        super().__init__(close_error)
        self._lines = list(lines)
        self._binary = binary
        self.lines_read = 0

    def readline(self):
        self._check_open()
        if self.lines_read >= len(self._lines):
            return b"" if self._binary else ""
        line = self._lines[self.lines_read] + "\n"
        self.lines_read += 1
        return line.encode("utf-8") if self._binary else line


class BlockingInput(_Channel):
    """
    Engine output fed line by line with feed(); readline() blocks until a
    line arrives. close() wakes a blocked reader with end of stream.
    """

    _EOF = object()

    def __init__(self):
        super().__init__()
        self._queue: "queue.Queue" = queue.Queue()

    def feed(self, line: str):
        self._queue.put(line + "\n")

    def readline(self):
        self._check_open()
        item = self._queue.get()
        if item is self._EOF:
            return b""
        return item.encode("utf-8")

    def close(self):
        self._queue.put(self._EOF)
        super().close()


class FailingInput(_Channel):
    """Engine output whose readline() raises OSError."""

    def __init__(self, error: Optional[Exception] = None):
        super().__init__()
        self._error = error if error else OSError("read failed")

    def readline(self):
        raise self._error


class RecordingOutput(_Channel):
    """
    Engine input that records every byte written.

    Args:
        close_error: Exception raised by close(), after recording the call
    """

    def __init__(self, close_error: Optional[Exception] = None):
        super().__init__(close_error)
        self.data = b""
        self.flush_calls = 0

    def write(self, data: bytes) -> int:
        self._check_open()
        self.data += data
        return len(data)

    def flush(self):
        self._check_open()
        self.flush_calls += 1

    @property
    def lines(self) -> List[str]:
        """Command lines written so far, without terminators."""
        return self.data.decode("utf-8").splitlines()


class FailingOutput(_Channel):
    """Engine input whose write() raises, like a pipe to a dead process."""

    def __init__(self, error: Optional[Exception] = None, close_error: Optional[Exception] = None):
        super().__init__(close_error)
        self._error = error if error else BrokenPipeError("engine is gone")
        self.write_calls = 0

    def write(self, data: bytes) -> int:
        self.write_calls += 1
        raise self._error

    def flush(self):
        pass
