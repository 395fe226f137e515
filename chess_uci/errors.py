"""
Error taxonomy for UCI sessions.

Most of these never reach the caller of the plain session methods: transport
and protocol failures are turned into a negative result (False / None).
The ``try_*`` methods of UciSession hand them back inside an Outcome instead,
and SessionClosed is always raised.
"""


class UciError(Exception):
    """Base class for every error raised or reported by a UCI session."""


class TransportWriteError(UciError):
    """Writing or flushing a command to the engine failed."""


class TransportReadError(UciError):
    """Reading a line from the engine raised an error."""


class StreamClosed(UciError):
    """The engine's output ended before the expected line arrived."""


class ProtocolViolation(UciError):
    """The engine sent a line that does not follow the protocol."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class SessionClosed(UciError):
    """An operation was attempted on a session that has been stopped."""

    def __init__(self, operation: str = ""):
        message = "UCI session is closed"
        if operation:
            message = f"{message} (attempted: {operation})"
        super().__init__(message)
        self.operation = operation
