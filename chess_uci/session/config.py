"""
Session configuration for the UCI client.
"""

import codecs
from dataclasses import dataclass


@dataclass
class SessionConfig:
    """Configuration for a UCI session.

    Controls how lines are encoded on the way to the engine, how engine
    output is decoded, and what the identity accessors report before a
    handshake has succeeded.
    """

    # Wire encoding
    encoding: str = "utf-8"
    """Encoding used for binary channels"""

    decode_errors: str = "replace"
    """Error policy when decoding engine output: 'strict', 'replace' or 'ignore'"""

    newline: str = "\n"
    """Line terminator appended to every command"""

    # Session state
    unknown_label: str = "Unknown"
    """Value reported for engine name/author before a successful handshake"""

    # Logging
    log_traffic: bool = True
    """Log every line sent and received at DEBUG level"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")

        if self.decode_errors not in ("strict", "replace", "ignore"):
            raise ValueError(
                f"decode_errors should be 'strict', 'replace' or 'ignore', got {self.decode_errors}"
            )

        if self.newline not in ("\n", "\r\n"):
            raise ValueError(f"newline should be '\\n' or '\\r\\n', got {self.newline!r}")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"SessionConfig(encoding={self.encoding}, decode_errors={self.decode_errors}, "
            f"newline={self.newline!r}, unknown_label={self.unknown_label!r}, "
            f"log_traffic={self.log_traffic})"
        )
