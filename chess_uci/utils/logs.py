"""
Logging setup for UCI sessions.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "chess_uci"


def default_log_file() -> Path:
    """Default session log location: ~/.chess_uci/session.log"""
    return Path.home() / ".chess_uci" / "session.log"


def setup_logger(debug=True, log_file: Optional[Path] = None):
    """
    Setup logger for UCI traffic debugging.

    Wire traffic is logged at DEBUG level ('>>>' sent, '<<<' received), so
    debug=False keeps only state changes and warnings.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Write to this file (truncated); None logs to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
