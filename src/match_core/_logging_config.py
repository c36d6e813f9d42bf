# Area: Shared
"""
match_core._logging_config — Structured logging setup
=====================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Library modules only create loggers under the ``match_core`` namespace;
applications (or the CLI) call ``setup_logging`` once.
"""

from __future__ import annotations
import logging
import json
import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .errors import MatchCoreError

# Package logger
logger = logging.getLogger("match_core")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON-lines formatter for file output.

    Match fields passed through ``extra=`` (game, seat count, error type)
    become top-level keys so log lines can be filtered per game.
    """

    MATCH_FIELDS = ("game_name", "num_players", "error_type")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "ts_ms": int(record.created * 1000),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in self.MATCH_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = "match_core.log",
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. None disables file logging.
    level : int
        Logging level. Defaults to INFO.
    stream : file-like or None
        Terminal stream. Defaults to stderr so stdout stays free for
        command output.
    """
    pkg_logger = logging.getLogger("match_core")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    pkg_logger.propagate = False


def log_error(error: "MatchCoreError") -> None:
    """
    Log a match_core error in the structured format.

    The formatted block goes to stderr verbatim; a one-line record goes
    through the logger so it also lands in the JSON file.
    """
    format_block = getattr(error, "format_error_log", None)
    if format_block is not None:
        print(format_block(), file=sys.stderr)

    logger.error(
        f"{error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )
