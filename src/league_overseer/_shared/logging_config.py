# Area: Shared
"""
league_overseer._shared.logging_config — Structured logging setup
==================================================================

Two handlers on the package logger:

    terminal   colour-coded level, short component name
    log file   one JSON object per line

The plugin debug level (0-4) picks the package level. Match reports go
through the ``league_overseer.match_data`` logger, which stays at INFO
so a quiet server still keeps a record of every reported match. Those
lines are written without level or component so the report reads as a
block on the terminal.
"""

from __future__ import annotations
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import LeagueOverseerError

PACKAGE_LOGGER = "league_overseer"
MATCH_DATA_LOGGER = "league_overseer.match_data"

logger = logging.getLogger(PACKAGE_LOGGER)

DEBUG_LEVELS = (
    logging.WARNING,
    logging.INFO,
    logging.INFO,
    logging.DEBUG,
    logging.DEBUG,
)

# Extra attributes copied into the JSON log when a call passes them
JSON_EXTRA_FIELDS = ("job_id", "job_kind", "error_type")


def _component(name: str) -> str:
    prefix = PACKAGE_LOGGER + "."
    return name[len(prefix):] if name.startswith(prefix) else name


class TerminalFormatter(logging.Formatter):
    """Colour-coded terminal lines; match-data lines are printed as-is."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[2m",      # Dim
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        if record.name == MATCH_DATA_LOGGER:
            return record.getMessage()
        color = self.LEVEL_COLORS.get(record.levelno, "")
        # Copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname:<8}{self.RESET}"
        record.name = _component(record.name)
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, stamped with the record's own time."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.name == MATCH_DATA_LOGGER:
            entry["match_data"] = True
        for name in JSON_EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def level_for_debug(debug_level: int) -> int:
    """Logging level for a plugin debug level; out-of-range values clamp."""
    return DEBUG_LEVELS[min(max(debug_level, 0), len(DEBUG_LEVELS) - 1)]


def setup_logging(
    log_file_path: str = "league_overseer.log",
    level: int = logging.INFO,
) -> None:
    """
    Install the terminal and file handlers on the package logger.

    Calling it again replaces the handlers, so the level can be changed
    after a configuration reload. A log file that cannot be created is
    reported and skipped; terminal logging still works.

    Parameters
    ----------
    log_file_path : str
        JSON-lines log file; parent directories are created.
    level : int
        Level for the package logger (see level_for_debug).
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(level)

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    log_path = Path(log_file_path)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        pkg_logger.warning(f"Could not open log file {log_path}: {e}")
    else:
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)

    logging.getLogger(MATCH_DATA_LOGGER).setLevel(logging.INFO)
    pkg_logger.propagate = False


def log_and_terminate(error: "LeagueOverseerError", exit_code: int = 1) -> None:
    """
    Report a startup error and exit; the overseer never becomes active.

    The structured error block goes to stderr so it is visible even when
    logging has not been set up yet.
    """
    formatter = getattr(error, "format_error_log", None)
    print(formatter() if formatter else str(error), file=sys.stderr)
    logger.critical(
        f"Overseer halted: {error}",
        extra={"error_type": error.__class__.__name__},
    )
    sys.exit(exit_code)
