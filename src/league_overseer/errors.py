"""
league_overseer.errors — Custom exception classes
==================================================

Defines the exception hierarchy for the overseer.
Startup errors carry full context for structured logging; in-session
errors carry the message shown to the player who triggered them.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class LeagueOverseerError(Exception):
    """Base exception for all League Overseer errors."""
    pass


class ConfigurationError(LeagueOverseerError):
    """Raised when the overseer cannot start with the given configuration."""

    def __init__(self, problems: List[str], source: Optional[str] = None):
        self.problems = list(problems)
        self.source = source
        super().__init__(
            f"Invalid configuration{f' in {source}' if source else ''}: "
            f"{'; '.join(self.problems)}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIGURATION_ERROR",
            details={"source": self.source or "<inline>"},
            problems=self.problems,
        )


class PermissionDenied(LeagueOverseerError):
    """Raised when a player may not run a command."""

    def __init__(self, command: str, message: str):
        self.command = command
        self.message = message
        super().__init__(message)


class InvalidStateTransition(LeagueOverseerError):
    """Raised when a command is issued in the wrong match phase."""

    def __init__(self, command: str, message: str):
        self.command = command
        self.message = message
        super().__init__(message)


class ReportFormatError(LeagueOverseerError):
    """A league service response did not have the expected shape."""

    def __init__(self, job_kind: str, body: str, reason: str):
        self.job_kind = job_kind
        self.body = body
        self.reason = reason
        super().__init__(f"Unexpected {job_kind} response ({reason}): {body[:200]!r}")


class ReportTransportFailure(LeagueOverseerError):
    """A job to the league service timed out or failed in transport."""

    def __init__(
        self,
        job_id: str,
        job_kind: str,
        error_code: int,
        message: str = "",
        timed_out: bool = False,
    ):
        self.job_id = job_id
        self.job_kind = job_kind
        self.error_code = error_code
        self.message = message
        self.timed_out = timed_out
        if timed_out:
            text = f"{job_kind} job {job_id} to the league site timed out"
        else:
            text = f"{job_kind} job {job_id} failed: error code {error_code} - {message}"
        super().__init__(text)


def _format_error_block(
    error_type: str,
    details: Dict[str, Any],
    problems: List[str],
) -> str:
    """Format a structured error block for startup failures."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " LEAGUE OVERSEER ERROR — SERVER STARTUP HALTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        "",
        " ── DETAILS " + "─" * 52,
        _indent_json(details),
    ]

    if problems:
        lines.append("")
        lines.append(" ── PROBLEMS " + "─" * 51)
        for problem in problems:
            lines.append(f" • {problem}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
