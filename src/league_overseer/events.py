"""
league_overseer.events — Events the host delivers
==================================================

One frozen dataclass per host event. The host delivers them one at a
time through LeagueOverseer.handle_event(); each is processed to
completion before the next arrives.
"""

from dataclasses import dataclass
from typing import Tuple

from .types import TeamColor


@dataclass(frozen=True)
class CaptureEvent:
    """A team captured a flag."""
    team: TeamColor
    capper_identity: str = ""


@dataclass(frozen=True)
class GameStartEvent:
    """The countdown elapsed and the timed game began."""


@dataclass(frozen=True)
class GameEndEvent:
    """The timed game ended (time ran out or it was forced to end)."""


@dataclass(frozen=True)
class PlayerJoinEvent:
    slot_id: int
    callsign: str
    identity: str = ""
    verified: bool = False
    team: TeamColor = TeamColor.OBSERVER


@dataclass(frozen=True)
class SlashCommandEvent:
    """A registered overseer command; the handler returns True when handled."""
    slot_id: int
    command: str
    args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ChatCommandEvent:
    """Raw text of any slash command a player typed, including host built-ins."""
    slot_id: int
    message: str


@dataclass(frozen=True)
class MottoQueryEvent:
    """The host asks which motto to show for a player; the handler returns it."""
    identity: str


@dataclass(frozen=True)
class TickEvent:
    """Periodic poll from the host main loop."""


@dataclass(frozen=True)
class JobCompletedEvent:
    job_id: str
    body: str


@dataclass(frozen=True)
class JobTimeoutEvent:
    job_id: str
    error_code: int = 0


@dataclass(frozen=True)
class JobErrorEvent:
    job_id: str
    error_code: int
    error_message: str = ""
