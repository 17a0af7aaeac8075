# Area: Officiating
"""
league_overseer._match.snapshot — Immutable match records
==========================================================

Participants, capture records and the end-of-match snapshot that the
report pipeline and the recorder work from. Snapshots never change after
they are built, so a job completing after the match was reset still sees
the data it was dispatched with.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .enums import MatchKind
from ..types import TeamColor


@dataclass(frozen=True)
class Participant:
    """
    A player recorded by roll call.

    Attributes:
        identity: Stable player identifier
        callsign: Callsign at roll-call time
        ip_address: Network address at roll-call time
        team_name: Team label resolved for the player ("" if unknown)
        team: Team colour the player was playing on
    """

    identity: str
    callsign: str
    ip_address: str
    team_name: str
    team: TeamColor


@dataclass(frozen=True)
class CaptureRecord:
    """One counted capture; match_seconds is None during the countdown."""

    team: TeamColor
    identity: str
    match_seconds: Optional[float]


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Everything known about a match at the moment it ended.

    Attributes:
        kind: FUN or OFFICIAL
        team_one / team_two: Designated colours
        team_one_name / team_two_name: Display labels
        team_one_points / team_two_points: Final scores
        planned_duration: Timed game length in seconds
        start_time: Host time the game started, None if it never did
        match_time: UTC wall-clock time the match ended
        participants: Roll-call result, empty if none was committed
        canceled / cancel_reason: Cancellation state
        captures: Capture log
    """

    kind: MatchKind
    team_one: TeamColor
    team_two: TeamColor
    team_one_name: str
    team_two_name: str
    team_one_points: int
    team_two_points: int
    planned_duration: float
    start_time: Optional[float]
    match_time: datetime
    participants: Tuple[Participant, ...] = ()
    canceled: bool = False
    cancel_reason: str = ""
    captures: Tuple[CaptureRecord, ...] = ()

    @property
    def duration_minutes(self) -> int:
        return int(self.planned_duration // 60)

    @property
    def match_time_text(self) -> str:
        return self.match_time.strftime("%Y-%m-%d %H:%M:%S")

    def players_on(self, team: TeamColor) -> Tuple[Participant, ...]:
        return tuple(p for p in self.participants if p.team == team)
