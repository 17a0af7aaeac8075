# Area: Officiating
"""
league_overseer._match.match_state — Match state controller
============================================================

Holds the single live match and performs every transition on it.

The match is a tagged variant:

    Inactive        no match exists (the INACTIVE singleton)
    FunMatch        started with /fm, never reported
    OfficialMatch   started with /official, reported at game end

Transitions:
    Inactive -> FunMatch       start_fun()
    Inactive -> OfficialMatch  start_official()
    FunMatch / OfficialMatch -> Inactive   on_game_end()

Commands that are not allowed in the current phase raise
InvalidStateTransition; commands the caller may not run raise
PermissionDenied. Both carry the message shown to the caller and leave
the state untouched.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar, List, Optional, Union

from .context import OverseerContext
from .enums import MatchKind
from .outcomes import (
    FunMatchCompleted,
    MatchOutcome,
    OfficialCanceled,
    OfficialCompleted,
    OfficialMissingParticipants,
)
from .snapshot import CaptureRecord, MatchSnapshot, Participant
from ..errors import InvalidStateTransition, PermissionDenied
from ..host import ALL_PLAYERS
from ..types import COMPETING_COLORS, PlayerRecord, TeamColor

logger = logging.getLogger("league_overseer.match_state")

AUTO_CANCEL_REASON = "Official match automatically canceled due to all players leaving the match."
DEFAULT_TEAM_ONE_NAME = "Team-A"
DEFAULT_TEAM_TWO_NAME = "Team-B"
MIN_OFFICIAL_TEAM_SIZE = 2


@dataclass
class Inactive:
    """No match exists."""
    kind: ClassVar[MatchKind] = MatchKind.INACTIVE


INACTIVE = Inactive()


@dataclass
class LiveMatch:
    """State shared by fun and official matches."""

    planned_duration: float
    start_time: Optional[float] = None
    team_one_points: int = 0
    team_two_points: int = 0
    captures: List[CaptureRecord] = field(default_factory=list)

    @property
    def started(self) -> bool:
        return self.start_time is not None


@dataclass
class FunMatch(LiveMatch):
    kind: ClassVar[MatchKind] = MatchKind.FUN


@dataclass
class OfficialMatch(LiveMatch):
    """
    An official match in progress.

    Attributes:
        rollcall_delay: Seconds after start when the next roll call is due
        canceled / cancel_reason: Set by /cancel or the all-players-left check
        participants_recorded: True once roll call committed a list
        participants: Players recorded by roll call
        team_one_name / team_two_name: Labels refined by roll call
    """

    kind: ClassVar[MatchKind] = MatchKind.OFFICIAL

    rollcall_delay: float = 90.0
    canceled: bool = False
    cancel_reason: str = ""
    participants_recorded: bool = False
    participants: List[Participant] = field(default_factory=list)
    team_one_name: str = DEFAULT_TEAM_ONE_NAME
    team_two_name: str = DEFAULT_TEAM_TWO_NAME

    def cancel(self, reason: str) -> None:
        self.canceled = True
        self.cancel_reason = reason


Match = Union[Inactive, FunMatch, OfficialMatch]


class MatchStateController:
    """
    Owns the live match value; nothing else mutates it.

    Attributes:
        match: The current match variant (INACTIVE when none)
    """

    def __init__(self, context: OverseerContext):
        self.context = context
        self.match: Match = INACTIVE

    @property
    def host(self):
        return self.context.host

    @property
    def kind(self) -> MatchKind:
        return self.match.kind

    def current_official(self) -> Optional[OfficialMatch]:
        return self.match if isinstance(self.match, OfficialMatch) else None

    # ── Starting ─────────────────────────────────────────────

    def start_official(self, initiator: PlayerRecord, countdown: Optional[int] = None) -> OfficialMatch:
        self._require_player(initiator, "official", "start")
        teams = self.context.teams
        if (self.host.team_count(teams.team_one) < MIN_OFFICIAL_TEAM_SIZE
                or self.host.team_count(teams.team_two) < MIN_OFFICIAL_TEAM_SIZE):
            raise InvalidStateTransition(
                "official",
                "You may not have an official match with less than 2 players per team.",
            )
        self._require_no_match("official")

        match = OfficialMatch(
            planned_duration=self.host.time_limit(),
            rollcall_delay=self.context.config.rollcall_delay,
        )
        self.match = match
        self._announce_start("Official", initiator)
        self._start_countdown(countdown)
        return match

    def start_fun(self, initiator: PlayerRecord, countdown: Optional[int] = None) -> FunMatch:
        self._require_player(initiator, "fm", "start")
        self._require_no_match("fm")

        match = FunMatch(planned_duration=self.host.time_limit())
        self.match = match
        self._announce_start("Fun", initiator)
        self._start_countdown(countdown)
        return match

    def _require_player(self, initiator: PlayerRecord, command: str, verb: str) -> None:
        if initiator.is_observer:
            raise PermissionDenied(command, f"Observers are not allowed to {verb} matches.")

    def _require_no_match(self, command: str) -> None:
        if (not isinstance(self.match, Inactive)
                or self.host.is_countdown_active()
                or self.host.is_countdown_in_progress()):
            raise InvalidStateTransition(
                command, "There is already a game in progress; you cannot start another."
            )

    def _announce_start(self, label: str, initiator: PlayerRecord) -> None:
        logger.info("%s match started by %s (%s).", label, initiator.callsign, initiator.ip_address)
        self.host.send_message(ALL_PLAYERS, f"{label} match started by {initiator.callsign}.")

    def _start_countdown(self, countdown: Optional[int]) -> None:
        seconds = self.context.config.clamp_countdown(countdown)
        self.host.start_countdown(seconds, self.host.time_limit(), "Server")

    # ── Ending early ─────────────────────────────────────────

    def _require_started(self, command: str, verb: str) -> None:
        if self.host.is_countdown_in_progress():
            raise InvalidStateTransition(command, f"You may only {verb} a match after it has started.")
        if not self.host.is_countdown_active():
            noun = "cancel" if command == "cancel" else "end"
            raise InvalidStateTransition(command, f"There is no match in progress to {noun}.")

    def cancel(self, initiator: PlayerRecord, reason: Optional[str] = None) -> None:
        self._require_player(initiator, "cancel", "cancel")
        self._require_started("cancel", "cancel")

        if isinstance(self.match, OfficialMatch):
            self.match.cancel(reason or f"Official match cancellation requested by {initiator.callsign}")
        else:
            self.host.send_message(ALL_PLAYERS, f"Fun match ended by {initiator.callsign}")

        logger.info("Match ended by %s (%s).", initiator.callsign, initiator.ip_address)
        self.host.end_game()

    def finish_early(self, initiator: PlayerRecord) -> None:
        self._require_player(initiator, "finish", "finish")
        self._require_started("finish", "finish")

        match = self.current_official()
        if match is None:
            raise InvalidStateTransition("finish", "You cannot /finish a fun match. Use /cancel instead.")

        halfway = match.planned_duration / 2
        if not match.started or self.host.current_time() - match.start_time < halfway:
            raise InvalidStateTransition(
                "finish",
                "Sorry, I cannot automatically report a match less than half way through.\n"
                "Please use the /cancel command and message a referee for review of this match.",
            )

        logger.info("Official match ended early by %s (%s)", initiator.callsign, initiator.ip_address)
        self.host.send_message(ALL_PLAYERS, f"Official match ended early by {initiator.callsign}")
        self.host.end_game()

    # ── Host events ──────────────────────────────────────────

    def on_capture(self, team: TeamColor, capper_identity: str = "") -> bool:
        """Count a capture for a designated colour; False if it was not counted."""
        match = self.match
        if isinstance(match, Inactive):
            return False

        teams = self.context.teams
        if not teams.is_designated(team):
            logger.debug("Ignoring capture by non-designated team %s", team.display_name)
            return False
        if team == teams.team_one:
            match.team_one_points += 1
        else:
            match.team_two_points += 1

        match_seconds = self.host.current_time() - match.start_time if match.started else None
        match.captures.append(CaptureRecord(team=team, identity=capper_identity, match_seconds=match_seconds))
        return True

    def on_game_start(self) -> None:
        match = self.match
        if isinstance(match, Inactive):
            logger.debug("Game started without a match")
            return

        # Captures made during the countdown do not count
        match.team_one_points = 0
        match.team_two_points = 0
        match.captures.clear()
        match.start_time = self.host.current_time()
        match.planned_duration = self.host.time_limit()
        logger.info("%s match began (%.0fs planned)", match.kind.value.capitalize(), match.planned_duration)

    def check_players_left(self) -> bool:
        """Poll the host; run on_all_players_left() when nobody is playing."""
        if sum(self.host.team_count(team) for team in COMPETING_COLORS) > 0:
            return False
        self.on_all_players_left()
        return True

    def on_all_players_left(self) -> None:
        match = self.current_official()
        if match is not None and not match.canceled:
            match.cancel(AUTO_CANCEL_REASON)
            logger.info(AUTO_CANCEL_REASON)

        if self.host.is_countdown_active() or self.host.is_countdown_in_progress():
            self.host.end_game()

    def on_game_end(self, match_time: Optional[datetime] = None) -> MatchOutcome:
        """Produce the outcome of the finished game and reset to Inactive."""
        match_time = match_time or datetime.now(timezone.utc)
        match = self.match

        if isinstance(match, Inactive):
            outcome: MatchOutcome = FunMatchCompleted()
        elif isinstance(match, FunMatch):
            outcome = FunMatchCompleted(self._snapshot(match, match_time))
        elif match.canceled:
            outcome = OfficialCanceled(match.cancel_reason, self._snapshot(match, match_time))
        elif not match.participants:
            outcome = OfficialMissingParticipants(self._snapshot(match, match_time))
        else:
            outcome = OfficialCompleted(self._snapshot(match, match_time))

        self.match = INACTIVE
        return outcome

    def _snapshot(self, match: LiveMatch, match_time: datetime) -> MatchSnapshot:
        teams = self.context.teams
        official = isinstance(match, OfficialMatch)
        return MatchSnapshot(
            kind=match.kind,
            team_one=teams.team_one,
            team_two=teams.team_two,
            team_one_name=match.team_one_name if official else DEFAULT_TEAM_ONE_NAME,
            team_two_name=match.team_two_name if official else DEFAULT_TEAM_TWO_NAME,
            team_one_points=match.team_one_points,
            team_two_points=match.team_two_points,
            planned_duration=match.planned_duration,
            start_time=match.start_time,
            match_time=match_time,
            participants=tuple(match.participants) if official else (),
            canceled=match.canceled if official else False,
            cancel_reason=match.cancel_reason if official else "",
            captures=tuple(match.captures),
        )
