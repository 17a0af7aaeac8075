# Area: Officiating
"""
league_overseer._match.roll_call — Roll-call validator
=======================================================

Samples who is playing an official match once it has run long enough,
and decides whether that sample is good enough to report.

A sample is invalid when a player has no stable identity, or when two
players on the same designated colour resolve to different non-empty
team labels. An invalid sample is discarded and retried later while the
match still has time for another attempt; otherwise it is committed as
it stands.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from .context import OverseerContext
from .match_state import OfficialMatch
from .snapshot import Participant
from .team_identity import TeamIdentityResolver
from ..types import TeamColor

logger = logging.getLogger("league_overseer.roll_call")


@dataclass
class RollCallResult:
    """
    Outcome of one roll-call sample.

    Attributes:
        participants: Players sampled, in enumeration order
        team_one_label / team_two_label: First non-empty label seen per colour
        inconsistent_teams: Colours where a second, different label was seen
        missing_identity: True if a sampled player had no stable identity
    """

    participants: List[Participant] = field(default_factory=list)
    team_one_label: str = ""
    team_two_label: str = ""
    inconsistent_teams: Set[TeamColor] = field(default_factory=set)
    missing_identity: bool = False

    @property
    def valid(self) -> bool:
        return not self.inconsistent_teams and not self.missing_identity


def _format_clock(seconds: float) -> str:
    return f"{int(seconds // 60)}:{int(seconds % 60):02d}"


class RollCallValidator:
    """Samples and commits the participant list of an official match."""

    def __init__(self, context: OverseerContext, resolver: TeamIdentityResolver):
        self.context = context
        self.resolver = resolver

    def is_due(self, match: Optional[OfficialMatch], now: float) -> bool:
        if match is None or not match.started or match.participants:
            return False
        return now - match.start_time >= match.rollcall_delay

    def sample(self) -> RollCallResult:
        teams = self.context.teams
        result = RollCallResult()

        for player in self.context.host.list_active_players():
            label = self.resolver.lookup(player.identity) if player.identity else ""
            result.participants.append(Participant(
                identity=player.identity,
                callsign=player.callsign,
                ip_address=player.ip_address,
                team_name=label,
                team=player.team,
            ))

            if not player.identity:
                result.missing_identity = True

            if not label:
                continue
            if player.team == teams.team_one:
                if not result.team_one_label:
                    result.team_one_label = label
                elif label != result.team_one_label:
                    result.inconsistent_teams.add(teams.team_one)
            elif player.team == teams.team_two:
                if not result.team_two_label:
                    result.team_two_label = label
                elif label != result.team_two_label:
                    result.inconsistent_teams.add(teams.team_two)

        return result

    def run(self, match: OfficialMatch) -> RollCallResult:
        """
        Take a roll call for the match.

        A retry is scheduled when the sample is invalid and
        rollcall_delay + margin is still below the planned duration;
        otherwise the sample is committed.
        """
        config = self.context.config
        result = self.sample()

        if not result.valid and match.rollcall_delay + config.rollcall_margin < match.planned_duration:
            logger.info("Invalid player found on field at %s.", _format_clock(match.rollcall_delay))
            for team in sorted(result.inconsistent_teams, key=lambda t: t.value):
                self.resolver.request_refresh_for_team(team)
            match.rollcall_delay += config.rollcall_retry_delay
            logger.debug("Next roll call at %s", _format_clock(match.rollcall_delay))
            return result

        if not result.valid:
            logger.debug(
                "Committing inconsistent roll call (teams=%s, missing identity=%s)",
                [t.display_name for t in result.inconsistent_teams], result.missing_identity,
            )

        match.participants = list(result.participants)
        match.participants_recorded = True
        if result.team_one_label:
            match.team_one_name = result.team_one_label
        if result.team_two_label:
            match.team_two_name = result.team_two_label
        logger.info(
            "Roll call recorded %d player(s): %s vs %s",
            len(match.participants), match.team_one_name, match.team_two_name,
        )
        return result
