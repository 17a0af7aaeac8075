# Area: Officiating
"""
league_overseer._match.teams — Designated team colours
=======================================================

Finds the two colours the current map fields, once, at startup.
"""

import logging
from dataclasses import dataclass

from ..errors import ConfigurationError
from ..host import GameHost
from ..types import COMPETING_COLORS, TeamColor

logger = logging.getLogger("league_overseer.teams")


@dataclass(frozen=True)
class TeamColorAssignment:
    """
    The two colours that play official matches on this server.

    Attributes:
        team_one: First colour with a non-zero player limit
        team_two: Second colour with a non-zero player limit
    """

    team_one: TeamColor
    team_two: TeamColor

    def is_designated(self, team: TeamColor) -> bool:
        return team in (self.team_one, self.team_two)


def detect_team_colors(host: GameHost) -> TeamColorAssignment:
    """
    Scan the competing colours in order and take the first two the map uses.

    Raises:
        ConfigurationError: If the map supports fewer than two colours
    """
    found = [team for team in COMPETING_COLORS if host.team_player_limit(team) > 0][:2]
    if len(found) < 2:
        raise ConfigurationError(
            [f"map supports {len(found)} team colour(s); official matches need two"],
            source="map",
        )
    assignment = TeamColorAssignment(team_one=found[0], team_two=found[1])
    logger.info(
        "Designated teams: %s vs %s",
        assignment.team_one.display_name, assignment.team_two.display_name,
    )
    return assignment
