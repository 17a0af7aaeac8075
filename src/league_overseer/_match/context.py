# Area: Officiating
"""
league_overseer._match.context — Process-wide overseer context
===============================================================

One object built at startup and handed to every component: the
validated config, the host, the designated teams, the team identity
cache, the job registry and the map being played.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict

from .job_registry import JobRegistry
from .teams import TeamColorAssignment, detect_team_colors
from .._config import OverseerConfig, read_map_name
from ..host import GameHost

logger = logging.getLogger("league_overseer.context")


@dataclass
class TeamIdentityCache:
    """
    Team label per stable identity, shared by roll call and motto lookups.

    Lives for the whole process; team membership is a league-wide fact,
    not a property of any one match.
    """

    _labels: Dict[str, str] = field(default_factory=dict)

    def lookup(self, identity: str) -> str:
        return self._labels.get(identity, "")

    def store(self, identity: str, label: str) -> None:
        previous = self._labels.get(identity)
        self._labels[identity] = label
        if previous != label:
            logger.debug("Team label for %s: %r -> %r", identity, previous, label)

    def __contains__(self, identity: str) -> bool:
        return identity in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def clear(self) -> None:
        self._labels.clear()


@dataclass
class OverseerContext:
    config: OverseerConfig
    host: GameHost
    teams: TeamColorAssignment
    identities: TeamIdentityCache
    jobs: JobRegistry
    map_name: str = ""

    @classmethod
    def create(cls, config: OverseerConfig, host: GameHost) -> "OverseerContext":
        """
        Build the context for a server.

        Raises:
            ConfigurationError: If the map does not field two teams
        """
        teams = detect_team_colors(host)
        map_name = ""
        if config.rotation_league and config.mapchange_path:
            map_name = read_map_name(config.mapchange_path)
            logger.info("Current map being played: %s", map_name or "<unknown>")
        return cls(
            config=config,
            host=host,
            teams=teams,
            identities=TeamIdentityCache(),
            jobs=JobRegistry(host, config.league_url),
            map_name=map_name,
        )

    def close(self) -> None:
        self.jobs.clear()
        self.identities.clear()
