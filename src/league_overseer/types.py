"""
league_overseer.types — Shared value types
===========================================

Team colours and the player record the host hands to the overseer.
All types are exported from the main package:

    from league_overseer import TeamColor, PlayerRecord
"""

from dataclasses import dataclass
from enum import Enum


class TeamColor(Enum):
    """Team colours known to the host, in the host's enumeration order."""
    ROGUE    = "rogue"
    RED      = "red"
    GREEN    = "green"
    BLUE     = "blue"
    PURPLE   = "purple"
    OBSERVER = "observer"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def padded(self, width: int = 7) -> str:
        """Display name padded with spaces for aligned log output."""
        return self.display_name.ljust(width)


# Colours that can field players in a match, in the fixed scan order used
# to pick the two designated teams.
COMPETING_COLORS = (
    TeamColor.RED,
    TeamColor.GREEN,
    TeamColor.BLUE,
    TeamColor.PURPLE,
)


@dataclass(frozen=True)
class PlayerRecord:
    """
    A connected player as reported by the host.

    Attributes:
        slot_id: Host player slot (the ``#id`` players can refer to)
        callsign: In-session display name
        identity: Stable, verified player identifier ("" when unverified)
        ip_address: Network address of the player
        team: Team colour the player is currently on
        verified: Whether the host verified the player's identity
        admin: Whether the player holds server administrator rights
    """

    slot_id: int
    callsign: str
    identity: str = ""
    ip_address: str = ""
    team: TeamColor = TeamColor.OBSERVER
    verified: bool = False
    admin: bool = False

    @property
    def is_observer(self) -> bool:
        return self.team == TeamColor.OBSERVER
