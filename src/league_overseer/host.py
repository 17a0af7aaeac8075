"""
league_overseer.host — The capabilities the game server provides
=================================================================

Host integrations subclass GameHost and implement the abstract methods.
The overseer only ever talks to the game server through this class, so
it never depends on how the host stores or owns its player records.

Countdown vocabulary
--------------------
in progress : a start command was issued and the pre-game timer is
              still counting down; the game has not begun.
active      : the timed game is running (the countdown has elapsed).
paused      : an active game was paused with /pause.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .types import PlayerRecord, TeamColor

# Special message recipients
ALL_PLAYERS = -1
ADMINISTRATORS = -2


class GameHost(ABC):
    """
    Abstract base class for the game server the overseer is embedded in.

    The lookup helpers have default implementations built on
    list_players(); hosts with indexed player tables may override them.
    """

    # ──────────────────────────────────────────────────────────────
    # Players
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def list_players(self) -> List[PlayerRecord]:
        """Return every connected player, observers included."""

    def get_player(self, slot_id: int) -> Optional[PlayerRecord]:
        for player in self.list_players():
            if player.slot_id == slot_id:
                return player
        return None

    def lookup_by_identity(self, identity: str) -> Optional[PlayerRecord]:
        if not identity:
            return None
        for player in self.list_players():
            if player.identity == identity:
                return player
        return None

    def lookup_by_callsign(self, callsign: str) -> Optional[PlayerRecord]:
        for player in self.list_players():
            if player.callsign == callsign:
                return player
        return None

    def list_active_players(self) -> List[PlayerRecord]:
        """Connected players that are not observing."""
        return [p for p in self.list_players() if not p.is_observer]

    @abstractmethod
    def team_count(self, team: TeamColor) -> int:
        """Number of players currently on a team colour."""

    @abstractmethod
    def team_player_limit(self, team: TeamColor) -> int:
        """Player-slot limit of a team colour on the current map."""

    # ──────────────────────────────────────────────────────────────
    # Permissions
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def has_permission(self, slot_id: int, permission: str) -> bool:
        """Whether a player holds a named server permission."""

    @abstractmethod
    def grant_permission(self, slot_id: int, permission: str) -> None:
        """Grant a named server permission to a player."""

    # ──────────────────────────────────────────────────────────────
    # Countdown and game control
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def is_countdown_in_progress(self) -> bool: ...

    @abstractmethod
    def is_countdown_active(self) -> bool: ...

    @abstractmethod
    def is_countdown_paused(self) -> bool: ...

    @abstractmethod
    def start_countdown(self, delay_seconds: int, time_limit: float, started_by: str) -> None:
        """Start the pre-game countdown for a timed game."""

    @abstractmethod
    def pause_countdown(self, paused_by: str) -> None: ...

    @abstractmethod
    def resume_countdown(self, resumed_by: str) -> None: ...

    @abstractmethod
    def end_game(self) -> None:
        """Force the current countdown or game to end now."""

    @abstractmethod
    def time_limit(self) -> float:
        """Configured length of a timed game, in seconds."""

    @abstractmethod
    def current_time(self) -> float:
        """Monotonic server time, in seconds."""

    # ──────────────────────────────────────────────────────────────
    # Messaging and recording
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def send_message(self, recipient: int, text: str) -> None:
        """Send text to a slot id, ALL_PLAYERS or ADMINISTRATORS."""

    @abstractmethod
    def start_recording(self) -> bool:
        """Start the demo recording buffer; True if recording started."""

    @abstractmethod
    def save_recording(self, filename: str) -> None: ...

    @abstractmethod
    def stop_recording(self) -> None: ...

    # ──────────────────────────────────────────────────────────────
    # Network
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def public_address(self) -> str: ...

    @abstractmethod
    def public_port(self) -> int: ...

    @abstractmethod
    def dispatch_http_job(self, job_id: str, url: str, post_data: str) -> None:
        """
        Queue an asynchronous form-encoded POST.

        The host must later deliver exactly one of JobCompletedEvent,
        JobTimeoutEvent or JobErrorEvent carrying the same job_id.
        """
