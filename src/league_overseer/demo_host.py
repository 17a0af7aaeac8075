# Area: Shared
"""
league_overseer.demo_host — In-memory game host
================================================

A ready-to-use GameHost that simulates a game server in memory: a
manual clock, a countdown and game timer, players, permissions,
messages, a recording buffer and an HTTP job queue.

It is the host used by the test-suite and by ``--simulate``.

Usage:
    host = DemoHost(time_limit=900)
    overseer = LeagueOverseer(config, host)
    alice = host.add_player("alice", TeamColor.RED, identity="101")
    host.type_command(alice.slot_id, "/official")
    host.pump(overseer)
    host.run(overseer, seconds=120)
"""

import dataclasses
import logging
from collections import deque
from typing import Any, Deque, Dict, List, Optional, Set, Tuple

from ._shared.http_jobs import HttpJobRunner
from .events import (
    ChatCommandEvent,
    GameEndEvent,
    GameStartEvent,
    JobCompletedEvent,
    JobErrorEvent,
    JobTimeoutEvent,
    PlayerJoinEvent,
    SlashCommandEvent,
    TickEvent,
)
from .host import ADMINISTRATORS, ALL_PLAYERS, GameHost
from .types import PlayerRecord, TeamColor

logger = logging.getLogger("league_overseer.demo_host")

DEFAULT_TEAM_LIMITS = {TeamColor.RED: 8, TeamColor.GREEN: 8}


class DemoHost(GameHost):
    """
    In-memory GameHost with a manually advanced clock.

    Attributes:
        clock: Current server time in seconds
        messages: (recipient, text) for every message sent
        dispatched_jobs: (job_id, url, post_data) for every HTTP job
        saved_recordings: File names passed to save_recording()
        recording: Whether the recording buffer is running
        job_runner: Optional HttpJobRunner that really sends the jobs
    """

    def __init__(
        self,
        time_limit: float = 1800.0,
        team_limits: Optional[Dict[TeamColor, int]] = None,
        address: str = "127.0.0.1",
        port: int = 5154,
        job_runner: Optional[HttpJobRunner] = None,
    ):
        self.clock = 0.0
        self._time_limit = time_limit
        self._team_limits = dict(DEFAULT_TEAM_LIMITS if team_limits is None else team_limits)
        self._address = address
        self._port = port
        self.job_runner = job_runner

        self._players: Dict[int, PlayerRecord] = {}
        self._permissions: Dict[int, Set[str]] = {}
        self._next_slot = 0

        self.messages: List[Tuple[int, str]] = []
        self.dispatched_jobs: List[Tuple[str, str, str]] = []
        self.saved_recordings: List[str] = []
        self.recording = False
        self.recording_available = True

        self._events: Deque[Any] = deque()
        self._countdown_until: Optional[float] = None
        self._pending_limit = time_limit
        self._game_ends_at: Optional[float] = None
        self._paused_at: Optional[float] = None

    # ──────────────────────────────────────────────────────────────
    # Players
    # ──────────────────────────────────────────────────────────────
    def add_player(
        self,
        callsign: str,
        team: TeamColor = TeamColor.OBSERVER,
        identity: str = "",
        verified: bool = True,
        permissions=("spawn",),
        admin: bool = False,
        ip_address: str = "",
    ) -> PlayerRecord:
        """Connect a player and queue its join event."""
        slot_id = self._next_slot
        self._next_slot += 1
        player = PlayerRecord(
            slot_id=slot_id,
            callsign=callsign,
            identity=identity,
            ip_address=ip_address or f"10.0.0.{slot_id + 1}",
            team=team,
            verified=verified,
            admin=admin,
        )
        self._players[slot_id] = player
        self._permissions[slot_id] = set(permissions)
        self._events.append(PlayerJoinEvent(
            slot_id=slot_id,
            callsign=callsign,
            identity=identity,
            verified=verified,
            team=team,
        ))
        return player

    def remove_player(self, slot_id: int) -> None:
        self._players.pop(slot_id, None)
        self._permissions.pop(slot_id, None)

    def set_team(self, slot_id: int, team: TeamColor) -> None:
        self._players[slot_id] = dataclasses.replace(self._players[slot_id], team=team)

    def list_players(self) -> List[PlayerRecord]:
        return [self._players[slot] for slot in sorted(self._players)]

    def team_count(self, team: TeamColor) -> int:
        return sum(1 for p in self._players.values() if p.team == team)

    def team_player_limit(self, team: TeamColor) -> int:
        return self._team_limits.get(team, 0)

    # ──────────────────────────────────────────────────────────────
    # Permissions
    # ──────────────────────────────────────────────────────────────
    def has_permission(self, slot_id: int, permission: str) -> bool:
        return permission in self._permissions.get(slot_id, set())

    def grant_permission(self, slot_id: int, permission: str) -> None:
        self._permissions.setdefault(slot_id, set()).add(permission)

    # ──────────────────────────────────────────────────────────────
    # Countdown and game control
    # ──────────────────────────────────────────────────────────────
    def is_countdown_in_progress(self) -> bool:
        return self._countdown_until is not None

    def is_countdown_active(self) -> bool:
        return self._game_ends_at is not None

    def is_countdown_paused(self) -> bool:
        return self._paused_at is not None

    def start_countdown(self, delay_seconds: int, time_limit: float, started_by: str) -> None:
        logger.debug("Countdown of %ss started by %s", delay_seconds, started_by)
        self._countdown_until = self.clock + delay_seconds
        self._pending_limit = time_limit

    def pause_countdown(self, paused_by: str) -> None:
        if self.is_countdown_active() and not self.is_countdown_paused():
            self._paused_at = self.clock
            self.send_message(ALL_PLAYERS, f"Countdown paused by {paused_by}")

    def resume_countdown(self, resumed_by: str) -> None:
        if self._paused_at is not None:
            self._game_ends_at += self.clock - self._paused_at
            self._paused_at = None
            self.send_message(ALL_PLAYERS, f"Countdown resumed by {resumed_by}")

    def end_game(self) -> None:
        if not (self.is_countdown_in_progress() or self.is_countdown_active()):
            return
        self._finish_game()

    def _finish_game(self) -> None:
        self._countdown_until = None
        self._game_ends_at = None
        self._paused_at = None
        self._events.append(GameEndEvent())

    def time_limit(self) -> float:
        return self._time_limit

    def current_time(self) -> float:
        return self.clock

    def advance(self, seconds: float) -> None:
        """Move the clock forward and queue any timer events that fire."""
        self.clock += seconds
        if self._countdown_until is not None and self.clock >= self._countdown_until:
            self._countdown_until = None
            self._game_ends_at = self.clock + self._pending_limit
            self._events.append(GameStartEvent())
        elif (self._game_ends_at is not None and self._paused_at is None
                and self.clock >= self._game_ends_at):
            self._finish_game()

    # ──────────────────────────────────────────────────────────────
    # Messaging and recording
    # ──────────────────────────────────────────────────────────────
    def send_message(self, recipient: int, text: str) -> None:
        logger.debug("[to %s] %s", recipient, text)
        self.messages.append((recipient, text))

    def messages_to(self, recipient: int) -> List[str]:
        return [text for to, text in self.messages if to == recipient]

    @property
    def broadcasts(self) -> List[str]:
        return self.messages_to(ALL_PLAYERS)

    @property
    def admin_messages(self) -> List[str]:
        return self.messages_to(ADMINISTRATORS)

    def start_recording(self) -> bool:
        self.recording = self.recording_available
        return self.recording

    def save_recording(self, filename: str) -> None:
        self.saved_recordings.append(filename)

    def stop_recording(self) -> None:
        self.recording = False

    # ──────────────────────────────────────────────────────────────
    # Network
    # ──────────────────────────────────────────────────────────────
    def public_address(self) -> str:
        return self._address

    def public_port(self) -> int:
        return self._port

    def dispatch_http_job(self, job_id: str, url: str, post_data: str) -> None:
        self.dispatched_jobs.append((job_id, url, post_data))
        if self.job_runner is not None:
            self.job_runner.submit(job_id, url, post_data)

    def complete_job(self, job_id: str, body: str) -> None:
        self._events.append(JobCompletedEvent(job_id=job_id, body=body))

    def time_out_job(self, job_id: str) -> None:
        self._events.append(JobTimeoutEvent(job_id=job_id))

    def fail_job(self, job_id: str, error_code: int, message: str = "") -> None:
        self._events.append(JobErrorEvent(job_id=job_id, error_code=error_code, error_message=message))

    # ──────────────────────────────────────────────────────────────
    # Event loop
    # ──────────────────────────────────────────────────────────────
    def type_command(self, slot_id: int, text: str) -> None:
        """Queue what the host sees when a player types a slash command."""
        self._events.append(ChatCommandEvent(slot_id=slot_id, message=text))
        parts = text.strip().lstrip("/").split()
        if parts:
            self._events.append(SlashCommandEvent(slot_id=slot_id, command=parts[0], args=tuple(parts[1:])))

    def queue(self, event: Any) -> None:
        self._events.append(event)

    def pump(self, overseer, wait_seconds: Optional[float] = None) -> List[Any]:
        """Deliver queued events (and finished HTTP jobs) until none are left."""
        results = []
        while True:
            if self.job_runner is not None:
                self._events.extend(self.job_runner.drain(wait_seconds))
                wait_seconds = None
            if not self._events:
                return results
            event = self._events.popleft()
            results.append(overseer.handle_event(event))

    def run(self, overseer, seconds: float, tick: float = 1.0) -> None:
        """Advance the clock in ticks, delivering timer and tick events."""
        elapsed = 0.0
        while elapsed < seconds:
            self.advance(tick)
            elapsed += tick
            self._events.append(TickEvent())
            self.pump(overseer)
