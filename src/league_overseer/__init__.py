"""
league_overseer — League match officiating for game servers
===========================================================

Tracks fun and official matches on a game server, takes a roll call of
who played, resolves each player's league team and reports finished
official matches to the league website.

Quick Start (in-memory host):
    from league_overseer import DemoHost, LeagueOverseer
    host = DemoHost()
    overseer = LeagueOverseer({"league_url": "https://league.example/api"}, host)

Host Integration:
    from league_overseer import GameHost, LeagueOverseer
    class MyServer(GameHost): ...  # Implement the host capabilities
    overseer = LeagueOverseer(load_config("overseer.ini"), MyServer())
    overseer.handle_event(TickEvent())

Event Types
-----------
Everything the host delivers is available for import:

    from league_overseer import (
        CaptureEvent, GameStartEvent, GameEndEvent, PlayerJoinEvent,
        SlashCommandEvent, ChatCommandEvent, MottoQueryEvent, TickEvent,
        JobCompletedEvent, JobTimeoutEvent, JobErrorEvent,
    )
"""

from ._config import OverseerConfig, load_config, read_map_name, validate_config
from ._match import (
    FunMatchCompleted,
    MatchKind,
    MatchSnapshot,
    OfficialCanceled,
    OfficialCompleted,
    OfficialMissingParticipants,
    Participant,
    build_report_payload,
)
from ._shared import HttpJobRunner, setup_logging
from .demo_host import DemoHost
from .errors import (
    ConfigurationError,
    InvalidStateTransition,
    LeagueOverseerError,
    PermissionDenied,
    ReportFormatError,
    ReportTransportFailure,
)
from .events import (
    CaptureEvent,
    ChatCommandEvent,
    GameEndEvent,
    GameStartEvent,
    JobCompletedEvent,
    JobErrorEvent,
    JobTimeoutEvent,
    MottoQueryEvent,
    PlayerJoinEvent,
    SlashCommandEvent,
    TickEvent,
)
from .host import ADMINISTRATORS, ALL_PLAYERS, GameHost
from .overseer import LeagueOverseer
from .types import COMPETING_COLORS, PlayerRecord, TeamColor

__version__ = "1.0.0"

__all__ = [
    # Main classes
    "LeagueOverseer",
    "GameHost",
    "DemoHost",
    "HttpJobRunner",
    # Configuration
    "OverseerConfig",
    "load_config",
    "validate_config",
    "read_map_name",
    "setup_logging",
    # Errors
    "LeagueOverseerError",
    "ConfigurationError",
    "PermissionDenied",
    "InvalidStateTransition",
    "ReportFormatError",
    "ReportTransportFailure",
    # Events
    "CaptureEvent",
    "ChatCommandEvent",
    "GameEndEvent",
    "GameStartEvent",
    "JobCompletedEvent",
    "JobErrorEvent",
    "JobTimeoutEvent",
    "MottoQueryEvent",
    "PlayerJoinEvent",
    "SlashCommandEvent",
    "TickEvent",
    # Types
    "TeamColor",
    "COMPETING_COLORS",
    "PlayerRecord",
    "ALL_PLAYERS",
    "ADMINISTRATORS",
    "MatchKind",
    "MatchSnapshot",
    "Participant",
    "FunMatchCompleted",
    "OfficialCanceled",
    "OfficialCompleted",
    "OfficialMissingParticipants",
    "build_report_payload",
]
