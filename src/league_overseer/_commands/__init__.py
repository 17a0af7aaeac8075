# Area: Commands
"""
league_overseer._commands — Slash command handlers
===================================================

The authorization gate and one handler per overseer command.
"""

from .gate import CommandAuthorizationGate, disabled_command_notice
from .handler_base import BaseCommandHandler, parse_countdown
from .handler_countdown import PauseCommandHandler, ResumeCommandHandler
from .handler_end import CancelCommandHandler, FinishCommandHandler
from .handler_spawn import SpawnCommandHandler
from .handler_start import FunMatchCommandHandler, OfficialCommandHandler

__all__ = [
    "CommandAuthorizationGate",
    "disabled_command_notice",
    "BaseCommandHandler",
    "parse_countdown",
    "PauseCommandHandler",
    "ResumeCommandHandler",
    "CancelCommandHandler",
    "FinishCommandHandler",
    "SpawnCommandHandler",
    "FunMatchCommandHandler",
    "OfficialCommandHandler",
]
