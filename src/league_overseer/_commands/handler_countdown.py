# Area: Commands
"""
league_overseer._commands.handler_countdown — Pause and resume
===============================================================

/pause and /resume act on the host's game timer directly; they do not
touch the match state.
"""

from typing import Tuple

from .handler_base import BaseCommandHandler
from ..errors import InvalidStateTransition
from ..types import PlayerRecord


class PauseCommandHandler(BaseCommandHandler):
    name = "pause"

    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        if self.host.is_countdown_paused():
            raise InvalidStateTransition(self.name, "The match is already paused!")
        if not self.host.is_countdown_active():
            raise InvalidStateTransition(self.name, "There is no active match to pause right now.")
        self.log_handling(caller, args)
        self.host.pause_countdown(caller.callsign)


class ResumeCommandHandler(BaseCommandHandler):
    name = "resume"

    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        if not self.host.is_countdown_paused():
            raise InvalidStateTransition(self.name, "The match is not paused!")
        if not self.host.is_countdown_active():
            raise InvalidStateTransition(self.name, "There is no active match to resume right now.")
        self.log_handling(caller, args)
        self.host.resume_countdown(caller.callsign)
