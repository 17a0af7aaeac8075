# Area: Commands
"""
league_overseer._commands.handler_end — Match end commands
===========================================================

/cancel ends the current match without reporting it.
/finish ends an official match early and reports it, once at least
half of the planned time has been played.
"""

from typing import Tuple

from .handler_base import BaseCommandHandler
from .._match.match_state import MatchStateController
from ..types import PlayerRecord


class CancelCommandHandler(BaseCommandHandler):
    name = "cancel"

    def __init__(self, context, controller: MatchStateController):
        super().__init__(context)
        self.controller = controller

    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        self.log_handling(caller, args)
        self.controller.cancel(caller)


class FinishCommandHandler(BaseCommandHandler):
    name = "finish"

    def __init__(self, context, controller: MatchStateController):
        super().__init__(context)
        self.controller = controller

    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        self.log_handling(caller, args)
        self.controller.finish_early(caller)
