# Area: Commands
"""
league_overseer._commands.handler_start — Match start commands
===============================================================

/official [seconds] and /fm [seconds]. The optional argument is the
countdown length; out-of-range values fall back to the default.
"""

from typing import Tuple

from .handler_base import BaseCommandHandler, parse_countdown
from .._match.match_state import MatchStateController
from ..types import PlayerRecord


class OfficialCommandHandler(BaseCommandHandler):
    """Starts an official (reported) match."""

    name = "official"

    def __init__(self, context, controller: MatchStateController):
        super().__init__(context)
        self.controller = controller

    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        self.log_handling(caller, args)
        self.controller.start_official(caller, parse_countdown(args))


class FunMatchCommandHandler(BaseCommandHandler):
    """Starts a fun match, which is never reported."""

    name = "fm"

    def __init__(self, context, controller: MatchStateController):
        super().__init__(context)
        self.controller = controller

    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        self.log_handling(caller, args)
        self.controller.start_fun(caller, parse_countdown(args))
