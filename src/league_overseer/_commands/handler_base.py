# Area: Commands
"""
league_overseer._commands.handler_base — Base Command Handler
=============================================================

Abstract base class for the overseer's slash commands. The gate has
already checked that the caller is verified and may spawn before a
handler runs; handlers enforce their own command-specific rules by
raising PermissionDenied or InvalidStateTransition.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .._match.context import OverseerContext
from ..types import PlayerRecord

logger = logging.getLogger("league_overseer.commands")


class BaseCommandHandler(ABC):
    """
    Abstract base class for slash command handlers.

    Subclasses set ``name`` (the command without its slash) and
    implement handle().
    """

    name: str = ""

    def __init__(self, context: OverseerContext):
        self.context = context

    @property
    def host(self):
        return self.context.host

    @abstractmethod
    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        """
        Run the command for a caller.

        Raises:
            PermissionDenied: If the caller may not run it
            InvalidStateTransition: If the match is in the wrong phase
        """

    def reply(self, caller: PlayerRecord, text: str) -> None:
        self.host.send_message(caller.slot_id, text)

    def log_handling(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        if args:
            logger.info(f"/{self.name} {' '.join(args)} from {caller.callsign}")
        else:
            logger.info(f"/{self.name} from {caller.callsign}")


def parse_countdown(args: Tuple[str, ...]) -> Optional[int]:
    """Seconds requested by a lone numeric argument, else None."""
    if len(args) != 1:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None
