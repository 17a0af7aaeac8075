# Area: Commands
"""
league_overseer._commands.gate — Command authorization gate
============================================================

Every overseer command passes through the gate. The caller must be a
verified player holding the ``spawn`` permission; after that the
command's handler runs, and any PermissionDenied or
InvalidStateTransition it raises is turned into a message to the
caller. State is never changed by a rejected command.

The gate also answers host built-ins that would bypass officiating
(/gameover, /countdown ...) with a notice naming the overseer command to
use instead.
"""

import logging
import re
from typing import Dict, Optional

from .handler_base import BaseCommandHandler
from .._match.context import OverseerContext
from ..errors import InvalidStateTransition, PermissionDenied
from ..events import ChatCommandEvent, SlashCommandEvent

logger = logging.getLogger("league_overseer.gate")

REQUIRED_PERMISSION = "spawn"

DISABLED_NOTICES = (
    (re.compile(r"^/gameover\b"),
     "** '/gameover' is disabled, please use /finish or /cancel instead **"),
    (re.compile(r"^/countdown\s+pause\b"),
     "** '/countdown pause' is disabled, please use /pause instead **"),
    (re.compile(r"^/countdown\s+resume\b"),
     "** '/countdown resume' is disabled, please use /resume instead **"),
    (re.compile(r"^/countdown\s+\d+"),
     "** '/countdown TIME' is disabled, please use /official or /fm instead **"),
)


def disabled_command_notice(message: str) -> Optional[str]:
    """Notice for a disabled host command, or None if the command is allowed."""
    text = message.strip()
    for pattern, notice in DISABLED_NOTICES:
        if pattern.match(text):
            return notice
    return None


class CommandAuthorizationGate:
    """
    Authorizes callers and routes commands to their handlers.

    Usage:
        gate = CommandAuthorizationGate(context)
        gate.register(CancelCommandHandler(context, controller))
        gate.handle_slash(SlashCommandEvent(slot_id=3, command="cancel"))
    """

    def __init__(self, context: OverseerContext):
        self.context = context
        self._handlers: Dict[str, BaseCommandHandler] = {}

    def register(self, handler: BaseCommandHandler) -> None:
        self._handlers[handler.name] = handler
        logger.debug(f"Registered /{handler.name}")

    @property
    def commands(self):
        return tuple(self._handlers)

    def handle_slash(self, event: SlashCommandEvent) -> bool:
        """
        Run a slash command.

        Returns:
            True if the command is an overseer command (handled or
            rejected), False if it belongs to someone else
        """
        command = event.command.lower().lstrip("/")
        handler = self._handlers.get(command)
        if handler is None:
            return False

        host = self.context.host
        caller = host.get_player(event.slot_id)
        if caller is None:
            logger.warning(f"/{command} from unknown slot {event.slot_id} ignored")
            return True

        if not caller.verified or not host.has_permission(caller.slot_id, REQUIRED_PERMISSION):
            host.send_message(caller.slot_id, f"You do not have permission to run the /{command} command.")
            return True

        try:
            handler.handle(caller, tuple(event.args))
        except (PermissionDenied, InvalidStateTransition) as e:
            logger.debug(f"/{command} from {caller.callsign} rejected: {e.message}")
            for line in e.message.splitlines():
                host.send_message(caller.slot_id, line)
        return True

    def handle_chat(self, event: ChatCommandEvent) -> bool:
        """Answer a disabled host command; True if a notice was sent."""
        notice = disabled_command_notice(event.message)
        if notice is None:
            return False
        self.context.host.send_message(event.slot_id, notice)
        return True
