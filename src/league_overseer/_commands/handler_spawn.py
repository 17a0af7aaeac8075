# Area: Commands
"""
league_overseer._commands.handler_spawn — Spawn permission grants
==================================================================

/spawn <#slot | callsign | identity> grants another player the
``spawn`` permission. Only callers holding ``ban`` may use it.

Target resolution order:
    1. ``#<slot>`` naming a connected slot
    2. all arguments joined with spaces, as a callsign
    3. the first argument, as a stable identity
"""

import logging
from typing import Optional, Tuple

from .handler_base import BaseCommandHandler
from ..errors import InvalidStateTransition, PermissionDenied
from ..host import ADMINISTRATORS
from ..types import PlayerRecord

logger = logging.getLogger("league_overseer.commands.spawn")

USAGE = "/spawn <player id or callsign>"


class SpawnCommandHandler(BaseCommandHandler):
    name = "spawn"

    def handle(self, caller: PlayerRecord, args: Tuple[str, ...]) -> None:
        if not self.host.has_permission(caller.slot_id, "ban"):
            raise PermissionDenied(self.name, "You do not have permission to use the /spawn command.")
        if not args:
            raise InvalidStateTransition(self.name, USAGE)

        target = self.resolve_target(args)
        if target is None:
            raise InvalidStateTransition(self.name, f"player {args[0]} not found")

        self.host.grant_permission(target.slot_id, "spawn")
        self.host.send_message(
            ADMINISTRATORS, f"{caller.callsign} granted {target.callsign} the ability to spawn."
        )
        logger.info(f"{caller.callsign} granted spawn to {target.callsign} (#{target.slot_id})")

    def resolve_target(self, args: Tuple[str, ...]) -> Optional[PlayerRecord]:
        first = args[0]
        if first.startswith("#"):
            try:
                player = self.host.get_player(int(first[1:]))
            except ValueError:
                player = None
            if player is not None:
                return player

        player = self.host.lookup_by_callsign(" ".join(args))
        if player is not None:
            return player
        return self.host.lookup_by_identity(first)
