# Area: Officiating
"""
league_overseer._match.team_identity — Team label resolution
=============================================================

Asks the league service which team a player belongs to and keeps the
answers in the context's TeamIdentityCache. Refreshes are asynchronous:
the cache only changes when the tagged job's response arrives.

Response formats accepted for a teamNameQuery job:
    {"<identity>": "<team label>", ...}   JSON object, any number of players
    <team label>                          plain text, single-player queries only
"""

import json
import logging
from typing import List

from .context import OverseerContext
from .enums import JobKind
from .job_registry import PendingJob
from .._shared.form_encoding import encode_form, join_identities
from .._shared.response_text import looks_like_markup
from ..errors import ReportFormatError
from ..types import TeamColor

logger = logging.getLogger("league_overseer.team_identity")


def build_team_query(identities: List[str]) -> str:
    return encode_form([
        ("query", JobKind.TEAM_NAME_QUERY.value),
        ("teamPlayers", join_identities(identities)),
    ])


class TeamIdentityResolver:
    """Requests and caches per-player team labels."""

    def __init__(self, context: OverseerContext):
        self.context = context

    def lookup(self, identity: str) -> str:
        return self.context.identities.lookup(identity)

    def request_refresh(self, identity: str, callsign: str = "") -> None:
        if not identity:
            logger.debug("Skipping team query for %s: no stable identity", callsign or "<unknown>")
            return
        logger.debug("Getting motto for %s...", callsign or identity)
        self._dispatch([identity])

    def request_refresh_for_team(self, team: TeamColor) -> None:
        """Query every connected member of a colour in one job."""
        identities = [
            p.identity for p in self.context.host.list_active_players()
            if p.team == team and p.identity
        ]
        if not identities:
            logger.debug("No identified players on %s to refresh", team.display_name)
            return
        logger.info("Refreshing team names for %d %s player(s)", len(identities), team.display_name)
        self._dispatch(identities)

    def _dispatch(self, identities: List[str]) -> None:
        self.context.jobs.dispatch(
            JobKind.TEAM_NAME_QUERY,
            build_team_query(identities),
            identities=tuple(identities),
        )

    def handle_response(self, job: PendingJob, body: str) -> int:
        """
        Apply a completed team name query to the cache.

        Returns the number of cache entries written; malformed responses
        are logged and leave the cache untouched.
        """
        try:
            labels = self._parse(job, body)
        except ReportFormatError as e:
            logger.warning(str(e))
            return 0

        for identity, label in labels.items():
            self.context.identities.store(identity, label)
        return len(labels)

    def _parse(self, job: PendingJob, body: str) -> dict:
        text = body.strip()
        if looks_like_markup(text):
            raise ReportFormatError(job.kind.value, body, "markup response")

        try:
            data = json.loads(text)
        except ValueError:
            data = None

        if isinstance(data, dict):
            labels = {}
            for identity, label in data.items():
                if identity not in job.identities:
                    logger.debug("Ignoring label for unrequested identity %s", identity)
                    continue
                labels[identity] = "" if label is None else str(label)
            return labels

        if len(job.identities) == 1 and not isinstance(data, list):
            return {job.identities[0]: data if isinstance(data, str) else text}

        raise ReportFormatError(job.kind.value, body, "unrecognised shape")
