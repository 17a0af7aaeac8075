# Area: Officiating
"""
league_overseer._match.report_pipeline — Match report submission
=================================================================

Turns the snapshot of a completed official match into a reportMatch
POST, writes the match-data block to the log, and handles whatever the
league service answers. Reports are sent once; failures are logged and
never retried.

Payload field order:
    query, teamOneWins, teamTwoWins, duration, matchTime, server, port,
    [mapPlayed], teamOnePlayers, teamTwoPlayers
"""

import logging
from typing import Optional

from .context import OverseerContext
from .enums import JobKind
from .job_registry import PendingJob
from .snapshot import MatchSnapshot
from .._shared.form_encoding import encode_form, escape, join_identities
from .._shared.logging_config import MATCH_DATA_LOGGER
from .._shared.response_text import looks_like_json, looks_like_markup
from ..errors import ReportFormatError, ReportTransportFailure
from ..host import ALL_PLAYERS

logger = logging.getLogger("league_overseer.report")
match_data = logging.getLogger(MATCH_DATA_LOGGER)

REPORTING_NOTICE = "Reporting match..."


def build_report_payload(
    snapshot: MatchSnapshot,
    server: str,
    port,
    map_name: Optional[str] = None,
) -> str:
    """Build the form body for a reportMatch job; mapPlayed only when map_name is given."""
    fields = [
        ("query", JobKind.REPORT_MATCH.value),
        ("teamOneWins", escape(snapshot.team_one_points)),
        ("teamTwoWins", escape(snapshot.team_two_points)),
        ("duration", escape(snapshot.duration_minutes)),
        ("matchTime", escape(snapshot.match_time_text)),
        ("server", escape(server)),
        ("port", escape(port)),
    ]
    if map_name is not None:
        fields.append(("mapPlayed", escape(map_name)))
    fields.append(("teamOnePlayers", join_identities(p.identity for p in snapshot.players_on(snapshot.team_one))))
    fields.append(("teamTwoPlayers", join_identities(p.identity for p in snapshot.players_on(snapshot.team_two))))
    return encode_form(fields)


class ReportSubmissionPipeline:
    """Submits official match reports and handles their completions."""

    def __init__(self, context: OverseerContext):
        self.context = context

    def submit(self, snapshot: MatchSnapshot) -> str:
        """Log the match data, announce and dispatch the report. Returns the job id."""
        config = self.context.config
        host = self.context.host
        map_name = self.context.map_name if config.rotation_league else None

        payload = build_report_payload(snapshot, host.public_address(), host.public_port(), map_name)
        self.log_match_data(snapshot)

        logger.info("Reporting match data...")
        host.send_message(ALL_PLAYERS, REPORTING_NOTICE)
        job = self.context.jobs.dispatch(JobKind.REPORT_MATCH, payload, snapshot=snapshot)
        return job.job_id

    def log_match_data(self, snapshot: MatchSnapshot) -> None:
        match_data.info("League Over Seer Match Report")
        match_data.info("-----------------------------")
        match_data.info("Match Time      : %s", snapshot.match_time_text)
        match_data.info("Duration        : %d", snapshot.duration_minutes)
        if self.context.config.rotation_league and self.context.map_name:
            match_data.info("Map Played      : %s", self.context.map_name)

        for team, name, points in (
            (snapshot.team_one, snapshot.team_one_name, snapshot.team_one_points),
            (snapshot.team_two, snapshot.team_two_name, snapshot.team_two_points),
        ):
            match_data.info("%s  Score  : %d (%s)", team.padded(), points, name)
            for player in snapshot.players_on(team):
                match_data.info("    %s [%s] (%s)", player.callsign, player.identity, player.ip_address)

        if snapshot.captures:
            match_data.info("Captures        :")
            for capture in snapshot.captures:
                at = "countdown" if capture.match_seconds is None else f"{capture.match_seconds:.0f}s"
                match_data.info("    %s %s %s", at, capture.team.padded(), capture.identity or "-")

        match_data.info("-----------------------------")
        match_data.info("End of Match Report")

    # ── Completions ──────────────────────────────────────────

    def on_success(self, job: PendingJob, body: str) -> None:
        text = body.strip()
        if not text:
            logger.info("Match report %s accepted (empty response)", job.job_id)
            return
        if looks_like_markup(text):
            logger.warning(str(ReportFormatError(job.kind.value, body, "markup response")), extra=job.log_fields)
            return
        if looks_like_json(text):
            logger.info("Match report %s returned structured data: %s", job.job_id, text)
            return

        self.context.host.send_message(ALL_PLAYERS, text)
        logger.info("Match report response: %s", text)

    def on_timeout(self, job: PendingJob, error_code: int = 0) -> ReportTransportFailure:
        failure = ReportTransportFailure(job.job_id, job.kind.value, error_code, timed_out=True)
        logger.error(str(failure), extra=job.log_fields)
        return failure

    def on_error(self, job: PendingJob, error_code: int, message: str = "") -> ReportTransportFailure:
        failure = ReportTransportFailure(job.job_id, job.kind.value, error_code, message)
        logger.error(str(failure), extra=job.log_fields)
        return failure
