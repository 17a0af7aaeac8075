# Area: Officiating Tests
"""Tests for match report payloads and submission."""

from datetime import datetime, timezone
from unittest.mock import patch

from league_overseer._config import validate_config
from league_overseer._match.context import OverseerContext
from league_overseer._match.enums import JobKind, MatchKind
from league_overseer._match.report_pipeline import (
    REPORTING_NOTICE,
    ReportSubmissionPipeline,
    build_report_payload,
)
from league_overseer._match.snapshot import CaptureRecord, MatchSnapshot, Participant
from league_overseer.demo_host import DemoHost
from league_overseer.errors import ReportTransportFailure
from league_overseer.types import TeamColor

URL = "https://league.example/api"
MATCH_TIME = datetime(2026, 3, 1, 20, 15, 0, tzinfo=timezone.utc)


def _make_snapshot(**overrides):
    fields = dict(
        kind=MatchKind.OFFICIAL,
        team_one=TeamColor.RED,
        team_two=TeamColor.GREEN,
        team_one_name="Raptors",
        team_two_name="Vipers",
        team_one_points=3,
        team_two_points=2,
        planned_duration=1800.0,
        start_time=10.0,
        match_time=MATCH_TIME,
        participants=(
            Participant("100", "red0", "10.0.0.1", "Raptors", TeamColor.RED),
            Participant("101", "red1", "10.0.0.2", "Raptors", TeamColor.RED),
            Participant("200", "green0", "10.0.0.3", "Vipers", TeamColor.GREEN),
            Participant("201", "green1", "10.0.0.4", "Vipers", TeamColor.GREEN),
        ),
        captures=(
            CaptureRecord(TeamColor.RED, "100", 120.0),
            CaptureRecord(TeamColor.GREEN, "201", 400.0),
        ),
    )
    fields.update(overrides)
    return MatchSnapshot(**fields)


def _make_pipeline(**config):
    host = DemoHost(address="league.example.net", port=5154)
    context = OverseerContext.create(validate_config({"league_url": URL, **config}), host)
    return ReportSubmissionPipeline(context), context, host


class TestBuildReportPayload:
    """Tests for build_report_payload()."""

    def test_three_two_match(self):
        payload = build_report_payload(_make_snapshot(), "league.example.net", 5154)
        assert payload == (
            "query=reportMatch&teamOneWins=3&teamTwoWins=2&duration=30"
            "&matchTime=2026-03-01%2020%3A15%3A00&server=league.example.net&port=5154"
            "&teamOnePlayers=100,101&teamTwoPlayers=200,201"
        )

    def test_map_played_before_players(self):
        payload = build_report_payload(_make_snapshot(), "league.example.net", 5154, map_name="hix")
        assert "&port=5154&mapPlayed=hix&teamOnePlayers=100,101" in payload

    def test_duration_is_whole_minutes(self):
        payload = build_report_payload(_make_snapshot(planned_duration=899.0), "s", 1)
        assert "&duration=14&" in payload

    def test_identities_escaped_and_empty_skipped(self):
        snapshot = _make_snapshot(participants=(
            Participant("a,b", "x", "", "", TeamColor.RED),
            Participant("", "guest", "", "", TeamColor.RED),
            Participant("c d", "y", "", "", TeamColor.RED),
        ))
        payload = build_report_payload(snapshot, "s", 1)
        assert payload.endswith("&teamOnePlayers=a%2Cb,c%20d&teamTwoPlayers=")

    def test_non_designated_players_not_listed(self):
        snapshot = _make_snapshot(participants=(
            Participant("100", "red0", "", "", TeamColor.RED),
            Participant("300", "rogue", "", "", TeamColor.ROGUE),
        ))
        payload = build_report_payload(snapshot, "s", 1)
        assert "300" not in payload


class TestSubmit:
    """Tests for ReportSubmissionPipeline.submit()."""

    def test_dispatches_tagged_report_job(self):
        pipeline, context, host = _make_pipeline()
        snapshot = _make_snapshot()

        job_id = pipeline.submit(snapshot)

        [job] = context.jobs.pending()
        assert job.job_id == job_id
        assert job.kind == JobKind.REPORT_MATCH
        assert job.snapshot is snapshot
        assert host.dispatched_jobs == [(job_id, URL, build_report_payload(snapshot, "league.example.net", 5154))]

    def test_announces_reporting(self):
        pipeline, _, host = _make_pipeline()
        pipeline.submit(_make_snapshot())
        assert host.broadcasts == [REPORTING_NOTICE]
        assert REPORTING_NOTICE == "Reporting match..."

    def test_rotation_league_adds_map(self, tmp_path):
        mapchange = tmp_path / "mapchange.out"
        mapchange.write_text("hix.conf\n", encoding="utf-8")
        pipeline, _, host = _make_pipeline(rotation_league=True, mapchange_path=str(mapchange))

        pipeline.submit(_make_snapshot())

        assert "&mapPlayed=hix&" in host.dispatched_jobs[0][2]

    def test_no_map_outside_rotation_league(self):
        pipeline, _, host = _make_pipeline()
        pipeline.submit(_make_snapshot())
        assert "mapPlayed" not in host.dispatched_jobs[0][2]

    def test_writes_match_data_block(self):
        pipeline, _, _ = _make_pipeline()
        with patch("league_overseer._match.report_pipeline.match_data") as mock_log:
            pipeline.submit(_make_snapshot())

        lines = [call.args[0] % call.args[1:] for call in mock_log.info.call_args_list]
        assert lines[0] == "League Over Seer Match Report"
        assert "Match Time      : 2026-03-01 20:15:00" in lines
        assert "Duration        : 30" in lines
        assert "Red      Score  : 3 (Raptors)" in lines
        assert "Green    Score  : 2 (Vipers)" in lines
        assert any("red1 [101]" in line for line in lines)
        assert any("400s" in line for line in lines)
        assert lines[-1] == "End of Match Report"


class TestCompletion:
    """Tests for report job completions."""

    def _submitted(self):
        pipeline, context, host = _make_pipeline()
        pipeline.submit(_make_snapshot())
        job = context.jobs.complete(context.jobs.pending()[0].job_id)
        host.messages.clear()
        return pipeline, job, host

    def test_text_response_is_broadcast(self):
        pipeline, job, host = self._submitted()
        pipeline.on_success(job, "Match entered: Raptors 3 - Vipers 2\n")
        assert host.broadcasts == ["Match entered: Raptors 3 - Vipers 2"]

    def test_json_response_is_not_broadcast(self):
        pipeline, job, host = self._submitted()
        with patch("league_overseer._match.report_pipeline.logger") as mock_logger:
            pipeline.on_success(job, '{"status": "ok", "matchId": 42}')
        assert host.broadcasts == []
        mock_logger.info.assert_called()

    def test_markup_response_is_logged(self):
        pipeline, job, host = self._submitted()
        with patch("league_overseer._match.report_pipeline.logger") as mock_logger:
            pipeline.on_success(job, "<html><body>500</body></html>")
        assert host.broadcasts == []
        mock_logger.warning.assert_called_once()

    def test_empty_response(self):
        pipeline, job, host = self._submitted()
        pipeline.on_success(job, "  ")
        assert host.broadcasts == []

    def test_timeout_logged_without_retry(self):
        pipeline, job, host = self._submitted()
        with patch("league_overseer._match.report_pipeline.logger") as mock_logger:
            failure = pipeline.on_timeout(job)
        assert isinstance(failure, ReportTransportFailure)
        assert failure.timed_out
        mock_logger.error.assert_called_once()
        assert host.dispatched_jobs and len(host.dispatched_jobs) == 1

    def test_error_logged_with_code(self):
        pipeline, job, host = self._submitted()
        with patch("league_overseer._match.report_pipeline.logger") as mock_logger:
            failure = pipeline.on_error(job, 503, "Service Unavailable")
        assert failure.error_code == 503
        assert "Service Unavailable" in mock_logger.error.call_args.args[0]
        assert len(host.dispatched_jobs) == 1

    def test_php_error_fragment_is_not_broadcast(self):
        pipeline, job, host = self._submitted()
        body = "<br />\n<b>Fatal error</b>: Call to undefined function in <b>/var/www/api.php</b>"
        with patch("league_overseer._match.report_pipeline.logger") as mock_logger:
            pipeline.on_success(job, body)
        assert host.broadcasts == []
        mock_logger.warning.assert_called_once()

    def test_timeout_keeps_error_code(self):
        pipeline, job, _ = self._submitted()
        with patch("league_overseer._match.report_pipeline.logger"):
            failure = pipeline.on_timeout(job, error_code=28)
        assert failure.error_code == 28
        assert failure.timed_out

    def test_failures_log_job_fields(self):
        pipeline, job, _ = self._submitted()
        with patch("league_overseer._match.report_pipeline.logger") as mock_logger:
            pipeline.on_error(job, 500, "Internal Server Error")
        assert mock_logger.error.call_args.kwargs["extra"] == {
            "job_id": job.job_id,
            "job_kind": "reportMatch",
        }
