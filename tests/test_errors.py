# Area: Shared Tests
"""Tests for the overseer exception hierarchy."""

from league_overseer.errors import (
    ConfigurationError,
    InvalidStateTransition,
    LeagueOverseerError,
    PermissionDenied,
    ReportFormatError,
    ReportTransportFailure,
)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_is_overseer_error(self):
        assert issubclass(ConfigurationError, LeagueOverseerError)

    def test_message_lists_problems(self):
        error = ConfigurationError(["league_url: missing", "debug_level: too big"], source="a.ini")
        assert "a.ini" in str(error)
        assert "league_url: missing" in str(error)
        assert "debug_level: too big" in str(error)

    def test_format_error_log(self):
        error = ConfigurationError(["league_url: missing"], source="a.ini")
        block = error.format_error_log()
        assert "SERVER STARTUP HALTED" in block
        assert "CONFIGURATION_ERROR" in block
        assert "• league_url: missing" in block
        assert '"source": "a.ini"' in block

    def test_format_error_log_without_source(self):
        block = ConfigurationError(["x"]).format_error_log()
        assert "<inline>" in block


class TestCommandErrors:
    """Tests for PermissionDenied and InvalidStateTransition."""

    def test_permission_denied_carries_message(self):
        error = PermissionDenied("cancel", "Observers are not allowed to cancel matches.")
        assert error.command == "cancel"
        assert str(error) == "Observers are not allowed to cancel matches."

    def test_invalid_state_transition_carries_message(self):
        error = InvalidStateTransition("finish", "There is no match in progress to end.")
        assert error.command == "finish"
        assert error.message == "There is no match in progress to end."


class TestReportErrors:
    """Tests for ReportFormatError and ReportTransportFailure."""

    def test_format_error_truncates_body(self):
        error = ReportFormatError("reportMatch", "x" * 500, "markup response")
        assert "markup response" in str(error)
        assert len(str(error)) < 300

    def test_timeout_message(self):
        error = ReportTransportFailure("reportMatch-1", "reportMatch", 0, timed_out=True)
        assert "timed out" in str(error)
        assert error.timed_out is True

    def test_error_message_includes_code(self):
        error = ReportTransportFailure("reportMatch-1", "reportMatch", 503, "Service Unavailable")
        assert "503" in str(error)
        assert "Service Unavailable" in str(error)
        assert error.timed_out is False
