# Area: Officiating Tests
"""Tests for the roll-call validator."""

from unittest.mock import patch

from league_overseer._config import validate_config
from league_overseer._match.context import OverseerContext
from league_overseer._match.enums import JobKind
from league_overseer._match.match_state import MatchStateController
from league_overseer._match.roll_call import RollCallValidator
from league_overseer._match.team_identity import TeamIdentityResolver
from league_overseer.demo_host import DemoHost
from league_overseer.types import TeamColor

URL = "https://league.example/api"


class _Fixture:
    """A started official match with a 2v2 roster: red0/red1 vs green0/green1."""

    def __init__(self, time_limit=1800.0, labels=None, **config):
        self.host = DemoHost(time_limit=time_limit)
        self.context = OverseerContext.create(validate_config({"league_url": URL, **config}), self.host)
        self.controller = MatchStateController(self.context)
        self.resolver = TeamIdentityResolver(self.context)
        self.validator = RollCallValidator(self.context, self.resolver)

        self.players = [
            self.host.add_player("red0", TeamColor.RED, identity="100"),
            self.host.add_player("red1", TeamColor.RED, identity="101"),
            self.host.add_player("green0", TeamColor.GREEN, identity="200"),
            self.host.add_player("green1", TeamColor.GREEN, identity="201"),
        ]
        for identity, label in (labels or {}).items():
            self.context.identities.store(identity, label)

        self.controller.start_official(self.players[0])
        self.host.advance(10)
        self.controller.on_game_start()

    @property
    def match(self):
        return self.controller.match

    def team_jobs(self):
        return [j for j in self.context.jobs.pending() if j.kind == JobKind.TEAM_NAME_QUERY]


CONSISTENT = {"100": "Raptors", "101": "Raptors", "200": "Vipers", "201": "Vipers"}


class TestIsDue:
    """Tests for RollCallValidator.is_due()."""

    def test_not_due_before_delay(self):
        f = _Fixture()
        assert not f.validator.is_due(f.match, f.match.start_time + 89)

    def test_due_at_delay(self):
        f = _Fixture()
        assert f.validator.is_due(f.match, f.match.start_time + 90)

    def test_not_due_before_game_start(self):
        f = _Fixture()
        f.match.start_time = None
        assert not f.validator.is_due(f.match, 10_000)

    def test_not_due_once_recorded(self):
        f = _Fixture(labels=CONSISTENT)
        f.validator.run(f.match)
        assert not f.validator.is_due(f.match, 10_000)

    def test_not_due_without_official_match(self):
        f = _Fixture()
        assert not f.validator.is_due(None, 10_000)

    def test_uses_configured_delay(self):
        f = _Fixture(rollcall_delay=120)
        assert not f.validator.is_due(f.match, f.match.start_time + 119)
        assert f.validator.is_due(f.match, f.match.start_time + 120)


class TestRollCallCommit:
    """Tests for committing a roll call."""

    def test_consistent_roll_call_commits(self):
        f = _Fixture(labels=CONSISTENT)

        result = f.validator.run(f.match)

        assert result.valid
        assert f.match.participants_recorded is True
        assert [p.callsign for p in f.match.participants] == ["red0", "red1", "green0", "green1"]
        assert f.match.team_one_name == "Raptors"
        assert f.match.team_two_name == "Vipers"
        assert f.team_jobs() == []

    def test_participant_fields(self):
        f = _Fixture(labels=CONSISTENT)
        f.validator.run(f.match)
        first = f.match.participants[0]
        assert first.identity == "100"
        assert first.callsign == "red0"
        assert first.ip_address == f.players[0].ip_address
        assert first.team_name == "Raptors"
        assert first.team == TeamColor.RED

    def test_observers_excluded(self):
        f = _Fixture(labels=CONSISTENT)
        f.host.add_player("watcher", identity="900")
        f.validator.run(f.match)
        assert "watcher" not in [p.callsign for p in f.match.participants]

    def test_samples_active_players_from_host(self):
        f = _Fixture(labels=CONSISTENT)
        with patch.object(f.host, "list_active_players", wraps=f.host.list_active_players) as mock_active:
            result = f.validator.sample()
        mock_active.assert_called_once_with()
        assert len(result.participants) == 4

    def test_unlabelled_players_keep_default_names(self):
        f = _Fixture()
        result = f.validator.run(f.match)
        assert result.valid
        assert f.match.team_one_name == "Team-A"
        assert f.match.team_two_name == "Team-B"
        assert len(f.match.participants) == 4

    def test_empty_label_is_not_inconsistent(self):
        f = _Fixture(labels={"100": "Raptors", "200": "Vipers"})
        result = f.validator.run(f.match)
        assert result.valid
        assert f.match.team_one_name == "Raptors"


class TestRollCallRetry:
    """Tests for invalid samples and retries."""

    def test_first_seen_label_wins(self):
        f = _Fixture(labels={"100": "Raptors", "101": "Vipers", "200": "Cobras", "201": "Cobras"})
        result = f.validator.sample()
        assert result.team_one_label == "Raptors"
        assert result.inconsistent_teams == {TeamColor.RED}

    def test_inconsistent_team_is_retried(self):
        f = _Fixture(labels={"100": "Raptors", "101": "Vipers", "200": "Cobras", "201": "Cobras"})

        result = f.validator.run(f.match)

        assert not result.valid
        assert f.match.participants == []
        assert f.match.participants_recorded is False
        assert f.match.rollcall_delay == 150
        [job] = f.team_jobs()
        assert job.identities == ("100", "101")

    def test_both_teams_refreshed(self):
        f = _Fixture(labels={"100": "A", "101": "B", "200": "C", "201": "D"})
        f.validator.run(f.match)
        assert sorted(job.identities for job in f.team_jobs()) == [("100", "101"), ("200", "201")]

    def test_missing_identity_is_retried(self):
        f = _Fixture(labels=CONSISTENT)
        f.host.add_player("guest", TeamColor.RED, verified=False)

        result = f.validator.run(f.match)

        assert result.missing_identity
        assert f.match.participants == []
        assert f.match.rollcall_delay == 150
        assert f.team_jobs() == []

    def test_retry_reschedules_next_attempt(self):
        f = _Fixture(labels={"100": "Raptors", "101": "Vipers"})
        f.validator.run(f.match)
        start = f.match.start_time
        assert not f.validator.is_due(f.match, start + 149)
        assert f.validator.is_due(f.match, start + 150)

    def test_retry_then_commit_after_refresh(self):
        f = _Fixture(labels={"100": "Raptors", "101": "Vipers", "200": "Cobras", "201": "Cobras"})
        f.validator.run(f.match)
        [job] = f.team_jobs()
        f.context.jobs.complete(job.job_id)
        f.resolver.handle_response(job, '{"100": "Raptors", "101": "Raptors"}')

        result = f.validator.run(f.match)

        assert result.valid
        assert f.match.team_one_name == "Raptors"
        assert f.match.team_two_name == "Cobras"

    def test_exhausted_retries_commit_inconsistent(self):
        """delay 90 + 30 < 180 retries once; 150 + 30 < 180 does not."""
        f = _Fixture(time_limit=180.0, labels={"100": "Raptors", "101": "Vipers"})

        f.validator.run(f.match)
        assert f.match.participants == []
        assert f.match.rollcall_delay == 150

        result = f.validator.run(f.match)

        assert not result.valid
        assert f.match.participants_recorded is True
        assert len(f.match.participants) == 4
        assert f.match.team_one_name == "Raptors"

    def test_delay_is_per_match(self):
        f = _Fixture(labels={"100": "Raptors", "101": "Vipers"})
        f.validator.run(f.match)
        assert f.match.rollcall_delay == 150
        assert f.context.config.rollcall_delay == 90
