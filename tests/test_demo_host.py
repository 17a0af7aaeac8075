# Area: Shared Tests
"""Tests for the in-memory game host."""

from unittest.mock import Mock

from league_overseer.demo_host import DemoHost
from league_overseer.events import (
    ChatCommandEvent,
    GameEndEvent,
    GameStartEvent,
    JobCompletedEvent,
    PlayerJoinEvent,
    SlashCommandEvent,
    TickEvent,
)
from league_overseer.host import ADMINISTRATORS, ALL_PLAYERS
from league_overseer.types import TeamColor


def _recording_overseer():
    overseer = Mock()
    overseer.handle_event.return_value = None
    return overseer


def _delivered(overseer):
    return [call.args[0] for call in overseer.handle_event.call_args_list]


class TestPlayers:
    """Tests for the player roster."""

    def test_add_player_queues_join(self):
        host = DemoHost()
        overseer = _recording_overseer()

        alice = host.add_player("alice", TeamColor.RED, identity="101")
        host.pump(overseer)

        assert alice.slot_id == 0
        assert alice.ip_address == "10.0.0.1"
        assert _delivered(overseer) == [
            PlayerJoinEvent(slot_id=0, callsign="alice", identity="101", verified=True, team=TeamColor.RED)
        ]

    def test_lookups(self):
        host = DemoHost()
        host.add_player("alice", TeamColor.RED, identity="101")
        bob = host.add_player("bob", TeamColor.GREEN, identity="201")

        assert host.lookup_by_identity("201") == bob
        assert host.lookup_by_callsign("bob") == bob
        assert host.get_player(bob.slot_id) == bob
        assert host.get_player(42) is None

    def test_team_counts_follow_moves(self):
        host = DemoHost()
        alice = host.add_player("alice", TeamColor.RED)
        assert host.team_count(TeamColor.RED) == 1

        host.set_team(alice.slot_id, TeamColor.GREEN)
        assert host.team_count(TeamColor.RED) == 0
        assert host.team_count(TeamColor.GREEN) == 1

        host.remove_player(alice.slot_id)
        assert host.list_players() == []

    def test_active_players_exclude_observers(self):
        host = DemoHost()
        alice = host.add_player("alice", TeamColor.RED)
        host.add_player("watcher")
        assert host.list_active_players() == [alice]

    def test_permissions(self):
        host = DemoHost()
        alice = host.add_player("alice", permissions=())
        assert not host.has_permission(alice.slot_id, "spawn")
        host.grant_permission(alice.slot_id, "spawn")
        assert host.has_permission(alice.slot_id, "spawn")

    def test_team_limits(self):
        host = DemoHost(team_limits={TeamColor.BLUE: 4})
        assert host.team_player_limit(TeamColor.BLUE) == 4
        assert host.team_player_limit(TeamColor.RED) == 0


class TestTimers:
    """Tests for the countdown and game timer."""

    def test_countdown_then_game(self):
        host = DemoHost(time_limit=60.0)
        host.start_countdown(10, 60.0, "Server")
        assert host.is_countdown_in_progress()

        host.advance(10)
        assert not host.is_countdown_in_progress()
        assert host.is_countdown_active()

        host.advance(60)
        assert not host.is_countdown_active()

        overseer = _recording_overseer()
        host.pump(overseer)
        assert _delivered(overseer) == [GameStartEvent(), GameEndEvent()]

    def test_pause_extends_game(self):
        host = DemoHost(time_limit=60.0)
        host.start_countdown(5, 60.0, "Server")
        host.advance(5)

        host.pause_countdown("alice")
        host.advance(100)
        assert host.is_countdown_active()

        host.resume_countdown("alice")
        host.advance(59)
        assert host.is_countdown_active()
        host.advance(1)
        assert not host.is_countdown_active()
        assert host.broadcasts == ["Countdown paused by alice", "Countdown resumed by alice"]

    def test_end_game_without_game_does_nothing(self):
        host = DemoHost()
        host.end_game()
        overseer = _recording_overseer()
        host.pump(overseer)
        overseer.handle_event.assert_not_called()


class TestMessagesAndJobs:
    """Tests for messages, recordings and job events."""

    def test_message_views(self):
        host = DemoHost()
        host.send_message(ALL_PLAYERS, "hello all")
        host.send_message(ADMINISTRATORS, "hello admins")
        host.send_message(3, "hello three")

        assert host.broadcasts == ["hello all"]
        assert host.admin_messages == ["hello admins"]
        assert host.messages_to(3) == ["hello three"]

    def test_recording(self):
        host = DemoHost()
        assert host.start_recording() is True
        host.save_recording("match.rec")
        host.stop_recording()
        assert host.saved_recordings == ["match.rec"]
        assert host.recording is False

    def test_dispatch_forwards_to_runner(self):
        runner = Mock()
        runner.drain.side_effect = [[JobCompletedEvent(job_id="j1", body="ok")], []]
        host = DemoHost(job_runner=runner)

        host.dispatch_http_job("j1", "https://x.example", "query=a")
        overseer = _recording_overseer()
        host.pump(overseer, wait_seconds=5)

        runner.submit.assert_called_once_with("j1", "https://x.example", "query=a")
        assert runner.drain.call_args_list[0].args == (5,)
        assert _delivered(overseer) == [JobCompletedEvent(job_id="j1", body="ok")]
        assert host.dispatched_jobs == [("j1", "https://x.example", "query=a")]


class TestEventLoop:
    """Tests for type_command() and run()."""

    def test_type_command_queues_chat_and_slash(self):
        host = DemoHost()
        overseer = _recording_overseer()
        host.type_command(2, "/official 30")
        host.pump(overseer)
        assert _delivered(overseer) == [
            ChatCommandEvent(slot_id=2, message="/official 30"),
            SlashCommandEvent(slot_id=2, command="official", args=("30",)),
        ]

    def test_run_ticks(self):
        host = DemoHost()
        overseer = _recording_overseer()
        host.run(overseer, seconds=3)
        assert host.clock == 3.0
        assert _delivered(overseer) == [TickEvent(), TickEvent(), TickEvent()]
