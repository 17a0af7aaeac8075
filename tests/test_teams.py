# Area: Officiating Tests
"""Tests for designated team colour detection."""

import pytest

from league_overseer._match.teams import TeamColorAssignment, detect_team_colors
from league_overseer.demo_host import DemoHost
from league_overseer.errors import ConfigurationError
from league_overseer.types import TeamColor


class TestDetectTeamColors:
    """Tests for detect_team_colors()."""

    def test_first_two_colours_with_slots(self):
        host = DemoHost(team_limits={TeamColor.BLUE: 4, TeamColor.RED: 4, TeamColor.PURPLE: 4})
        teams = detect_team_colors(host)
        assert teams == TeamColorAssignment(TeamColor.RED, TeamColor.BLUE)

    def test_scan_order_not_limit_order(self):
        host = DemoHost(team_limits={TeamColor.PURPLE: 10, TeamColor.GREEN: 2})
        teams = detect_team_colors(host)
        assert teams.team_one == TeamColor.GREEN
        assert teams.team_two == TeamColor.PURPLE

    def test_rogue_and_observers_are_never_designated(self):
        host = DemoHost(team_limits={TeamColor.ROGUE: 10, TeamColor.OBSERVER: 10, TeamColor.RED: 5, TeamColor.GREEN: 5})
        teams = detect_team_colors(host)
        assert (teams.team_one, teams.team_two) == (TeamColor.RED, TeamColor.GREEN)

    def test_single_colour_refuses_to_start(self):
        host = DemoHost(team_limits={TeamColor.RED: 8})
        with pytest.raises(ConfigurationError):
            detect_team_colors(host)

    def test_no_colours_refuses_to_start(self):
        with pytest.raises(ConfigurationError):
            detect_team_colors(DemoHost(team_limits={}))


class TestTeamColorAssignment:
    """Tests for TeamColorAssignment."""

    def test_is_designated(self):
        teams = TeamColorAssignment(TeamColor.RED, TeamColor.GREEN)
        assert teams.is_designated(TeamColor.RED)
        assert teams.is_designated(TeamColor.GREEN)
        assert not teams.is_designated(TeamColor.BLUE)
        assert not teams.is_designated(TeamColor.OBSERVER)

    def test_is_immutable(self):
        teams = TeamColorAssignment(TeamColor.RED, TeamColor.GREEN)
        with pytest.raises(Exception):
            teams.team_one = TeamColor.BLUE
