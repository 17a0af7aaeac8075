# Area: Shared
"""
league_overseer.cli — Command-line interface
============================================

Checks an overseer configuration, or plays a scripted match against the
in-memory host to show what the overseer does.

Usage:
    python -m league_overseer --config overseer.ini --check
    python -m league_overseer --config overseer.ini --simulate
    python -m league_overseer --config overseer.ini --simulate --send

Configuration can also come entirely from the environment:
    LEAGUE_OVER_SEER_URL=https://league.example/api python -m league_overseer --check
"""

import argparse
import logging
import sys
from typing import List, Optional

from ._config import OverseerConfig, load_config
from ._match import JobKind
from ._shared import HttpJobRunner, level_for_debug, log_and_terminate, setup_logging
from .demo_host import DemoHost
from .errors import ConfigurationError
from .events import CaptureEvent
from .overseer import LeagueOverseer
from .types import TeamColor

logger = logging.getLogger("league_overseer.cli")

SIMULATED_TIME_LIMIT = 300.0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="League Overseer - match officiating for league game servers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m league_overseer --config overseer.ini --check
  python -m league_overseer --config overseer.json --simulate
  python -m league_overseer --config overseer.ini --simulate --send
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to an INI ([leagueOverSeer] section) or JSON config file",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the configuration and print a summary",
    )

    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Play a scripted 2v2 official match on the in-memory host",
    )

    parser.add_argument(
        "--send",
        action="store_true",
        help="With --simulate, really POST jobs to the league URL",
    )

    return parser.parse_args(argv)


def print_summary(config: OverseerConfig) -> None:
    print("League Overseer configuration")
    print(f"  League URL:      {config.league_url}")
    print(f"  Debug level:     {config.debug_level}")
    print(f"  Rotation league: {'yes' if config.rotation_league else 'no'}")
    if config.rotation_league:
        print(f"  Map change file: {config.mapchange_path or '<not set>'}")
    print(f"  Roll call:       {config.rollcall_delay:.0f}s (+{config.rollcall_retry_delay:.0f}s per retry)")
    print(f"  Countdown:       {config.default_countdown}s ({config.min_countdown}-{config.max_countdown}s)")
    print(f"  Record matches:  {'yes' if config.record_matches else 'no'}")
    print(f"  Log file:        {config.log_file}")


def simulate(config: OverseerConfig, send: bool = False) -> DemoHost:
    """
    Play one scripted official match and return the host it ran on.

    Without send, league responses are answered locally: every player's
    team label comes back as "<colour> Squad" and the report is accepted.
    """
    runner = HttpJobRunner(timeout=config.http_timeout) if send else None
    host = DemoHost(time_limit=SIMULATED_TIME_LIMIT, job_runner=runner)
    overseer = LeagueOverseer(config, host)
    try:
        roster = [
            ("Alpha", TeamColor.RED, "1001"),
            ("Bravo", TeamColor.RED, "1002"),
            ("Charlie", TeamColor.GREEN, "2001"),
            ("Delta", TeamColor.GREEN, "2002"),
        ]
        players = [host.add_player(callsign, team, identity=identity) for callsign, team, identity in roster]
        host.pump(overseer)
        if not send:
            _answer_team_queries(host, overseer)

        host.type_command(players[0].slot_id, "/official 5")
        host.pump(overseer)
        host.run(overseer, seconds=60)
        host.queue(CaptureEvent(team=TeamColor.RED, capper_identity="1001"))
        host.run(overseer, seconds=120)
        host.queue(CaptureEvent(team=TeamColor.GREEN, capper_identity="2002"))
        host.run(overseer, seconds=SIMULATED_TIME_LIMIT)

        if send:
            host.pump(overseer, wait_seconds=config.http_timeout)
        else:
            for job in overseer.context.jobs.pending():
                if job.kind == JobKind.REPORT_MATCH:
                    host.complete_job(job.job_id, "Match reported (simulated).")
            host.pump(overseer)
    finally:
        overseer.shutdown()
        if runner is not None:
            runner.close()
    return host


def _answer_team_queries(host: DemoHost, overseer: LeagueOverseer) -> None:
    for job in overseer.context.jobs.pending():
        if job.kind != JobKind.TEAM_NAME_QUERY:
            continue
        player = host.lookup_by_identity(job.identities[0])
        label = f"{player.team.display_name} Squad" if player else ""
        host.complete_job(job.job_id, label)
    host.pump(overseer)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        log_and_terminate(e)
        return 1

    setup_logging(log_file_path=config.log_file, level=level_for_debug(config.debug_level))

    if args.check:
        print_summary(config)
        return 0

    if args.simulate:
        try:
            host = simulate(config, send=args.send)
        except ConfigurationError as e:
            log_and_terminate(e)
            return 1
        print(f"Simulation finished: {len(host.dispatched_jobs)} job(s) dispatched")
        for text in host.broadcasts:
            print(f"  [all] {text}")
        return 0

    print("Error: nothing to do. Use --check or --simulate;", file=sys.stderr)
    print("embed LeagueOverseer in a host integration to officiate a real server.", file=sys.stderr)
    return 1
