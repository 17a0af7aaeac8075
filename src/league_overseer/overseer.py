"""
league_overseer.overseer — The officiating engine
==================================================

LeagueOverseer wires the officiating components to one host and is the
only object a host integration talks to:

    overseer = LeagueOverseer(config, host)
    overseer.handle_event(TickEvent())
    ...
    overseer.shutdown()

All events are handled on the caller's thread, one at a time.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from ._commands import (
    CancelCommandHandler,
    CommandAuthorizationGate,
    FinishCommandHandler,
    FunMatchCommandHandler,
    OfficialCommandHandler,
    PauseCommandHandler,
    ResumeCommandHandler,
    SpawnCommandHandler,
)
from ._config import OverseerConfig, validate_config
from ._match import (
    MISSING_PARTICIPANTS_NOTICE,
    EventDispatcher,
    FunMatchCompleted,
    JobKind,
    MatchOutcome,
    MatchRecorder,
    MatchStateController,
    OfficialCanceled,
    OfficialCompleted,
    OfficialMissingParticipants,
    OverseerContext,
    PendingJob,
    ReportSubmissionPipeline,
    RollCallValidator,
    TeamIdentityResolver,
)
from ._shared import level_for_debug, setup_logging
from .errors import ReportTransportFailure
from .events import (
    CaptureEvent,
    ChatCommandEvent,
    GameEndEvent,
    GameStartEvent,
    JobCompletedEvent,
    JobErrorEvent,
    JobTimeoutEvent,
    MottoQueryEvent,
    PlayerJoinEvent,
    SlashCommandEvent,
    TickEvent,
)
from .host import ALL_PLAYERS, GameHost
from .types import TeamColor

logger = logging.getLogger("league_overseer")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LeagueOverseer:
    """
    Officiates matches on one game server.

    Args:
        config: OverseerConfig, or a raw dict validated on construction
        host: The game server capabilities
        configure_logging: Install the package log handlers at the
            level implied by config.debug_level

    Raises:
        ConfigurationError: If the config is invalid or the map does not
            field two teams
    """

    def __init__(
        self,
        config: Union[Dict[str, Any], OverseerConfig],
        host: GameHost,
        configure_logging: bool = False,
    ):
        self.config = config if isinstance(config, OverseerConfig) else validate_config(config)
        if configure_logging:
            setup_logging(
                log_file_path=self.config.log_file,
                level=level_for_debug(self.config.debug_level),
            )

        self.host = host
        self.context = OverseerContext.create(self.config, host)

        self.controller = MatchStateController(self.context)
        self.resolver = TeamIdentityResolver(self.context)
        self.roll_call = RollCallValidator(self.context, self.resolver)
        self.reports = ReportSubmissionPipeline(self.context)
        self.recorder = MatchRecorder(self.context)

        self.gate = CommandAuthorizationGate(self.context)
        for handler in (
            OfficialCommandHandler(self.context, self.controller),
            FunMatchCommandHandler(self.context, self.controller),
            CancelCommandHandler(self.context, self.controller),
            FinishCommandHandler(self.context, self.controller),
            PauseCommandHandler(self.context),
            ResumeCommandHandler(self.context),
            SpawnCommandHandler(self.context),
        ):
            self.gate.register(handler)

        self.dispatcher = EventDispatcher()
        self.dispatcher.register(CaptureEvent, self._on_capture)
        self.dispatcher.register(GameStartEvent, self._on_game_start)
        self.dispatcher.register(GameEndEvent, self._on_game_end)
        self.dispatcher.register(PlayerJoinEvent, self._on_player_join)
        self.dispatcher.register(SlashCommandEvent, self.gate.handle_slash)
        self.dispatcher.register(ChatCommandEvent, self.gate.handle_chat)
        self.dispatcher.register(MottoQueryEvent, self._on_motto_query)
        self.dispatcher.register(TickEvent, self._on_tick)
        self.dispatcher.register(JobCompletedEvent, self._on_job_completed)
        self.dispatcher.register(JobTimeoutEvent, self._on_job_timeout)
        self.dispatcher.register(JobErrorEvent, self._on_job_error)

        self._active = True
        self._log_startup()

    @property
    def match(self):
        return self.controller.match

    @property
    def commands(self):
        """Slash commands the host must register for the overseer."""
        return self.gate.commands

    def _log_startup(self) -> None:
        teams = self.context.teams
        logger.info("=" * 60)
        logger.info("  League Overseer — Starting")
        logger.info(f"  League: {self.config.league_url}")
        logger.info(f"  Teams:  {teams.team_one.display_name} vs {teams.team_two.display_name}")
        if self.config.rotation_league:
            logger.info(f"  Map:    {self.context.map_name or '<unknown>'}")
        logger.info("=" * 60)

    def handle_event(self, event: Any) -> Optional[Any]:
        """Deliver one host event; returns the handler's result, if any."""
        if not self._active:
            logger.debug(f"Overseer shut down; dropping {type(event).__name__}")
            return None
        return self.dispatcher.dispatch(event)

    def shutdown(self) -> None:
        if not self._active:
            return
        self._active = False
        if self.recorder.recording:
            self.host.stop_recording()
            self.recorder.recording = False
        self.context.close()
        logger.info("League Overseer stopped.")

    # ── Game events ──────────────────────────────────────────

    def _on_capture(self, event: CaptureEvent) -> bool:
        return self.controller.on_capture(event.team, event.capper_identity)

    def _on_game_start(self, event: GameStartEvent) -> None:
        self.recorder.on_game_start()
        self.controller.on_game_start()

    def _on_game_end(self, event: GameEndEvent) -> MatchOutcome:
        match_time = _utc_now()
        outcome = self.controller.on_game_end(match_time)
        try:
            self._settle(outcome)
        finally:
            self.recorder.on_game_end(outcome.snapshot, match_time)
        return outcome

    def _settle(self, outcome: MatchOutcome) -> None:
        if isinstance(outcome, FunMatchCompleted):
            logger.debug("Fun match has completed.")
        elif isinstance(outcome, OfficialCanceled):
            logger.info(outcome.reason)
            self.host.send_message(ALL_PLAYERS, outcome.reason)
        elif isinstance(outcome, OfficialMissingParticipants):
            logger.warning("No recorded players for this official match.")
            self.host.send_message(ALL_PLAYERS, MISSING_PARTICIPANTS_NOTICE)
        elif isinstance(outcome, OfficialCompleted):
            self.reports.submit(outcome.snapshot)

    def _on_player_join(self, event: PlayerJoinEvent) -> None:
        host = self.host
        if event.team == TeamColor.OBSERVER and (
            host.is_countdown_active() or host.is_countdown_in_progress()
        ):
            kind = "an official" if self.controller.current_official() else "a fun"
            host.send_message(
                event.slot_id,
                f"*** There is currently {kind} match in progress, please be respectful. ***",
            )

        if event.verified:
            self.resolver.request_refresh(event.identity, event.callsign)

    def _on_motto_query(self, event: MottoQueryEvent) -> str:
        return self.resolver.lookup(event.identity)

    def _on_tick(self, event: TickEvent) -> None:
        self.controller.check_players_left()
        official = self.controller.current_official()
        if self.roll_call.is_due(official, self.host.current_time()):
            self.roll_call.run(official)

    # ── Job completions ──────────────────────────────────────

    def _on_job_completed(self, event: JobCompletedEvent) -> None:
        job = self.context.jobs.complete(event.job_id)
        if job is None:
            return
        if job.kind == JobKind.REPORT_MATCH:
            self.reports.on_success(job, event.body)
        else:
            self.resolver.handle_response(job, event.body)

    def _on_job_timeout(self, event: JobTimeoutEvent) -> None:
        job = self.context.jobs.complete(event.job_id)
        if job is None:
            return
        if job.kind == JobKind.REPORT_MATCH:
            self.reports.on_timeout(job, event.error_code)
        else:
            self._log_query_failure(job, ReportTransportFailure(
                job.job_id, job.kind.value, event.error_code, timed_out=True,
            ))

    def _on_job_error(self, event: JobErrorEvent) -> None:
        job = self.context.jobs.complete(event.job_id)
        if job is None:
            return
        if job.kind == JobKind.REPORT_MATCH:
            self.reports.on_error(job, event.error_code, event.error_message)
        else:
            self._log_query_failure(job, ReportTransportFailure(
                job.job_id, job.kind.value, event.error_code, event.error_message,
            ))

    def _log_query_failure(self, job: PendingJob, failure: ReportTransportFailure) -> None:
        logger.warning(f"{failure} (players: {', '.join(job.identities)})", extra=job.log_fields)
