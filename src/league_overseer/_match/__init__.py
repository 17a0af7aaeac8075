# Area: Officiating
"""
league_overseer._match — Match officiating
===========================================

Match state, roll call, team labels, report submission, recording and
the host event dispatcher.
"""

from .context import OverseerContext, TeamIdentityCache
from .enums import JobKind, MatchKind
from .event_dispatcher import EventDispatcher
from .job_registry import JobRegistry, PendingJob, generate_job_id
from .match_state import (
    AUTO_CANCEL_REASON,
    INACTIVE,
    FunMatch,
    Inactive,
    MatchStateController,
    OfficialMatch,
)
from .outcomes import (
    MISSING_PARTICIPANTS_NOTICE,
    FunMatchCompleted,
    MatchOutcome,
    OfficialCanceled,
    OfficialCompleted,
    OfficialMissingParticipants,
)
from .recording import MatchRecorder, recording_filename
from .report_pipeline import ReportSubmissionPipeline, build_report_payload
from .roll_call import RollCallResult, RollCallValidator
from .snapshot import CaptureRecord, MatchSnapshot, Participant
from .team_identity import TeamIdentityResolver, build_team_query
from .teams import TeamColorAssignment, detect_team_colors

__all__ = [
    "OverseerContext",
    "TeamIdentityCache",
    "JobKind",
    "MatchKind",
    "EventDispatcher",
    "JobRegistry",
    "PendingJob",
    "generate_job_id",
    "AUTO_CANCEL_REASON",
    "INACTIVE",
    "FunMatch",
    "Inactive",
    "MatchStateController",
    "OfficialMatch",
    "MISSING_PARTICIPANTS_NOTICE",
    "FunMatchCompleted",
    "MatchOutcome",
    "OfficialCanceled",
    "OfficialCompleted",
    "OfficialMissingParticipants",
    "MatchRecorder",
    "recording_filename",
    "ReportSubmissionPipeline",
    "build_report_payload",
    "RollCallResult",
    "RollCallValidator",
    "CaptureRecord",
    "MatchSnapshot",
    "Participant",
    "TeamIdentityResolver",
    "build_team_query",
    "TeamColorAssignment",
    "detect_team_colors",
]
