# Area: Officiating
"""
league_overseer._match.enums — Officiating enums
=================================================

Match kinds and the tags attached to asynchronous league service jobs.
"""

from enum import Enum


class MatchKind(Enum):
    """
    Kind of the live match.

    INACTIVE -> FUN      (on /fm)
    INACTIVE -> OFFICIAL (on /official)
    FUN      -> INACTIVE (on game end)
    OFFICIAL -> INACTIVE (on game end)
    """
    INACTIVE = "inactive"
    FUN = "fun"
    OFFICIAL = "official"


class JobKind(Enum):
    """
    Purpose of a league service job, fixed when the job is dispatched.

    Completions are routed by this tag, never by the response content.
    """
    REPORT_MATCH = "reportMatch"
    TEAM_NAME_QUERY = "teamNameQuery"
