# Area: Officiating
"""
league_overseer._match.outcomes — Match outcomes
=================================================

What the match state controller returns at game end. Exactly one
outcome is produced per game-end event.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .snapshot import MatchSnapshot

MISSING_PARTICIPANTS_NOTICE = (
    "Official match could not be reported due to not having a list of valid match participants."
)


@dataclass(frozen=True)
class FunMatchCompleted:
    """A fun match (or a game started outside the overseer) ended."""
    snapshot: Optional[MatchSnapshot] = None


@dataclass(frozen=True)
class OfficialCanceled:
    """An official match ended after being canceled; nothing is reported."""
    reason: str
    snapshot: MatchSnapshot


@dataclass(frozen=True)
class OfficialMissingParticipants:
    """An official match ended before roll call recorded anyone."""
    snapshot: MatchSnapshot


@dataclass(frozen=True)
class OfficialCompleted:
    """An official match ended normally and must be reported."""
    snapshot: MatchSnapshot


MatchOutcome = Union[
    FunMatchCompleted,
    OfficialCanceled,
    OfficialMissingParticipants,
    OfficialCompleted,
]
