# Area: Officiating
"""
league_overseer._match.job_registry — Tagged league service jobs
=================================================================

Every POST to the league service is registered with its kind and the
data it was built from before the host dispatches it. A completion is
matched back to its job by id; the job's kind decides who handles it.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .enums import JobKind
from .snapshot import MatchSnapshot
from ..host import GameHost

logger = logging.getLogger("league_overseer.jobs")


def generate_job_id(kind: JobKind) -> str:
    """Generate a unique job ID. Format: kind-XXXXXXXXXXXX"""
    return f"{kind.value}-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class PendingJob:
    """
    A dispatched job awaiting completion.

    Attributes:
        job_id: Correlation id passed to the host
        kind: What the job is for
        post_data: Form body that was sent
        identities: Players a team name query asked about
        snapshot: Match a report job describes
        dispatched_at: Host time at dispatch
    """

    job_id: str
    kind: JobKind
    post_data: str
    identities: Tuple[str, ...] = ()
    snapshot: Optional[MatchSnapshot] = None
    dispatched_at: float = 0.0

    @property
    def log_fields(self) -> Dict[str, str]:
        """Attributes for the JSON log, passed as ``extra``."""
        return {"job_id": self.job_id, "job_kind": self.kind.value}


class JobRegistry:
    """Registers outgoing jobs and resolves completions back to them."""

    def __init__(self, host: GameHost, url: str):
        self.host = host
        self.url = url
        self._pending: Dict[str, PendingJob] = {}

    def dispatch(
        self,
        kind: JobKind,
        post_data: str,
        identities: Tuple[str, ...] = (),
        snapshot: Optional[MatchSnapshot] = None,
    ) -> PendingJob:
        job = PendingJob(
            job_id=generate_job_id(kind),
            kind=kind,
            post_data=post_data,
            identities=tuple(identities),
            snapshot=snapshot,
            dispatched_at=self.host.current_time(),
        )
        self._pending[job.job_id] = job
        logger.debug("Dispatching %s job %s", kind.value, job.job_id, extra=job.log_fields)
        self.host.dispatch_http_job(job.job_id, self.url, post_data)
        return job

    def complete(self, job_id: str) -> Optional[PendingJob]:
        """Remove and return the job for a completion; None if unknown."""
        job = self._pending.pop(job_id, None)
        if job is None:
            logger.warning("Completion for unknown job %s ignored", job_id)
        return job

    def pending(self) -> List[PendingJob]:
        return list(self._pending.values())

    def clear(self) -> None:
        if self._pending:
            logger.info("Dropping %d pending job(s)", len(self._pending))
        self._pending.clear()
