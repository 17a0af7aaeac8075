# Area: Shared
"""
league_overseer._shared.http_jobs — Reference HTTP job transport
=================================================================

Runs the overseer's form POSTs on a small worker pool with requests.
Workers never touch overseer state: each finished POST becomes a job
event that the host collects with drain() from its own event loop and
feeds back through LeagueOverseer.handle_event().
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import List, Optional, Union

import requests

from .form_encoding import FORM_CONTENT_TYPE
from ..events import JobCompletedEvent, JobErrorEvent, JobTimeoutEvent

logger = logging.getLogger("league_overseer.http_jobs")

JobEvent = Union[JobCompletedEvent, JobTimeoutEvent, JobErrorEvent]

# Error code reported when the request never produced an HTTP status
TRANSPORT_ERROR_CODE = 0


class HttpJobRunner:
    """
    Executes queued POSTs and hands back their completions.

    Usage:
        runner = HttpJobRunner(timeout=30)
        runner.submit(job_id, url, post_data)
        ...
        for event in runner.drain():
            overseer.handle_event(event)
    """

    def __init__(self, timeout: float = 30.0, max_workers: int = 2):
        self.timeout = timeout
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="overseer-http")
        self._pending: List[Future] = []

    def submit(self, job_id: str, url: str, post_data: str) -> None:
        logger.debug("Submitting job %s to %s", job_id, url)
        self._pending.append(self._pool.submit(self._post, job_id, url, post_data))

    def _post(self, job_id: str, url: str, post_data: str) -> JobEvent:
        try:
            response = requests.post(
                url,
                data=post_data.encode("utf-8"),
                headers={"Content-Type": FORM_CONTENT_TYPE},
                timeout=self.timeout,
            )
        except requests.Timeout:
            return JobTimeoutEvent(job_id=job_id)
        except requests.RequestException as exc:
            return JobErrorEvent(job_id=job_id, error_code=TRANSPORT_ERROR_CODE, error_message=str(exc))

        if response.status_code >= 400:
            return JobErrorEvent(
                job_id=job_id,
                error_code=response.status_code,
                error_message=response.reason or "",
            )
        return JobCompletedEvent(job_id=job_id, body=response.text)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def drain(self, wait_seconds: Optional[float] = None) -> List[JobEvent]:
        """
        Return events for every finished job, oldest first.

        With wait_seconds, block up to that long for outstanding jobs.
        """
        if wait_seconds is not None and self._pending:
            wait(self._pending, timeout=wait_seconds)

        finished: List[Future] = []
        still_running: List[Future] = []
        for future in self._pending:
            (finished if future.done() else still_running).append(future)
        self._pending = still_running
        return [f.result() for f in finished]

    def close(self) -> None:
        self._pool.shutdown(wait=False, cancel_futures=True)
        self._pending.clear()
