"""
后台任务执行器

Runs blocking calls (the quality check) off the UI thread and hands the
outcome back through a queue that the main loop drains every frame.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from queue import Empty, SimpleQueue
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class JobResult:
    """Outcome of one background job, tagged with the caller's job id."""

    job_id: int
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BackgroundWorker:
    """One daemon thread per job; results come back on ``results``.

    With ``threaded=False`` jobs run inline on the caller's thread, which
    keeps ordering deterministic for tests and headless runs.
    """

    def __init__(self, threaded: bool = True) -> None:
        self.threaded = threaded
        self.results: SimpleQueue[JobResult] = SimpleQueue()

    def submit(self, job_id: int, fn: Callable[..., Any], *args: Any) -> None:
        if not self.threaded:
            self._run(job_id, fn, args)
            return
        t = threading.Thread(target=self._run, args=(job_id, fn, args), name=f"worker-{job_id}", daemon=True)
        t.start()

    def _run(self, job_id: int, fn: Callable[..., Any], args: tuple) -> None:
        try:
            value = fn(*args)
        except Exception as exc:
            logger.debug("job %s raised %r", job_id, exc)
            self.results.put(JobResult(job_id, error=exc))
            return
        self.results.put(JobResult(job_id, value=value))

    def drain(self) -> List[JobResult]:
        """Return every finished job without blocking."""
        out: List[JobResult] = []
        while True:
            try:
                out.append(self.results.get_nowait())
            except Empty:
                break
        return out


__all__ = ["BackgroundWorker", "JobResult"]
