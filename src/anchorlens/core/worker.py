"""Single-shot message boundary that runs classifications off the caller's thread.

A request message goes in, exactly one response message comes out:

- ``{"success": True, "results": {...}}`` when the run completes.
- ``{"success": False, "error": "..."}`` for input, CSV or unexpected errors.

Runs execute on a one-worker ``concurrent.futures`` executor. The process
executor shares no memory with the caller. The thread executor shares the
interpreter, but each run builds its own rule engine and, unless
``CacheConfig.shared`` is set, its own similarity cache. Runs cannot be
cancelled once submitted.
"""

from __future__ import annotations

import logging
from concurrent.futures import BrokenExecutor, Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Optional

from anchorlens.core.config import RunConfig, WorkerConfig
from anchorlens.core.errors import AnchorLensError, ExecutionUnavailableError
from anchorlens.core.models import ClassificationInput, RowOutcome
from anchorlens.core.pipeline import count_anchors
from anchorlens.utils.logging import structured_log

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred during processing"


def handle_message(message: Mapping[str, Any], run_config: Optional[RunConfig] = None) -> Dict[str, Any]:
    """Answer one request message with one response message.

    With ``includeRows`` set, the response also carries the category of every
    counted row under ``rows``.
    """

    outcomes: Optional[List[RowOutcome]] = None
    try:
        run_input = ClassificationInput.from_message(message)
        if message.get("includeRows"):
            outcomes = []
        result = count_anchors(run_input, run_config=run_config, outcomes=outcomes)
    except AnchorLensError as exc:
        logger.error("Classification failed: %s", exc)
        return {"success": False, "error": str(exc) or GENERIC_ERROR}
    except Exception:
        logger.exception("Unexpected error while classifying anchors")
        return {"success": False, "error": GENERIC_ERROR}

    response: Dict[str, Any] = {"success": True, "results": result.to_payload()}
    if outcomes is not None:
        response["rows"] = [outcome.to_payload() for outcome in outcomes]
    return response


class ClassificationWorker:
    """Owns the executor that classification requests are dispatched to."""

    def __init__(self, config: Optional[WorkerConfig] = None, run_config: Optional[RunConfig] = None) -> None:
        self._config = config or (run_config.worker if run_config else WorkerConfig())
        self._run_config = run_config
        self._executor: Optional[Executor] = None

    def __enter__(self) -> "ClassificationWorker":
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _create_executor(self) -> Executor:
        if self._config.executor == "thread":
            return ThreadPoolExecutor(max_workers=1, thread_name_prefix="anchorlens")
        return ProcessPoolExecutor(max_workers=1)

    def start(self) -> Executor:
        """Create the executor; raises :class:`ExecutionUnavailableError` on failure."""

        if self._executor is not None:
            return self._executor
        try:
            self._executor = self._create_executor()
        except (OSError, ValueError, NotImplementedError, ImportError) as exc:
            raise ExecutionUnavailableError(f"Could not start {self._config.executor} worker: {exc}") from exc
        logger.debug("Started %s worker", self._config.executor)
        return self._executor

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def submit(self, message: Mapping[str, Any]) -> "Future[Dict[str, Any]]":
        """Dispatch ``message`` and return a future for the response message."""

        executor = self.start()
        structured_log(logging.DEBUG, event="worker_dispatch", executor=self._config.executor)
        try:
            return executor.submit(handle_message, message, self._run_config)
        except RuntimeError as exc:
            raise ExecutionUnavailableError(f"Worker is not accepting requests: {exc}") from exc

    def request(self, message: Mapping[str, Any]) -> Dict[str, Any]:
        """Dispatch ``message`` and wait for its response."""

        future = self.submit(message)
        try:
            return future.result()
        except BrokenExecutor as exc:
            self._executor = None
            raise ExecutionUnavailableError(f"Worker stopped before answering: {exc}") from exc


def classify_message(message: Mapping[str, Any], run_config: Optional[RunConfig] = None) -> Dict[str, Any]:
    """Run one request through a short-lived worker."""

    with ClassificationWorker(run_config=run_config) as worker:
        return worker.request(message)
