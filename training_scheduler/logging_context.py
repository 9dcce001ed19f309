"""Run ID logging context for tracing a scheduling decision across modules.

Provides a run_id-aware logger that attaches a correlation ID to every
log message, so the conflict lookup, the resolution and the planned
effects of one decision can be read together.

Usage:
    from training_scheduler.logging_context import get_run_logger, new_run_id, set_run_id
    from training_scheduler.scheduling import find_conflicts, resolve_by_priority

    set_run_id(new_run_id())
    conflicts = find_conflicts(request, bookings, request.trainer_id)
    resolution = resolve_by_priority(request, conflicts, priorities)
    # every record logged by the finder and the resolver now carries the
    # same record.run_id, e.g. "RUN-3f9a1c2e"

Modules log through ``get_run_logger(__name__)``; the CLI attaches
RunIdFilter to its handlers so ``%(run_id)s`` can appear in the format.
"""

import logging
import uuid
from contextvars import ContextVar

_run_id: ContextVar[str] = ContextVar("run_id", default="NO_RUN_ID")


def new_run_id() -> str:
    """Generate a short, readable run ID."""
    return f"RUN-{uuid.uuid4().hex[:8]}"


def set_run_id(run_id: str) -> None:
    """Set the correlation ID for the current context."""
    _run_id.set(run_id)


def get_run_id() -> str:
    """Retrieve the current correlation ID."""
    return _run_id.get()


class RunIdFilter(logging.Filter):
    """Injects run_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _run_id.get()  # type: ignore[attr-defined]
        return True


def get_run_logger(name: str) -> logging.Logger:
    """Return a logger with the RunIdFilter attached.

    The filter adds ``run_id`` to each record so formatters can
    include ``%(run_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, RunIdFilter) for f in logger.filters):
        logger.addFilter(RunIdFilter())
    return logger
