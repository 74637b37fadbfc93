"""
Caller-side helper for waiting on relay tasks.

Relay packs answer one status query per call. Code that needs to block until
a task settles can use ``wait_for_task``, which polls with exponential
backoff until the relay reports a terminal state.
"""
import asyncio
import logging
import time
from typing import Optional, Protocol

from .exceptions import RelayTimeoutError
from .models import TaskStatus
from .relay._rate_limited_log import rate_limited_log

logger = logging.getLogger(__name__)


class TaskStatusSource(Protocol):
    """Anything that can report a task status (a relay pack, a transport wrapper)"""

    async def get_task_status(self, task_id: str) -> TaskStatus:
        ...


async def wait_for_task(
    source: TaskStatusSource,
    task_id: str,
    interval: float = 1.0,
    timeout: float = 120.0,
    backoff: float = 1.5,
    max_interval: float = 15.0,
    logger_instance: Optional[logging.Logger] = None
) -> TaskStatus:
    """
    Poll a task until it reaches a terminal state.

    Terminal states are FINALIZED (210), REJECTED (400) and REVERTED (500).
    SUCCESS (200) is not terminal, since a confirmed task may still finalize.

    Args:
        source: Object providing ``get_task_status``, usually a relay pack
        task_id: Task to wait for
        interval: Initial delay between polls in seconds
        timeout: Give up after this many seconds
        backoff: Multiplier applied to the delay after each poll
        max_interval: Upper bound for the delay between polls
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        The first terminal status reported by the relay

    Raises:
        RelayTimeoutError: If the task is not terminal within ``timeout``
        RelayError: Propagated unchanged from status queries
    """
    if interval <= 0 or timeout <= 0:
        raise ValueError("interval and timeout must be positive")
    if backoff < 1:
        raise ValueError("backoff must be at least 1")

    log = logger_instance or logger
    deadline = time.monotonic() + timeout
    delay = interval

    while True:
        status = await source.get_task_status(task_id)
        if status.is_terminal:
            log.debug(f"Task {task_id} settled with status {status.status}")
            return status

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise RelayTimeoutError(
                f"Task {task_id} not settled after {timeout}s (last status {status.status})"
            )

        rate_limited_log(
            f"Task {task_id} still in status {status.status}",
            level="debug",
            interval=30,
            logger_instance=log
        )
        await asyncio.sleep(min(delay, remaining))
        delay = min(delay * backoff, max_interval)
