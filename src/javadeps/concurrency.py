"""All-or-nothing joins and an optional in-flight ceiling for asyncio work."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _consume_result(task: asyncio.Task) -> None:
    # Retrieve the exception of an abandoned sibling so asyncio does not log
    # "Task exception was never retrieved".
    if not task.cancelled():
        exc = task.exception()
        if exc is not None:
            logger.debug("Discarding sibling failure: %s", exc)


async def gather_all(
    aws: Iterable[Awaitable[T]],
    *,
    cancel_on_failure: bool = True,
) -> list[T]:
    """Run *aws* concurrently and return their results in input order.

    Completes only when every awaitable has succeeded.  As soon as one
    fails its exception is raised unchanged; when several have failed by
    then, the earliest in input order wins.  Outstanding siblings are
    cancelled when *cancel_on_failure* is true, otherwise they are left to
    finish and their outcome is discarded.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        raise

    failure: BaseException | None = None
    for task in tasks:
        if task in done and not task.cancelled():
            exc = task.exception()
            if exc is not None and failure is None:
                failure = exc
        elif task in done:
            # A child was cancelled from outside; treat it as a failure.
            if failure is None:
                failure = asyncio.CancelledError()

    if failure is None:
        return [task.result() for task in tasks]

    for task in pending:
        if cancel_on_failure:
            task.cancel()
        task.add_done_callback(_consume_result)
    if cancel_on_failure and pending:
        logger.debug("Cancelled %d outstanding task(s) after failure", len(pending))
    raise failure


async def collect(
    aws: Iterable[Awaitable[T]],
    *,
    cancel_on_failure: bool = True,
) -> frozenset[T]:
    """Like :func:`gather_all`, but collect results into an unordered set."""
    return frozenset(await gather_all(aws, cancel_on_failure=cancel_on_failure))


class ConcurrencyLimiter:
    """Bound the number of simultaneous leaf operations.

    With ``limit=None`` the limiter is a no-op and fan-out is unbounded.
    Only wrap leaf work (a read, a listing, a parse) in :meth:`slot`; never
    hold a slot while awaiting children, or a deep tree can deadlock.
    """

    def __init__(self, limit: int | None = None):
        self.limit = limit
        self._sem: asyncio.Semaphore | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    def slot(self) -> contextlib.AbstractAsyncContextManager:
        if self.limit is None:
            return contextlib.nullcontext()
        # A semaphore belongs to one event loop; the same analyser may be
        # driven by successive asyncio.run() calls.
        loop = asyncio.get_running_loop()
        if self._sem is None or self._loop is not loop:
            self._sem = asyncio.Semaphore(self.limit)
            self._loop = loop
        return self._sem
