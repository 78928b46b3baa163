"""Single-flight latch: at most one in-flight run per key."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import structlog

log = structlog.get_logger(__name__)

R = TypeVar("R")


class SingleFlight(Generic[R]):
    """Coalesce concurrent calls for the same key onto one running task.

    Callers that arrive while a run is in flight get that run's result (or
    exception) instead of starting a second one.
    """

    def __init__(self) -> None:
        self._inflight: dict[str, asyncio.Task[R]] = {}

    def in_flight(self, key: str) -> bool:
        task = self._inflight.get(key)
        return task is not None and not task.done()

    def _forget(self, key: str, task: asyncio.Task[R]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    async def run(self, key: str, factory: Callable[[], Awaitable[R]]) -> R:
        task = self._inflight.get(key)
        if task is None or task.done():
            task = asyncio.ensure_future(factory())
            self._inflight[key] = task
            task.add_done_callback(lambda t: self._forget(key, t))
        else:
            log.debug("single_flight_joined", key=key)
        return await asyncio.shield(task)
