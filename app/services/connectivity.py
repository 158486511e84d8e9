"""Network availability as a two-valued signal."""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator

import httpx

from app.schemas.state import ConnectivityState


logger = logging.getLogger(__name__)


class ConnectivityObserver:
    """Latest-value holder for :class:`ConnectivityState`.

    Consumers read :attr:`state` or iterate :meth:`subscribe`; only the
    connectivity source calls :meth:`publish`.
    """

    def __init__(self, initial: ConnectivityState = ConnectivityState.UNAVAILABLE) -> None:
        self._state = initial
        self._changed = asyncio.Event()

    @property
    def state(self) -> ConnectivityState:
        return self._state

    def publish(self, state: ConnectivityState) -> None:
        if state == self._state:
            return
        logger.info("Connectivity %s -> %s", self._state.value, state.value)
        self._state = state
        changed, self._changed = self._changed, asyncio.Event()
        changed.set()

    async def subscribe(self) -> AsyncIterator[ConnectivityState]:
        """Yield the current state, then each change. Intermediate flips may be conflated."""
        last = self._state
        yield last
        while True:
            changed = self._changed
            if self._state == last:
                await changed.wait()
            if self._state == last:
                continue
            last = self._state
            yield last


class ConnectivityMonitor:
    """Polls a probe URL and publishes the result to an observer."""

    def __init__(
        self,
        observer: ConnectivityObserver,
        client: httpx.AsyncClient,
        *,
        probe_url: str,
        interval_seconds: float,
    ) -> None:
        self.observer = observer
        self._client = client
        self._probe_url = probe_url
        self._interval_seconds = interval_seconds
        self._task: asyncio.Task[None] | None = None

    async def check_once(self) -> ConnectivityState:
        try:
            await self._client.head(self._probe_url)
        except httpx.HTTPError as exc:
            logger.debug("Connectivity probe failed: %s", type(exc).__name__)
            state = ConnectivityState.UNAVAILABLE
        else:
            state = ConnectivityState.AVAILABLE
        self.observer.publish(state)
        return state

    def start(self) -> None:
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Connectivity monitor ended with an error")

    async def _run(self) -> None:
        while True:
            try:
                await self.check_once()
            except Exception:
                # InvalidURL and friends are not HTTPError; the probe is still down.
                logger.exception("Connectivity probe of %s raised", self._probe_url)
                self.observer.publish(ConnectivityState.UNAVAILABLE)
            await asyncio.sleep(self._interval_seconds)
