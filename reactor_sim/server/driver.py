"""
Tick Driver

Advances the reactor at a fixed cadence and publishes the serialized
snapshot to subscribers whenever it changes. The simulated step is fixed and
independent of how much wall-clock time actually passed between ticks.
"""

import asyncio
import logging
from typing import Optional

from ..reactor import Reactor
from .broadcast import Broadcaster
from .schemas import serialize_snapshot

logger = logging.getLogger(__name__)


class TickDriver:
    """Periodic simulation loop running as an asyncio task"""

    def __init__(
        self,
        reactor: Reactor,
        broadcaster: Broadcaster,
        interval: float = 0.05,
        dt: float = 0.2,
    ):
        """
        Initialize tick driver

        Args:
            reactor: Reactor to advance
            broadcaster: Destination for changed snapshots
            interval: Wall-clock seconds between ticks
            dt: Simulated seconds per tick
        """
        self.reactor = reactor
        self.broadcaster = broadcaster
        self.interval = interval
        self.dt = dt

        self.tick_count = 0
        self._last_message: Optional[str] = None
        self._task: Optional["asyncio.Task[None]"] = None

    def tick(self) -> bool:
        """
        Run one tick

        Returns:
            True if the snapshot changed and was published
        """
        self.reactor.advance(self.dt)
        self.tick_count += 1

        message = serialize_snapshot(self.reactor.snapshot())
        if message == self._last_message:
            return False

        self._last_message = message
        self.broadcaster.publish(message)
        return True

    async def run(self) -> None:
        logger.info(f"Tick loop started: interval={self.interval}s dt={self.dt}s")
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        while True:
            try:
                self.tick()
            except Exception:
                logger.exception("Tick failed")

            next_tick += self.interval
            delay = next_tick - loop.time()
            if delay < 0:
                # fell behind, skip the missed ticks instead of bursting
                next_tick = loop.time()
                delay = 0
            await asyncio.sleep(delay)

    def start(self) -> None:
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.get_running_loop().create_task(self.run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info(f"Tick loop stopped after {self.tick_count} ticks")

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()
