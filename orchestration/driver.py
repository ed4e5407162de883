"""Periodic driver - populates the queue once, then drains it on an interval."""

import asyncio
from typing import Callable, Optional
import logging

from core.settings import QueueSettings, get_queue_settings

from .queue import PurchaseOrderQueue


logger = logging.getLogger(__name__)


class QueueProcessingDriver:
    """
    Background worker that owns the drain loop.

    The loop stops when the stop event is set. A failing drain is logged
    and the loop carries on with the next interval.
    """

    def __init__(
        self,
        queue: PurchaseOrderQueue,
        settings_provider: Callable[[], QueueSettings] = get_queue_settings,
    ) -> None:
        self._queue = queue
        self._settings_provider = settings_provider
        self._stop_event: Optional[asyncio.Event] = None
        self._task: Optional[asyncio.Task] = None
        self.iterations = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Run the loop as a background task on the current event loop."""
        if self.is_running:
            return self._task

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self.run(self._stop_event), name="queue-processing-driver")
        logger.info("Queue processing driver started")
        return self._task

    async def stop(self, timeout: Optional[float] = 10.0) -> None:
        """Signal the loop to stop and wait for it to finish."""
        if self._task is None:
            return

        self._stop_event.set()
        try:
            await asyncio.wait_for(self._task, timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Queue processing driver did not stop in time, cancelling")
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        finally:
            self._task = None
            logger.info("Queue processing driver stopped")

    async def run(self, stop_event: asyncio.Event) -> None:
        """
        Populate the queue from storage, then drain it until stop_event is set.

        Args:
            stop_event: Set to request a clean shutdown
        """
        if stop_event.is_set():
            return

        try:
            await self._queue.populate_from_database()
        except Exception as exc:
            logger.error(f"Failed to populate queue from database: {exc}", exc_info=True)

        while not stop_event.is_set():
            interval = self._settings_provider().processing_interval_seconds
            if await self._wait(stop_event, interval):
                break

            try:
                await self._queue.process_queue()
            except Exception as exc:
                logger.error(f"Error during queue processing: {exc}", exc_info=True)
            self.iterations += 1

        logger.info("Queue processing loop exited")

    @staticmethod
    async def _wait(stop_event: asyncio.Event, interval: float) -> bool:
        """Sleep for interval seconds. Returns True if stopped while waiting."""
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=max(interval, 0))
        except asyncio.TimeoutError:
            return False
        return True
