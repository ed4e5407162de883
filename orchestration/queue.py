"""
Purchase order workflow queue.

The queue holds purchase order ids that may need a workflow step. It is
advisory: the persisted order status decides which step runs, so the queue
can always be rebuilt from storage with populate_from_database().
"""

import asyncio
from collections import deque
from datetime import datetime
from typing import Callable, Deque, List, Optional
import logging

from core.domain.enums import ACTIVE_STATUSES, OrderStatus
from core.domain.repositories import PurchaseOrderRepository
from core.settings import QueueSettings, get_queue_settings
from core.utils.datetime import utc_now

from .bus import EventBusProtocol
from .commands import CommandResult, NoOpCommand, QueueCommandFactory
from .commands.base import Command
from .events import ABANDONED, DROPPED, QUEUE_DRAINED, RETRY_SCHEDULED, STEP_SUCCEEDED, Event, EventMetadata
from .models import DrainSummary, ItemOutcome, QueueItem


logger = logging.getLogger(__name__)

EVENT_SOURCE = "purchase_order_queue"


class PurchaseOrderQueue:
    """
    In-memory work queue that drives purchase orders through their workflow.

    enqueue() may be called at any time, including while a drain is running;
    items added during a drain are handled by the next one. Drains never
    overlap: a second process_queue() call waits for the running one, so an
    order is never in flight in two drains at once.

    Example:
        >>> queue = PurchaseOrderQueue(repository, QueueCommandFactory(...))
        >>> queue.enqueue(7)
        >>> summary = await queue.process_queue()
    """

    def __init__(
        self,
        repository: PurchaseOrderRepository,
        command_factory: QueueCommandFactory,
        settings_provider: Callable[[], QueueSettings] = get_queue_settings,
        event_bus: Optional[EventBusProtocol] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._command_factory = command_factory
        self._settings_provider = settings_provider
        self._event_bus = event_bus
        self._clock = clock
        self._items: Deque[QueueItem] = deque()
        self._drain_lock = asyncio.Lock()

    def enqueue(self, purchase_order_id: int) -> None:
        """Schedule an order for processing with a fresh retry counter."""
        self._items.append(QueueItem(purchase_order_id=purchase_order_id, last_processed=self._clock()))
        logger.info(f"Enqueued purchase order {purchase_order_id}")

    def get_queue_count(self) -> int:
        return len(self._items)

    async def populate_from_database(self) -> int:
        """
        Enqueue every order whose status is not terminal.

        Used on startup to recover in-flight work, since the queue itself is
        not persisted. Calling it twice enqueues the same ids twice; the drain
        processes each id at most once per pass.

        Returns:
            Number of orders enqueued
        """
        orders = await self._repository.find_by_statuses(list(ACTIVE_STATUSES))
        for order in orders:
            self.enqueue(order.id)

        logger.info(f"Populated queue with {len(orders)} active purchase orders")
        return len(orders)

    async def process_queue(self) -> DrainSummary:
        """
        Drain the items pending right now and run one workflow step for each.

        Returns:
            DrainSummary with per-outcome counts
        """
        async with self._drain_lock:
            return await self._drain()

    async def _drain(self) -> DrainSummary:
        settings = self._settings_provider()
        if not settings.enable_queue_processing:
            logger.debug("Queue processing is disabled, skipping drain")
            return DrainSummary(enabled=False, remaining=self.get_queue_count())

        summary = DrainSummary()
        batch = self._take_batch(summary)
        if not batch:
            summary.remaining = self.get_queue_count()
            return summary

        logger.info(f"Processing {len(batch)} purchase order(s) from queue")

        max_retries = settings.max_retries
        if settings.max_concurrency <= 1:
            outcomes = [await self._process_item(item, max_retries) for item in batch]
        else:
            semaphore = asyncio.Semaphore(settings.max_concurrency)

            async def bounded(item: QueueItem) -> ItemOutcome:
                async with semaphore:
                    return await self._process_item(item, max_retries)

            outcomes = await asyncio.gather(*(bounded(item) for item in batch))

        for outcome in outcomes:
            summary.record(outcome)
        summary.remaining = self.get_queue_count()

        logger.info(
            f"Queue drain finished: {summary.advanced} advanced, {summary.retried} retried, "
            f"{summary.abandoned} abandoned, {summary.remaining} pending"
        )
        await self._publish(QUEUE_DRAINED, None, summary.to_dict())
        return summary

    def _take_batch(self, summary: DrainSummary) -> List[QueueItem]:
        batch: List[QueueItem] = []
        seen = set()
        for _ in range(len(self._items)):
            item = self._items.popleft()
            if item.purchase_order_id in seen:
                logger.debug(f"Skipping duplicate queue item for purchase order {item.purchase_order_id}")
                summary.dropped += 1
                continue
            seen.add(item.purchase_order_id)
            batch.append(item)
        return batch

    async def _process_item(self, item: QueueItem, max_retries: int) -> ItemOutcome:
        purchase_order_id = item.purchase_order_id
        try:
            order = await self._repository.find_by_id(purchase_order_id)
            if order is None:
                logger.warning(f"Purchase order {purchase_order_id} not found, dropping from queue")
                await self._publish(DROPPED, purchase_order_id, {"reason": "not_found"})
                return ItemOutcome.DROPPED

            command = self._command_factory.create_command(order)
            result = await command.execute()
            if result.success:
                return await self._handle_success(item, command)
        except Exception as exc:
            logger.error(f"Error processing purchase order {purchase_order_id}: {exc}", exc_info=True)
            result = CommandResult.failed(str(exc) or type(exc).__name__)

        return await self._handle_failure(item, result, max_retries)

    async def _handle_success(self, item: QueueItem, command: Command) -> ItemOutcome:
        purchase_order_id = item.purchase_order_id
        if isinstance(command, NoOpCommand):
            logger.debug(f"Purchase order {purchase_order_id} in status {command.status} needs no action")
            return ItemOutcome.COMPLETED

        order = await self._repository.find_by_id(purchase_order_id)
        status = OrderStatus.try_parse(order.status) if order is not None else None
        logger.info(f"Purchase order {purchase_order_id} completed {command.name}, now {status}")
        await self._publish(
            STEP_SUCCEEDED,
            purchase_order_id,
            {"command": command.name, "status": status.value if status else None},
        )

        if status is not None and status.requires_action:
            self.enqueue(purchase_order_id)
        return ItemOutcome.ADVANCED

    async def _handle_failure(self, item: QueueItem, result: CommandResult, max_retries: int) -> ItemOutcome:
        purchase_order_id = item.purchase_order_id
        error = result.error_message or "Unknown error"
        item.record_failure(error, self._clock())

        if result.should_retry and item.retry_count < max_retries:
            logger.warning(
                f"Purchase order {purchase_order_id} failed (attempt {item.retry_count}/{max_retries}), "
                f"will retry: {error}"
            )
            self._items.append(item)
            await self._publish(
                RETRY_SCHEDULED,
                purchase_order_id,
                {"retry_count": item.retry_count, "max_retries": max_retries, "error": error},
            )
            return ItemOutcome.RETRIED

        if result.should_retry:
            reason = f"retries exhausted after {item.retry_count} attempt(s): {error}"
        else:
            reason = f"non-retryable failure: {error}"
        await self._abandon(item, reason)
        return ItemOutcome.ABANDONED

    async def _abandon(self, item: QueueItem, reason: str) -> None:
        purchase_order_id = item.purchase_order_id
        logger.error(f"Abandoning purchase order {purchase_order_id}: {reason}")
        try:
            if not await self._repository.update_status(purchase_order_id, OrderStatus.ABANDONED):
                logger.warning(f"Purchase order {purchase_order_id} not found while abandoning")
        except Exception as exc:
            # The order keeps its status and is picked up again by the next resync
            logger.error(f"Failed to abandon purchase order {purchase_order_id}: {exc}", exc_info=True)
            return

        await self._publish(
            ABANDONED,
            purchase_order_id,
            {"reason": reason, "retry_count": item.retry_count},
        )

    async def _publish(self, name: str, purchase_order_id: Optional[int], payload: dict[str, object]) -> None:
        if self._event_bus is None:
            return
        event = Event(
            name=name,
            payload=payload,
            metadata=EventMetadata(
                source=EVENT_SOURCE,
                timestamp=self._clock(),
                purchase_order_id=purchase_order_id,
            ),
        )
        # A failing bus must not turn a completed step into a retry
        try:
            await self._event_bus.publish(event)
        except Exception as exc:
            logger.error(f"Failed to publish {name} for purchase order {purchase_order_id}: {exc}", exc_info=True)
