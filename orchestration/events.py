"""Workflow events - Event, EventMetadata and the event names the queue emits."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

STEP_SUCCEEDED = "purchase_order.step_succeeded"
RETRY_SCHEDULED = "purchase_order.retry_scheduled"
ABANDONED = "purchase_order.abandoned"
DROPPED = "purchase_order.dropped"
QUEUE_DRAINED = "queue.drained"


@dataclass
class EventMetadata:
    """Metadata for an event."""

    source: str
    timestamp: datetime
    purchase_order_id: Optional[int] = None


@dataclass
class Event:
    """Something that happened while driving purchase orders."""

    name: str
    payload: dict[str, object]
    metadata: EventMetadata
