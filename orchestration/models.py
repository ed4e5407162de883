"""Orchestration models - QueueItem, ItemOutcome and DrainSummary."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from core.utils.datetime import utc_now


@dataclass
class QueueItem:
    """Pending work for one purchase order. Lives only in memory."""

    purchase_order_id: int
    retry_count: int = 0
    last_processed: datetime = field(default_factory=utc_now)
    last_error: Optional[str] = None

    def record_failure(self, error: str, when: datetime) -> None:
        self.retry_count += 1
        self.last_error = error
        self.last_processed = when


class ItemOutcome(str, Enum):
    """What a drain did with one queue item."""

    ADVANCED = "advanced"
    COMPLETED = "completed"
    RETRIED = "retried"
    ABANDONED = "abandoned"
    DROPPED = "dropped"


@dataclass
class DrainSummary:
    """Counts for one drain pass."""

    enabled: bool = True
    processed: int = 0
    advanced: int = 0
    completed: int = 0
    retried: int = 0
    abandoned: int = 0
    dropped: int = 0
    remaining: int = 0

    def record(self, outcome: ItemOutcome) -> None:
        self.processed += 1
        setattr(self, outcome.value, getattr(self, outcome.value) + 1)

    def to_dict(self) -> dict[str, object]:
        return {
            "enabled": self.enabled,
            "processed": self.processed,
            "advanced": self.advanced,
            "completed": self.completed,
            "retried": self.retried,
            "abandoned": self.abandoned,
            "dropped": self.dropped,
            "remaining": self.remaining,
        }
