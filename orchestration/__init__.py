"""Orchestration layer - the purchase order workflow queue and its driver."""

from .bus import EventBusProtocol, InMemoryEventBus
from .commands import (
    Command,
    CommandResult,
    NoOpCommand,
    ProcessLogisticsPaymentCommand,
    ProcessShippingRequestCommand,
    ProcessSupplierPaymentCommand,
    QueueCommandFactory,
)
from .driver import QueueProcessingDriver
from .events import Event, EventMetadata
from .models import DrainSummary, ItemOutcome, QueueItem
from .queue import PurchaseOrderQueue

__all__ = [
    "Command",
    "CommandResult",
    "DrainSummary",
    "Event",
    "EventBusProtocol",
    "EventMetadata",
    "InMemoryEventBus",
    "ItemOutcome",
    "NoOpCommand",
    "ProcessLogisticsPaymentCommand",
    "ProcessShippingRequestCommand",
    "ProcessSupplierPaymentCommand",
    "PurchaseOrderQueue",
    "QueueCommandFactory",
    "QueueItem",
    "QueueProcessingDriver",
]
