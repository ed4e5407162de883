"""Workflow step commands."""

from .base import Command, CommandResult
from .factory import QueueCommandFactory
from .logistics_payment import ProcessLogisticsPaymentCommand
from .noop import NoOpCommand
from .shipping_request import ProcessShippingRequestCommand
from .supplier_payment import ProcessSupplierPaymentCommand

__all__ = [
    "Command",
    "CommandResult",
    "NoOpCommand",
    "ProcessLogisticsPaymentCommand",
    "ProcessShippingRequestCommand",
    "ProcessSupplierPaymentCommand",
    "QueueCommandFactory",
]
