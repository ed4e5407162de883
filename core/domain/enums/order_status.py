"""
Purchase Order Status Enum.

Workflow states a purchase order moves through once it has been created.
"""
from enum import Enum
from typing import Optional, Union


class OrderStatus(str, Enum):
    """Purchase order workflow status values."""

    REQUIRES_PAYMENT_TO_SUPPLIER = "requires_payment_supplier"
    REQUIRES_DELIVERY = "requires_delivery"
    REQUIRES_PAYMENT_TO_LOGISTICS = "requires_payment_delivery"
    WAITING_FOR_DELIVERY = "waiting_delivery"
    DELIVERED = "delivered"
    ABANDONED = "abandoned"

    @classmethod
    def try_parse(cls, value: Union["OrderStatus", str, None]) -> Optional["OrderStatus"]:
        """Return the matching status, or None for an unrecognized value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    @property
    def requires_action(self) -> bool:
        """True when a workflow command exists for this status."""
        return self in ACTIONABLE_STATUSES


ACTIONABLE_STATUSES = frozenset(
    {
        OrderStatus.REQUIRES_PAYMENT_TO_SUPPLIER,
        OrderStatus.REQUIRES_DELIVERY,
        OrderStatus.REQUIRES_PAYMENT_TO_LOGISTICS,
    }
)

# Statuses recovered from storage on startup
ACTIVE_STATUSES = (
    OrderStatus.REQUIRES_PAYMENT_TO_SUPPLIER,
    OrderStatus.REQUIRES_DELIVERY,
    OrderStatus.REQUIRES_PAYMENT_TO_LOGISTICS,
    OrderStatus.WAITING_FOR_DELIVERY,
)

TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.ABANDONED})
