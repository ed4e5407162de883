"""Domain enums."""

from .order_status import ACTIVE_STATUSES, ACTIONABLE_STATUSES, TERMINAL_STATUSES, OrderStatus

__all__ = [
    "ACTIVE_STATUSES",
    "ACTIONABLE_STATUSES",
    "TERMINAL_STATUSES",
    "OrderStatus",
]
