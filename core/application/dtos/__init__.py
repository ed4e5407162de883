"""Application DTOs."""

from .pickup_dto import PickupRequestItem, PickupRequestResult, create_pickup_items
from .purchase_order_dto import (
    CreatePurchaseOrderRequest,
    DropoffRequest,
    DropoffResult,
    PurchaseOrderDTO,
)

__all__ = [
    "CreatePurchaseOrderRequest",
    "DropoffRequest",
    "DropoffResult",
    "PickupRequestItem",
    "PickupRequestResult",
    "PurchaseOrderDTO",
    "create_pickup_items",
]
