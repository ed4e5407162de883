"""Application layer - services, interfaces, and DTOs."""

from .dtos import (
    CreatePurchaseOrderRequest,
    DropoffRequest,
    DropoffResult,
    PickupRequestItem,
    PickupRequestResult,
    PurchaseOrderDTO,
)
from .interfaces import IBankService, ILogisticsService
from .services import PurchaseOrderService

__all__ = [
    # DTOs
    "CreatePurchaseOrderRequest",
    "DropoffRequest",
    "DropoffResult",
    "PickupRequestItem",
    "PickupRequestResult",
    "PurchaseOrderDTO",
    # Services
    "PurchaseOrderService",
    # Interfaces
    "IBankService",
    "ILogisticsService",
]
