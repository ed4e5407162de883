"""In-memory persistence adapters."""

from .mock_purchase_order_repository import (
    MockEquipmentParametersRepository,
    MockPurchaseOrderRepository,
)

__all__ = ["MockEquipmentParametersRepository", "MockPurchaseOrderRepository"]
