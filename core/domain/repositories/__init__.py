"""Domain repository interfaces."""

from .purchase_order_repository import EquipmentParametersRepository, PurchaseOrderRepository

__all__ = ["EquipmentParametersRepository", "PurchaseOrderRepository"]
