"""Domain layer - pure domain models and interfaces."""

from .entities import EquipmentParameters, PurchaseOrder, RawMaterial
from .enums import OrderStatus
from .repositories import EquipmentParametersRepository, PurchaseOrderRepository

__all__ = [
    "EquipmentParameters",
    "EquipmentParametersRepository",
    "OrderStatus",
    "PurchaseOrder",
    "PurchaseOrderRepository",
    "RawMaterial",
]
