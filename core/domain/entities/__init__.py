"""Domain entities."""

from .purchase_order import EquipmentParameters, PurchaseOrder, RawMaterial

__all__ = ["EquipmentParameters", "PurchaseOrder", "RawMaterial"]
