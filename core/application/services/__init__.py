"""Application services."""
from .purchase_order_service import PurchaseOrderService

__all__ = ["PurchaseOrderService"]
