"""SQLAlchemy repository implementations."""

from .sqlalchemy_purchase_order_repository import (
    SQLAlchemyEquipmentParametersRepository,
    SQLAlchemyPurchaseOrderRepository,
)

__all__ = ["SQLAlchemyEquipmentParametersRepository", "SQLAlchemyPurchaseOrderRepository"]
