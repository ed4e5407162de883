"""
Purchase order aggregate.

This module must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..enums import OrderStatus


@dataclass
class RawMaterial:
    """Raw material kind a purchase order can buy (e.g. sand, copper)."""
    id: int
    name: str


@dataclass
class EquipmentParameters:
    """Declared characteristics of a production machine."""
    input_sand_kg: int
    input_copper_kg: int
    output_screens_per_day: int
    equipment_weight: int


@dataclass
class PurchaseOrder:
    """
    Purchase order placed with an external supplier.

    An order is either an equipment order or a raw material order, never both.
    The status is the single source of truth for the next workflow step.
    """
    id: int
    order_id: int
    quantity: int
    unit_price: Decimal
    bank_account_number: str
    origin: str
    order_date: datetime
    status: OrderStatus = OrderStatus.REQUIRES_PAYMENT_TO_SUPPLIER
    quantity_delivered: int = 0

    # Classification
    is_equipment_order: bool = False
    raw_material: Optional[RawMaterial] = None

    # Shipping (populated by the shipping request step)
    shipment_id: Optional[str] = None
    shipper_bank_account: Optional[str] = None
    order_shipping_price: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def total_amount(self) -> Decimal:
        """Amount owed to the supplier."""
        return Decimal(self.quantity) * Decimal(self.unit_price)

    @property
    def remaining_quantity(self) -> int:
        return self.quantity - self.quantity_delivered

    @property
    def has_valid_classification(self) -> bool:
        """Equipment flag XOR material reference."""
        return self.is_equipment_order != (self.raw_material is not None)
