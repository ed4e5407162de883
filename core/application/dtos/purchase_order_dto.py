"""Application DTOs for purchase order operations."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from core.domain.entities import PurchaseOrder


class CreatePurchaseOrderRequest(BaseModel):
    """Request DTO for placing a purchase order with a supplier."""

    order_id: int = Field(..., description="Supplier order reference")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Decimal = Field(..., gt=0, description="Price per unit")
    seller_bank_account: str = Field(..., min_length=1, description="Supplier bank account")
    origin: str = Field(..., min_length=1, description="Supplier identifier")
    raw_material: Optional[str] = Field(default=None, description="Material name, for material orders")
    is_equipment_order: bool = Field(default=False, description="True for equipment orders")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_classification(self) -> "CreatePurchaseOrderRequest":
        if self.is_equipment_order == (self.raw_material is not None):
            raise ValueError("exactly one of is_equipment_order or raw_material must be set")
        return self


class PurchaseOrderDTO(BaseModel):
    """Response DTO for purchase order details."""

    id: int
    order_id: int
    status: str
    quantity: int
    quantity_delivered: int
    unit_price: Decimal
    origin: str
    order_date: datetime
    is_equipment_order: bool
    raw_material: Optional[str] = None
    shipment_id: Optional[str] = None
    shipper_bank_account: Optional[str] = None
    order_shipping_price: Decimal = Decimal("0")

    @classmethod
    def from_entity(cls, order: PurchaseOrder) -> "PurchaseOrderDTO":
        return cls(
            id=order.id,
            order_id=order.order_id,
            status=getattr(order.status, "value", order.status),
            quantity=order.quantity,
            quantity_delivered=order.quantity_delivered,
            unit_price=order.unit_price,
            origin=order.origin,
            order_date=order.order_date,
            is_equipment_order=order.is_equipment_order,
            raw_material=order.raw_material.name if order.raw_material else None,
            shipment_id=order.shipment_id,
            shipper_bank_account=order.shipper_bank_account,
            order_shipping_price=order.order_shipping_price,
        )


class DropoffRequest(BaseModel):
    """Delivery event sent by the logistics provider."""

    shipment_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)


class DropoffResult(BaseModel):
    success: bool
    purchase_order_id: int
    order_id: int
    quantity: int
    item_type: str
    status: str
    processed_at: datetime
