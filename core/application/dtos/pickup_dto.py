"""Application DTOs for logistics pickup requests."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

EQUIPMENT_ITEM_NAME = "screen_machine"

_ITEM_NAMES = {
    "equipment": EQUIPMENT_ITEM_NAME,
    "sand": "sand",
    "copper": "copper",
    "screens": "screens",
}


class PickupRequestItem(BaseModel):
    """One cargo line for the logistics provider."""

    name: str = Field(..., description="Cargo item name")
    quantity: int = Field(..., gt=0, description="Units or kilograms")
    measurement_type: str = Field(..., description="UNIT or KG")

    model_config = {"frozen": True}


class PickupRequestResult(BaseModel):
    """Outcome of a successful pickup request."""

    pickup_request_id: str = Field(..., description="Shipment id assigned by the provider")
    bank_account_number: str = Field(..., description="Provider account to pay for shipping")
    price: Decimal = Field(..., ge=0, description="Shipping price")

    model_config = {"frozen": True}


def create_pickup_items(item_type: str, quantity: int, is_equipment: bool = False) -> List[PickupRequestItem]:
    """
    Build the cargo list for a pickup request.

    Equipment ships as units, materials ship by weight in kilograms.
    A zero quantity is sent as 1.

    Args:
        item_type: "equipment" or a raw material name
        quantity: Equipment weight or material quantity
        is_equipment: True for equipment orders

    Returns:
        Single-item cargo list
    """
    lowered = item_type.lower()
    return [
        PickupRequestItem(
            name=_ITEM_NAMES.get(lowered, lowered),
            quantity=quantity if quantity > 0 else 1,
            measurement_type="UNIT" if is_equipment else "KG",
        )
    ]
