"""Tests for PurchaseOrderService - creation and delivery handling."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.application.dtos.purchase_order_dto import CreatePurchaseOrderRequest
from core.application.services.purchase_order_service import PurchaseOrderService
from core.domain.enums import OrderStatus
from core.domain.exceptions import InvalidOrderStateError, InvalidRequestError, PurchaseOrderNotFoundError


FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def enqueued() -> list[int]:
    return []


@pytest.fixture
def service(repository, enqueued) -> PurchaseOrderService:
    return PurchaseOrderService(repository, enqueue=enqueued.append, clock=lambda: FIXED_NOW)


def _request(**overrides) -> CreatePurchaseOrderRequest:
    data = {
        "order_id": 1007,
        "quantity": 100,
        "unit_price": Decimal("50"),
        "seller_bank_account": "ACC-1",
        "origin": "thoh",
        "raw_material": "sand",
    }
    data.update(overrides)
    return CreatePurchaseOrderRequest(**data)


@pytest.mark.asyncio
async def test_create_purchase_order_persists_and_enqueues(service, repository, enqueued):
    dto = await service.create_purchase_order(_request())

    assert dto.status == "requires_payment_supplier"
    assert dto.order_date == FIXED_NOW
    assert dto.raw_material == "sand"
    assert enqueued == [dto.id]

    stored = await repository.find_by_id(dto.id)
    assert stored.total_amount == Decimal("5000")


@pytest.mark.asyncio
async def test_create_equipment_order(service):
    dto = await service.create_purchase_order(_request(raw_material=None, is_equipment_order=True, quantity=1))

    assert dto.is_equipment_order is True
    assert dto.raw_material is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"raw_material": None},
        {"raw_material": "sand", "is_equipment_order": True},
        {"quantity": 0},
        {"unit_price": Decimal("0")},
    ],
)
def test_create_request_rejects_invalid_orders(overrides):
    with pytest.raises(ValidationError):
        _request(**overrides)


@pytest.mark.asyncio
async def test_get_purchase_order_not_found(service):
    with pytest.raises(PurchaseOrderNotFoundError):
        await service.get_purchase_order(404)


# =============================================================================
# DROPOFF
# =============================================================================

@pytest.mark.asyncio
async def test_partial_then_full_material_dropoff(service, repository, order_builder):
    repository.add(
        order_builder(id=7, quantity=100, status=OrderStatus.WAITING_FOR_DELIVERY, shipment_id="SHIP-99")
    )

    partial = await service.handle_dropoff("SHIP-99", 40)
    full = await service.handle_dropoff("SHIP-99", 60)

    assert partial.status == "waiting_delivery"
    assert partial.item_type == "sand"
    assert full.status == "delivered"
    assert full.quantity == 60
    stored = await repository.find_by_id(7)
    assert stored.quantity_delivered == 100


@pytest.mark.asyncio
async def test_equipment_dropoff_counts_one_machine(service, repository, order_builder):
    repository.add(
        order_builder(
            id=8,
            quantity=1,
            raw_material=None,
            is_equipment_order=True,
            status=OrderStatus.WAITING_FOR_DELIVERY,
            shipment_id="SHIP-1",
        )
    )

    result = await service.handle_dropoff("SHIP-1", 1500)

    assert result.item_type == "equipment"
    assert result.quantity == 1
    assert result.status == "delivered"


@pytest.mark.asyncio
async def test_dropoff_exceeding_remaining_quantity_is_rejected(service, repository, order_builder):
    repository.add(
        order_builder(id=9, quantity=10, status=OrderStatus.WAITING_FOR_DELIVERY, shipment_id="SHIP-2")
    )

    with pytest.raises(InvalidRequestError):
        await service.handle_dropoff("SHIP-2", 11)


@pytest.mark.asyncio
async def test_dropoff_before_logistics_payment_is_rejected(service, repository, order_builder):
    repository.add(
        order_builder(id=10, status=OrderStatus.REQUIRES_PAYMENT_TO_LOGISTICS, shipment_id="SHIP-3")
    )

    with pytest.raises(InvalidOrderStateError):
        await service.handle_dropoff("SHIP-3", 1)


@pytest.mark.asyncio
async def test_dropoff_for_unknown_shipment(service):
    with pytest.raises(PurchaseOrderNotFoundError):
        await service.handle_dropoff("SHIP-404", 1)
