"""Equipment orders driven end to end through the application container."""

from decimal import Decimal

import pytest

from api import dependencies
from core.application.dtos.purchase_order_dto import CreatePurchaseOrderRequest
from core.domain.entities import EquipmentParameters
from core.domain.enums import OrderStatus
from core.infrastructure.adapters.persistence import MockEquipmentParametersRepository
from core.settings import get_app_settings, reload_app_settings


@pytest.fixture
def container(monkeypatch, bank, logistics):
    """Application wiring with fake bank and logistics services."""
    monkeypatch.setenv("QUEUE_ENABLE_PROCESSING", "true")
    monkeypatch.setenv("QUEUE_MAX_RETRIES", "3")
    monkeypatch.setenv("EQUIPMENT_WEIGHT", "750")
    reload_app_settings()
    dependencies.reset_dependencies()
    monkeypatch.setattr(dependencies, "_bank_service", bank)
    monkeypatch.setattr(dependencies, "_logistics_service", logistics)

    yield dependencies

    dependencies.reset_dependencies()
    # Re-read lazily, once the environment has been restored
    get_app_settings.cache_clear()


def _equipment_request() -> CreatePurchaseOrderRequest:
    return CreatePurchaseOrderRequest(
        order_id=2001,
        quantity=1,
        unit_price=Decimal("12000"),
        seller_bank_account="ACC-EQ",
        origin="thoh",
        is_equipment_order=True,
    )


@pytest.mark.asyncio
async def test_equipment_order_reaches_waiting_for_delivery(container, bank, logistics):
    service = container.get_purchase_order_service()
    queue = container.get_purchase_order_queue()
    created = await service.create_purchase_order(_equipment_request())

    for _ in range(3):
        await queue.process_queue()

    order = await service.get_purchase_order(created.id)
    assert order.status == OrderStatus.WAITING_FOR_DELIVERY.value
    assert queue.get_queue_count() == 0

    item = logistics.requests[0]["items"][0]
    assert (item.name, item.quantity, item.measurement_type) == ("screen_machine", 750, "UNIT")
    assert [payment["to_account_number"] for payment in bank.payments] == ["ACC-EQ", "LOG-ACC"]


@pytest.mark.asyncio
async def test_seed_declares_configured_parameters_when_storage_is_empty(container, monkeypatch):
    repository = MockEquipmentParametersRepository()
    monkeypatch.setattr(dependencies, "_equipment_repository", repository)

    parameters = await container.seed_equipment_parameters()

    assert parameters == EquipmentParameters(
        input_sand_kg=1,
        input_copper_kg=1,
        output_screens_per_day=500,
        equipment_weight=750,
    )
    assert await repository.get_parameters() == parameters


@pytest.mark.asyncio
async def test_seed_keeps_previously_declared_parameters(container, monkeypatch):
    declared = EquipmentParameters(10, 5, 200, 1500)
    repository = MockEquipmentParametersRepository(declared)
    monkeypatch.setattr(dependencies, "_equipment_repository", repository)

    parameters = await container.seed_equipment_parameters()

    assert parameters == declared
    assert await repository.get_parameters() == declared
