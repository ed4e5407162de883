"""Shared fixtures: in-memory repositories, fake external services, and queue wiring."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, List, Optional

import pytest

from core.application.dtos.pickup_dto import PickupRequestItem, PickupRequestResult
from core.application.interfaces import IBankService, ILogisticsService
from core.domain.entities import EquipmentParameters, PurchaseOrder, RawMaterial
from core.domain.enums import OrderStatus
from core.infrastructure.adapters.persistence import (
    MockEquipmentParametersRepository,
    MockPurchaseOrderRepository,
)
from core.settings import QueueSettings
from orchestration import PurchaseOrderQueue, QueueCommandFactory


FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class FakeBankService(IBankService):
    """Fake bank that records payments and returns scripted results."""

    def __init__(self) -> None:
        self.payments: List[dict[str, Any]] = []
        self.results: List[Any] = []
        self.default_result: Any = True

    async def make_payment(self, to_account_number, to_bank_name, amount, description) -> bool:
        self.payments.append(
            {
                "to_account_number": to_account_number,
                "to_bank_name": to_bank_name,
                "amount": amount,
                "description": description,
            }
        )
        result = self.results.pop(0) if self.results else self.default_result
        if isinstance(result, Exception):
            raise result
        return result


class FakeLogisticsService(ILogisticsService):
    """Fake logistics provider returning a fixed pickup result."""

    def __init__(self) -> None:
        self.requests: List[dict[str, Any]] = []
        self.result = PickupRequestResult(
            pickup_request_id="SHIP-99",
            bank_account_number="LOG-ACC",
            price=Decimal("300"),
        )
        self.error: Optional[Exception] = None

    async def request_pickup(
        self,
        origin_company_id: str,
        destination_company_id: str,
        original_external_order_id: str,
        items: List[PickupRequestItem],
    ) -> PickupRequestResult:
        self.requests.append(
            {
                "origin": origin_company_id,
                "destination": destination_company_id,
                "external_order_id": original_external_order_id,
                "items": items,
            }
        )
        if self.error is not None:
            raise self.error
        return self.result


class FakeEventBus:
    """Fake EventBus that stores published events."""

    def __init__(self) -> None:
        self.events: list[Any] = []

    async def publish(self, event: Any) -> None:
        self.events.append(event)

    def subscribe(self, event_name: str, handler: Any) -> None:
        pass

    def names(self) -> List[str]:
        return [event.name for event in self.events]


def make_order(
    id: int = 7,
    status: OrderStatus = OrderStatus.REQUIRES_PAYMENT_TO_SUPPLIER,
    quantity: int = 100,
    unit_price: Decimal = Decimal("50"),
    bank_account_number: str = "ACC-1",
    raw_material: Optional[str] = "sand",
    is_equipment_order: bool = False,
    **overrides: Any,
) -> PurchaseOrder:
    return PurchaseOrder(
        id=id,
        order_id=overrides.pop("order_id", 1000 + id),
        quantity=quantity,
        unit_price=unit_price,
        bank_account_number=bank_account_number,
        origin=overrides.pop("origin", "thoh"),
        order_date=FIXED_NOW,
        status=status,
        is_equipment_order=is_equipment_order,
        raw_material=RawMaterial(id=1, name=raw_material) if raw_material else None,
        **overrides,
    )


@pytest.fixture
def order_builder() -> Callable[..., PurchaseOrder]:
    return make_order


@pytest.fixture
def repository() -> MockPurchaseOrderRepository:
    return MockPurchaseOrderRepository()


@pytest.fixture
def equipment_repository() -> MockEquipmentParametersRepository:
    return MockEquipmentParametersRepository(
        EquipmentParameters(
            input_sand_kg=10,
            input_copper_kg=5,
            output_screens_per_day=200,
            equipment_weight=1500,
        )
    )


@pytest.fixture
def bank() -> FakeBankService:
    return FakeBankService()


@pytest.fixture
def logistics() -> FakeLogisticsService:
    return FakeLogisticsService()


@pytest.fixture
def event_bus() -> FakeEventBus:
    return FakeEventBus()


@pytest.fixture
def queue_settings() -> QueueSettings:
    return QueueSettings(
        enable_queue_processing=True,
        processing_interval_seconds=0.01,
        max_retries=3,
        max_concurrency=1,
    )


@pytest.fixture
def command_factory(repository, bank, logistics, equipment_repository) -> QueueCommandFactory:
    return QueueCommandFactory(
        repository=repository,
        bank_service=bank,
        logistics_service=logistics,
        equipment_repository=equipment_repository,
        company_id_provider=lambda: "screen-supplier",
        bank_name_provider=lambda: "commercial-bank",
    )


@pytest.fixture
def queue(repository, command_factory, queue_settings, event_bus) -> PurchaseOrderQueue:
    return PurchaseOrderQueue(
        repository=repository,
        command_factory=command_factory,
        settings_provider=lambda: queue_settings,
        event_bus=event_bus,
        clock=lambda: FIXED_NOW,
    )
