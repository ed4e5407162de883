"""Tests for QueueCommandFactory status dispatch."""

import pytest

from core.domain.enums import OrderStatus
from orchestration.commands import (
    NoOpCommand,
    ProcessLogisticsPaymentCommand,
    ProcessShippingRequestCommand,
    ProcessSupplierPaymentCommand,
    QueueCommandFactory,
)


@pytest.mark.parametrize(
    "status, expected",
    [
        (OrderStatus.REQUIRES_PAYMENT_TO_SUPPLIER, ProcessSupplierPaymentCommand),
        (OrderStatus.REQUIRES_DELIVERY, ProcessShippingRequestCommand),
        (OrderStatus.REQUIRES_PAYMENT_TO_LOGISTICS, ProcessLogisticsPaymentCommand),
        (OrderStatus.WAITING_FOR_DELIVERY, NoOpCommand),
        (OrderStatus.DELIVERED, NoOpCommand),
        (OrderStatus.ABANDONED, NoOpCommand),
    ],
)
def test_create_command_matches_status(command_factory, order_builder, status, expected):
    order = order_builder(status=status)

    command = command_factory.create_command(order)

    assert type(command) is expected
    assert command.purchase_order is order


def test_create_command_accepts_raw_status_strings(command_factory, order_builder):
    order = order_builder(status="requires_delivery")

    assert isinstance(command_factory.create_command(order), ProcessShippingRequestCommand)


def test_unknown_status_maps_to_noop(command_factory, order_builder):
    order = order_builder(status="on_hold")

    command = command_factory.create_command(order)

    assert isinstance(command, NoOpCommand)
    assert command.status == "on_hold"


@pytest.mark.asyncio
async def test_company_id_is_read_when_command_is_built(
    repository, bank, logistics, equipment_repository, order_builder
):
    company = {"id": "first"}
    factory = QueueCommandFactory(
        repository=repository,
        bank_service=bank,
        logistics_service=logistics,
        equipment_repository=equipment_repository,
        company_id_provider=lambda: company["id"],
        bank_name_provider=lambda: "commercial-bank",
    )
    order = repository.add(order_builder(status=OrderStatus.REQUIRES_DELIVERY))

    company["id"] = "second"
    await factory.create_command(order).execute()

    assert logistics.requests[0]["destination"] == "second"
