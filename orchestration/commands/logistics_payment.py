"""Pay the logistics provider for a requested pickup."""

import logging

from core.application.interfaces import IBankService
from core.domain.entities import PurchaseOrder
from core.domain.enums import OrderStatus
from core.domain.repositories import PurchaseOrderRepository

from .base import Command, CommandResult


logger = logging.getLogger(__name__)


class ProcessLogisticsPaymentCommand(Command):
    """requires_payment_delivery -> waiting_delivery"""

    name = "logistics_payment"

    def __init__(
        self,
        purchase_order: PurchaseOrder,
        bank_service: IBankService,
        repository: PurchaseOrderRepository,
        to_bank_name: str = "commercial-bank",
    ) -> None:
        super().__init__(purchase_order)
        self._bank_service = bank_service
        self._repository = repository
        self._to_bank_name = to_bank_name

    async def _execute(self) -> CommandResult:
        order = self.purchase_order
        price = order.order_shipping_price

        if not order.shipper_bank_account:
            return CommandResult.failed_no_retry(f"Purchase order {order.id} has no shipper bank account")
        if price is None or price <= 0:
            return CommandResult.failed_no_retry(
                f"Invalid shipping price {price} for purchase order {order.id}"
            )

        logger.info(f"Processing logistics payment for purchase order {order.id}")

        paid = await self._bank_service.make_payment(
            order.shipper_bank_account,
            self._to_bank_name,
            price,
            str(order.shipment_id),
        )
        if not paid:
            logger.warning(f"Logistics payment failed for purchase order {order.id}")
            return CommandResult.failed("Logistics payment failed")

        if not await self._repository.update_status(order.id, OrderStatus.WAITING_FOR_DELIVERY):
            return CommandResult.failed(f"Purchase order {order.id} disappeared after logistics payment")

        logger.info(f"✅ Logistics payment successful for purchase order {order.id}, amount {price}")
        return CommandResult.succeeded()
