"""Pay the supplier for a purchase order."""

import logging

from core.application.interfaces import IBankService
from core.domain.entities import PurchaseOrder
from core.domain.enums import OrderStatus
from core.domain.repositories import PurchaseOrderRepository

from .base import Command, CommandResult


logger = logging.getLogger(__name__)


class ProcessSupplierPaymentCommand(Command):
    """requires_payment_supplier -> requires_delivery"""

    name = "supplier_payment"

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
        total_amount = order.total_amount

        if total_amount <= 0:
            return CommandResult.failed_no_retry(
                f"Invalid supplier payment amount {total_amount} for purchase order {order.id}"
            )
        if not order.bank_account_number:
            return CommandResult.failed_no_retry(f"Purchase order {order.id} has no seller bank account")

        logger.info(f"Processing supplier payment for purchase order {order.id}")

        paid = await self._bank_service.make_payment(
            order.bank_account_number,
            self._to_bank_name,
            total_amount,
            str(order.order_id),
        )
        if not paid:
            logger.warning(f"Supplier payment failed for purchase order {order.id}")
            return CommandResult.failed("Supplier payment failed")

        if not await self._repository.update_status(order.id, OrderStatus.REQUIRES_DELIVERY):
            return CommandResult.failed(f"Purchase order {order.id} disappeared after supplier payment")

        logger.info(f"✅ Supplier payment successful for purchase order {order.id}, amount {total_amount}")
        return CommandResult.succeeded()
