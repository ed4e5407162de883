"""Ask the logistics provider to collect a paid purchase order."""

from typing import List, Optional
import logging

from core.application.dtos.pickup_dto import PickupRequestItem, create_pickup_items
from core.application.interfaces import ILogisticsService
from core.domain.entities import PurchaseOrder
from core.domain.enums import OrderStatus
from core.domain.repositories import EquipmentParametersRepository, PurchaseOrderRepository

from .base import Command, CommandResult


logger = logging.getLogger(__name__)


class ProcessShippingRequestCommand(Command):
    """requires_delivery -> requires_payment_delivery"""

    name = "shipping_request"

    def __init__(
        self,
        purchase_order: PurchaseOrder,
        logistics_service: ILogisticsService,
        repository: PurchaseOrderRepository,
        equipment_repository: EquipmentParametersRepository,
        company_id: str,
    ) -> None:
        super().__init__(purchase_order)
        self._logistics_service = logistics_service
        self._repository = repository
        self._equipment_repository = equipment_repository
        self._company_id = company_id

    async def _execute(self) -> CommandResult:
        order = self.purchase_order

        if not order.has_valid_classification:
            return CommandResult.failed_no_retry(
                f"Invalid purchase order configuration: order {order.id} must be either "
                f"an equipment order or reference a raw material"
            )

        logger.info(f"Processing shipping request for purchase order {order.id}")

        items = await self._create_pickup_items(order)
        if items is None:
            return CommandResult.failed("Failed to get equipment parameters for shipping request")

        pickup = await self._logistics_service.request_pickup(
            order.origin,
            self._company_id,
            str(order.order_id),
            items,
        )

        # Status last: a partial write leaves the order in requires_delivery
        await self._repository.update_shipment_id(order.id, pickup.pickup_request_id)
        await self._repository.update_shipping_details(order.id, pickup.bank_account_number, pickup.price)
        if not await self._repository.update_status(order.id, OrderStatus.REQUIRES_PAYMENT_TO_LOGISTICS):
            return CommandResult.failed(f"Purchase order {order.id} disappeared after pickup request")

        logger.info(
            f"✅ Shipping request successful for purchase order {order.id}, "
            f"pickup request {pickup.pickup_request_id}"
        )
        return CommandResult.succeeded()

    async def _create_pickup_items(self, order: PurchaseOrder) -> Optional[List[PickupRequestItem]]:
        if order.is_equipment_order:
            parameters = await self._equipment_repository.get_parameters()
            if parameters is None:
                logger.error("Failed to get equipment parameters for shipping request")
                return None
            return create_pickup_items("equipment", parameters.equipment_weight, is_equipment=True)

        return create_pickup_items(order.raw_material.name, order.quantity, is_equipment=False)
