"""Application service for purchase order operations."""

from datetime import datetime
from typing import Callable, List
import logging

from core.application.dtos.purchase_order_dto import (
    CreatePurchaseOrderRequest,
    DropoffResult,
    PurchaseOrderDTO,
)
from core.domain.enums import OrderStatus
from core.domain.exceptions import (
    InvalidOrderStateError,
    InvalidRequestError,
    PurchaseOrderNotFoundError,
)
from core.domain.repositories import PurchaseOrderRepository
from core.utils.datetime import utc_now


logger = logging.getLogger(__name__)

EQUIPMENT_ITEM_TYPE = "equipment"


class PurchaseOrderService:
    """
    Application service for the parts of the purchase order lifecycle that
    happen outside the workflow queue.

    Responsibilities:
    - Create orders and hand them to the queue
    - Record deliveries reported by the logistics provider
    - Transform domain entities into DTOs
    """

    def __init__(
        self,
        repository: PurchaseOrderRepository,
        enqueue: Callable[[int], None],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize purchase order service.

        Args:
            repository: Purchase order repository
            enqueue: Schedules an order id for workflow processing
            clock: Timestamp source for new orders
        """
        self._repository = repository
        self._enqueue = enqueue
        self._clock = clock

    async def create_purchase_order(self, request: CreatePurchaseOrderRequest) -> PurchaseOrderDTO:
        """Persist a new purchase order and schedule its first workflow step.

        Args:
            request: CreatePurchaseOrderRequest DTO

        Returns:
            PurchaseOrderDTO of the stored order
        """
        order = await self._repository.create(
            order_id=request.order_id,
            quantity=request.quantity,
            unit_price=request.unit_price,
            bank_account_number=request.seller_bank_account,
            origin=request.origin,
            order_date=self._clock(),
            raw_material_name=request.raw_material,
            is_equipment_order=request.is_equipment_order,
        )
        logger.info(f"✅ Purchase order {order.id} created for supplier order {order.order_id}")

        self._enqueue(order.id)
        return PurchaseOrderDTO.from_entity(order)

    async def get_purchase_order(self, purchase_order_id: int) -> PurchaseOrderDTO:
        order = await self._repository.find_by_id(purchase_order_id)
        if order is None:
            raise PurchaseOrderNotFoundError(purchase_order_id)
        return PurchaseOrderDTO.from_entity(order)

    async def list_purchase_orders(self, limit: int = 100) -> List[PurchaseOrderDTO]:
        orders = await self._repository.find_all(limit=limit)
        return [PurchaseOrderDTO.from_entity(order) for order in orders]

    async def handle_dropoff(self, shipment_id: str, quantity: int) -> DropoffResult:
        """Record goods delivered by the logistics provider.

        Equipment dropoffs count as one machine each. Material dropoffs add
        the delivered kilograms. The repository moves the order to delivered
        once the full quantity has arrived.

        Args:
            shipment_id: Pickup request id recorded on the order
            quantity: Quantity reported by the provider

        Returns:
            DropoffResult describing the recorded delivery

        Raises:
            PurchaseOrderNotFoundError: No order has this shipment id
            InvalidOrderStateError: Order is not waiting for delivery
            InvalidRequestError: Quantity exceeds what is still outstanding
        """
        order = await self._repository.find_by_shipment_id(shipment_id)
        if order is None:
            raise PurchaseOrderNotFoundError(f"with shipment id {shipment_id}")

        if OrderStatus.try_parse(order.status) is not OrderStatus.WAITING_FOR_DELIVERY:
            raise InvalidOrderStateError(
                order.id,
                getattr(order.status, "value", order.status),
                OrderStatus.WAITING_FOR_DELIVERY.value,
            )

        if not order.has_valid_classification:
            raise InvalidRequestError(f"Purchase order {order.id} has invalid configuration")

        delivered = 1 if order.is_equipment_order else quantity
        if delivered > order.remaining_quantity:
            raise InvalidRequestError(
                f"Delivery quantity {delivered} exceeds remaining order quantity {order.remaining_quantity}"
            )

        if not await self._repository.update_delivery_quantity(order.id, delivered):
            raise PurchaseOrderNotFoundError(order.id)

        updated = await self._repository.find_by_id(order.id)
        status = updated.status if updated is not None else order.status
        item_type = EQUIPMENT_ITEM_TYPE if order.is_equipment_order else order.raw_material.name

        logger.info(
            f"✅ Received {delivered} {item_type} for purchase order {order.id} (shipment {shipment_id})"
        )
        return DropoffResult(
            success=True,
            purchase_order_id=order.id,
            order_id=order.order_id,
            quantity=delivered,
            item_type=item_type,
            status=getattr(status, "value", status),
            processed_at=self._clock(),
        )
