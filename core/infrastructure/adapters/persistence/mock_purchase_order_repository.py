"""
Mock Purchase Order Repository Implementation.

This is an in-memory implementation for testing and demos.
Reads return copies, so callers never share state with the store.
"""
from copy import deepcopy
from datetime import datetime
from decimal import Decimal
from itertools import count
from typing import Dict, List, Optional, Sequence
import logging

from core.domain.entities import EquipmentParameters, PurchaseOrder, RawMaterial
from core.domain.enums import OrderStatus
from core.domain.repositories import EquipmentParametersRepository, PurchaseOrderRepository


logger = logging.getLogger(__name__)


class MockPurchaseOrderRepository(PurchaseOrderRepository):
    """
    In-memory implementation of PurchaseOrderRepository.

    Stores purchase orders in a dictionary keyed by id.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[int, PurchaseOrder] = {}
        self._materials: Dict[str, RawMaterial] = {}
        self._ids = count(1)
        self._material_ids = count(1)
        logger.info("MockPurchaseOrderRepository initialized (in-memory storage)")

    def add(self, order: PurchaseOrder) -> PurchaseOrder:
        """Store a fully built order as-is (for demo/testing)."""
        self._storage[order.id] = deepcopy(order)
        return order

    async def create(
        self,
        order_id: int,
        quantity: int,
        unit_price: Decimal,
        bank_account_number: str,
        origin: str,
        order_date: datetime,
        raw_material_name: Optional[str] = None,
        is_equipment_order: bool = False,
    ) -> PurchaseOrder:
        material = None
        if not is_equipment_order and raw_material_name:
            material = self._materials.get(raw_material_name)
            if material is None:
                material = RawMaterial(id=next(self._material_ids), name=raw_material_name)
                self._materials[raw_material_name] = material

        purchase_order_id = next(self._ids)
        while purchase_order_id in self._storage:
            purchase_order_id = next(self._ids)

        order = PurchaseOrder(
            id=purchase_order_id,
            order_id=order_id,
            quantity=quantity,
            unit_price=Decimal(unit_price),
            bank_account_number=bank_account_number,
            origin=origin,
            order_date=order_date,
            is_equipment_order=is_equipment_order,
            raw_material=material,
        )
        self._storage[order.id] = order
        logger.info(f"✅ Purchase order saved to mock repository: {order.id} (supplier order {order_id})")
        return deepcopy(order)

    async def find_by_id(self, purchase_order_id: int) -> Optional[PurchaseOrder]:
        order = self._storage.get(purchase_order_id)
        if order is None:
            logger.info(f"Purchase order not found in mock repository: {purchase_order_id}")
            return None
        return deepcopy(order)

    async def find_by_shipment_id(self, shipment_id: str) -> Optional[PurchaseOrder]:
        for order in self._storage.values():
            if order.shipment_id == shipment_id:
                return deepcopy(order)
        return None

    async def find_by_statuses(self, statuses: Sequence[OrderStatus]) -> List[PurchaseOrder]:
        wanted = set(statuses)
        return [deepcopy(order) for order in self._storage.values() if order.status in wanted]

    async def find_all(self, limit: int = 100) -> List[PurchaseOrder]:
        orders = sorted(self._storage.values(), key=lambda o: (o.order_date, o.id), reverse=True)
        return [deepcopy(order) for order in orders[:limit]]

    async def update_status(self, purchase_order_id: int, status: OrderStatus) -> bool:
        order = self._storage.get(purchase_order_id)
        if order is None:
            logger.warning(f"⚠️ Purchase order not found for status update: {purchase_order_id}")
            return False
        order.status = OrderStatus(status)
        return True

    async def update_shipment_id(self, purchase_order_id: int, shipment_id: str) -> bool:
        order = self._storage.get(purchase_order_id)
        if order is None:
            return False
        order.shipment_id = shipment_id
        return True

    async def update_shipping_details(
        self, purchase_order_id: int, bank_account: str, price: Decimal
    ) -> bool:
        order = self._storage.get(purchase_order_id)
        if order is None:
            return False
        order.shipper_bank_account = bank_account
        order.order_shipping_price = Decimal(price)
        return True

    async def update_delivery_quantity(self, purchase_order_id: int, delivered_quantity: int) -> bool:
        order = self._storage.get(purchase_order_id)
        if order is None:
            return False
        order.quantity_delivered += delivered_quantity
        if order.quantity_delivered >= order.quantity:
            order.status = OrderStatus.DELIVERED
        return True

    async def delete(self, purchase_order_id: int) -> None:
        """
        Delete purchase order from in-memory storage.

        Args:
            purchase_order_id: Purchase order id to delete
        """
        if self._storage.pop(purchase_order_id, None) is not None:
            logger.info(f"✅ Purchase order deleted from mock repository: {purchase_order_id}")
        else:
            logger.warning(f"⚠️ Purchase order not found for deletion: {purchase_order_id}")

    def get_all(self) -> List[PurchaseOrder]:
        """Get all purchase orders (for demo/testing)."""
        return [deepcopy(order) for order in self._storage.values()]

    def clear(self) -> None:
        """Clear all purchase orders (for demo/testing)."""
        self._storage.clear()
        logger.info("Mock repository cleared")


class MockEquipmentParametersRepository(EquipmentParametersRepository):
    """In-memory equipment parameters."""

    def __init__(self, parameters: Optional[EquipmentParameters] = None):
        self.parameters = parameters

    async def get_parameters(self) -> Optional[EquipmentParameters]:
        return self.parameters

    async def save_parameters(self, parameters: EquipmentParameters) -> None:
        self.parameters = parameters
