"""Repository interfaces for the PurchaseOrder aggregate."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence

from ..entities import EquipmentParameters, PurchaseOrder
from ..enums import OrderStatus


class PurchaseOrderRepository(ABC):
    """Abstract repository for purchase order persistence.

    Every mutation is committed on its own; there is no cross-call transaction.
    """

    @abstractmethod
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
        """Persist a new purchase order in ``requires_payment_supplier``.

        Args:
            order_id: Supplier's external order reference
            quantity: Quantity ordered
            unit_price: Price per unit
            bank_account_number: Seller bank account
            origin: Supplier identifier
            order_date: Creation timestamp
            raw_material_name: Material kind, for material orders
            is_equipment_order: True for equipment orders

        Returns:
            The stored PurchaseOrder
        """
        pass

    @abstractmethod
    async def find_by_id(self, purchase_order_id: int) -> Optional[PurchaseOrder]:
        """Retrieve a purchase order by primary key.

        Args:
            purchase_order_id: Internal id

        Returns:
            PurchaseOrder if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_shipment_id(self, shipment_id: str) -> Optional[PurchaseOrder]:
        """Retrieve the purchase order a shipment belongs to."""
        pass

    @abstractmethod
    async def find_by_statuses(self, statuses: Sequence[OrderStatus]) -> List[PurchaseOrder]:
        """List purchase orders whose status is in ``statuses``."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[PurchaseOrder]:
        """List purchase orders, newest first."""
        pass

    @abstractmethod
    async def update_status(self, purchase_order_id: int, status: OrderStatus) -> bool:
        """Set the workflow status.

        Returns:
            False if the order does not exist
        """
        pass

    @abstractmethod
    async def update_shipment_id(self, purchase_order_id: int, shipment_id: str) -> bool:
        """Record the shipment id returned by the logistics provider."""
        pass

    @abstractmethod
    async def update_shipping_details(
        self, purchase_order_id: int, bank_account: str, price: Decimal
    ) -> bool:
        """Record the logistics provider's bank account and shipping price."""
        pass

    @abstractmethod
    async def update_delivery_quantity(self, purchase_order_id: int, delivered_quantity: int) -> bool:
        """Add a delivered quantity; marks the order delivered once fully received."""
        pass


class EquipmentParametersRepository(ABC):
    """Access to the declared parameters of the machine model being purchased."""

    @abstractmethod
    async def get_parameters(self) -> Optional[EquipmentParameters]:
        """Return the current equipment parameters, or None if not initialised."""
        pass

    @abstractmethod
    async def save_parameters(self, parameters: EquipmentParameters) -> None:
        """Declare new equipment parameters; later reads return them."""
        pass
