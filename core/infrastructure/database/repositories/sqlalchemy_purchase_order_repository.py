"""
SQLAlchemy Purchase Order Repository Implementation.

Implements PurchaseOrderRepository using SQLAlchemy async sessions.
Each call opens its own session and commits before returning.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence, Union
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.entities import EquipmentParameters, PurchaseOrder, RawMaterial
from core.domain.enums import OrderStatus
from core.domain.repositories import EquipmentParametersRepository, PurchaseOrderRepository
from core.infrastructure.database.models import (
    EquipmentParametersModel,
    PurchaseOrderModel,
    RawMaterialModel,
)


logger = logging.getLogger(__name__)


def _parse_status(value: str) -> Union[OrderStatus, str]:
    try:
        return OrderStatus(value)
    except ValueError:
        logger.warning(f"Unrecognized purchase order status in storage: {value!r}")
        return value


class SQLAlchemyPurchaseOrderRepository(PurchaseOrderRepository):
    """
    SQLAlchemy implementation of PurchaseOrderRepository.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

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
        async with self._session_factory() as session:
            material = None
            if not is_equipment_order and raw_material_name:
                material = await self._get_or_create_material(session, raw_material_name)

            model = PurchaseOrderModel(
                order_id=order_id,
                quantity=quantity,
                quantity_delivered=0,
                order_date=order_date,
                unit_price=unit_price,
                seller_bank_account=bank_account_number,
                origin=origin,
                order_shipping_price=Decimal("0"),
                status=OrderStatus.REQUIRES_PAYMENT_TO_SUPPLIER.value,
                equipment_order=is_equipment_order,
                raw_material=material,
            )
            session.add(model)
            await session.commit()

            logger.info(f"✅ Created purchase order {model.id} (supplier order {order_id})")
            return self._to_domain_entity(model)

    async def find_by_id(self, purchase_order_id: int) -> Optional[PurchaseOrder]:
        async with self._session_factory() as session:
            model = await session.get(PurchaseOrderModel, purchase_order_id)
            if model is None:
                logger.info(f"Purchase order not found: {purchase_order_id}")
                return None
            return self._to_domain_entity(model)

    async def find_by_shipment_id(self, shipment_id: str) -> Optional[PurchaseOrder]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(PurchaseOrderModel).where(PurchaseOrderModel.shipment_id == shipment_id)
            )
            model = result.scalars().first()
            return self._to_domain_entity(model) if model else None

    async def find_by_statuses(self, statuses: Sequence[OrderStatus]) -> List[PurchaseOrder]:
        values = [OrderStatus(status).value for status in statuses]
        async with self._session_factory() as session:
            result = await session.execute(
                select(PurchaseOrderModel)
                .where(PurchaseOrderModel.status.in_(values))
                .order_by(PurchaseOrderModel.id)
            )
            return [self._to_domain_entity(model) for model in result.scalars().all()]

    async def find_all(self, limit: int = 100) -> List[PurchaseOrder]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(PurchaseOrderModel)
                .order_by(PurchaseOrderModel.order_date.desc(), PurchaseOrderModel.id.desc())
                .limit(limit)
            )
            return [self._to_domain_entity(model) for model in result.scalars().all()]

    async def update_status(self, purchase_order_id: int, status: OrderStatus) -> bool:
        async with self._session_factory() as session:
            model = await session.get(PurchaseOrderModel, purchase_order_id)
            if model is None:
                logger.warning(f"Cannot update status, purchase order {purchase_order_id} not found")
                return False
            model.status = OrderStatus(status).value
            await session.commit()
            return True

    async def update_shipment_id(self, purchase_order_id: int, shipment_id: str) -> bool:
        async with self._session_factory() as session:
            model = await session.get(PurchaseOrderModel, purchase_order_id)
            if model is None:
                return False
            model.shipment_id = shipment_id
            await session.commit()
            return True

    async def update_shipping_details(
        self, purchase_order_id: int, bank_account: str, price: Decimal
    ) -> bool:
        async with self._session_factory() as session:
            model = await session.get(PurchaseOrderModel, purchase_order_id)
            if model is None:
                return False
            model.shipper_bank_account = bank_account
            model.order_shipping_price = price
            await session.commit()
            return True

    async def update_delivery_quantity(self, purchase_order_id: int, delivered_quantity: int) -> bool:
        async with self._session_factory() as session:
            model = await session.get(PurchaseOrderModel, purchase_order_id)
            if model is None:
                return False
            model.quantity_delivered += delivered_quantity
            if model.quantity_delivered >= model.quantity:
                model.status = OrderStatus.DELIVERED.value
                logger.info(f"✅ Purchase order {purchase_order_id} fully delivered")
            await session.commit()
            return True

    @staticmethod
    async def _get_or_create_material(session: AsyncSession, name: str) -> RawMaterialModel:
        result = await session.execute(select(RawMaterialModel).where(RawMaterialModel.name == name))
        material = result.scalars().first()
        if material is None:
            material = RawMaterialModel(name=name, quantity=0)
            session.add(material)
            await session.flush()
        return material

    @staticmethod
    def _to_domain_entity(model: PurchaseOrderModel) -> PurchaseOrder:
        """
        Convert database model to domain entity.

        Args:
            model: PurchaseOrderModel instance

        Returns:
            PurchaseOrder domain entity
        """
        raw_material = None
        if model.raw_material is not None:
            raw_material = RawMaterial(id=model.raw_material.id, name=model.raw_material.name)

        return PurchaseOrder(
            id=model.id,
            order_id=model.order_id,
            quantity=model.quantity,
            quantity_delivered=model.quantity_delivered,
            unit_price=Decimal(str(model.unit_price)),
            bank_account_number=model.seller_bank_account,
            origin=model.origin,
            order_date=model.order_date,
            status=_parse_status(model.status),
            is_equipment_order=bool(model.equipment_order),
            raw_material=raw_material,
            shipment_id=model.shipment_id,
            shipper_bank_account=model.shipper_bank_account,
            order_shipping_price=Decimal(str(model.order_shipping_price or 0)),
        )


class SQLAlchemyEquipmentParametersRepository(EquipmentParametersRepository):
    """Reads the most recently declared equipment parameters."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_parameters(self) -> Optional[EquipmentParameters]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(EquipmentParametersModel).order_by(EquipmentParametersModel.id.desc()).limit(1)
            )
            model = result.scalars().first()
            if model is None:
                return None
            return EquipmentParameters(
                input_sand_kg=model.input_sand_kg,
                input_copper_kg=model.input_copper_kg,
                output_screens_per_day=model.output_screens_day,
                equipment_weight=model.equipment_weight,
            )

    async def save_parameters(self, parameters: EquipmentParameters) -> None:
        """Declare the parameters of the machine model being purchased."""
        async with self._session_factory() as session:
            session.add(
                EquipmentParametersModel(
                    input_sand_kg=parameters.input_sand_kg,
                    input_copper_kg=parameters.input_copper_kg,
                    output_screens_day=parameters.output_screens_per_day,
                    equipment_weight=parameters.equipment_weight,
                )
            )
            await session.commit()
