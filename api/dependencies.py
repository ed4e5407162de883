"""
FastAPI Dependencies.

Provides dependency injection for the workflow engine and services.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.interfaces import IBankService, ILogisticsService
from core.application.services.purchase_order_service import PurchaseOrderService
from core.domain.entities import EquipmentParameters
from core.domain.repositories import EquipmentParametersRepository, PurchaseOrderRepository
from core.infrastructure.adapters.bank import CommercialBankClient
from core.infrastructure.adapters.logistics import BulkLogisticsClient
from core.infrastructure.adapters.persistence import (
    MockEquipmentParametersRepository,
    MockPurchaseOrderRepository,
)
from core.infrastructure.database.repositories import (
    SQLAlchemyEquipmentParametersRepository,
    SQLAlchemyPurchaseOrderRepository,
)
from core.settings import get_app_settings
from orchestration import (
    InMemoryEventBus,
    PurchaseOrderQueue,
    QueueCommandFactory,
    QueueProcessingDriver,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_purchase_order_repository: Optional[PurchaseOrderRepository] = None
_equipment_repository: Optional[EquipmentParametersRepository] = None
_bank_service: Optional[IBankService] = None
_logistics_service: Optional[ILogisticsService] = None
_event_bus: Optional[InMemoryEventBus] = None
_purchase_order_queue: Optional[PurchaseOrderQueue] = None
_queue_driver: Optional[QueueProcessingDriver] = None
_purchase_order_service: Optional[PurchaseOrderService] = None


def use_database(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Back the repositories with the database instead of in-memory storage."""
    global _purchase_order_repository, _equipment_repository

    _purchase_order_repository = SQLAlchemyPurchaseOrderRepository(session_factory)
    _equipment_repository = SQLAlchemyEquipmentParametersRepository(session_factory)
    logger.info("Using SQLAlchemy repositories")


async def seed_equipment_parameters() -> EquipmentParameters:
    """Declare the configured machine parameters unless storage already has some."""
    repository = get_equipment_repository()
    existing = await repository.get_parameters()
    if existing is not None:
        return existing

    parameters = get_app_settings().equipment.to_parameters()
    await repository.save_parameters(parameters)
    logger.info(f"✅ Seeded equipment parameters (weight {parameters.equipment_weight})")
    return parameters


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_purchase_order_repository() -> PurchaseOrderRepository:
    global _purchase_order_repository
    if _purchase_order_repository is None:
        _purchase_order_repository = MockPurchaseOrderRepository()
        logger.info("Created MockPurchaseOrderRepository instance")
    return _purchase_order_repository


def get_equipment_repository() -> EquipmentParametersRepository:
    global _equipment_repository
    if _equipment_repository is None:
        _equipment_repository = MockEquipmentParametersRepository(get_app_settings().equipment.to_parameters())
        logger.info("Created MockEquipmentParametersRepository instance")
    return _equipment_repository


def get_bank_service() -> IBankService:
    global _bank_service
    if _bank_service is None:
        _bank_service = CommercialBankClient(get_app_settings().bank)
    return _bank_service


def get_logistics_service() -> ILogisticsService:
    global _logistics_service
    if _logistics_service is None:
        _logistics_service = BulkLogisticsClient(get_app_settings().logistics)
    return _logistics_service


def get_event_bus() -> InMemoryEventBus:
    global _event_bus
    if _event_bus is None:
        _event_bus = InMemoryEventBus()
    return _event_bus


def get_purchase_order_queue() -> PurchaseOrderQueue:
    global _purchase_order_queue

    if _purchase_order_queue is None:
        repository = get_purchase_order_repository()
        command_factory = QueueCommandFactory(
            repository=repository,
            bank_service=get_bank_service(),
            logistics_service=get_logistics_service(),
            equipment_repository=get_equipment_repository(),
        )
        _purchase_order_queue = PurchaseOrderQueue(
            repository=repository,
            command_factory=command_factory,
            event_bus=get_event_bus(),
        )
        logger.info("Created PurchaseOrderQueue instance")

    return _purchase_order_queue


def get_queue_driver() -> QueueProcessingDriver:
    global _queue_driver
    if _queue_driver is None:
        _queue_driver = QueueProcessingDriver(get_purchase_order_queue())
    return _queue_driver


def get_purchase_order_service() -> PurchaseOrderService:
    global _purchase_order_service

    if _purchase_order_service is None:
        _purchase_order_service = PurchaseOrderService(
            repository=get_purchase_order_repository(),
            enqueue=get_purchase_order_queue().enqueue,
        )
        logger.info("Created PurchaseOrderService instance")

    return _purchase_order_service


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _purchase_order_repository, _equipment_repository, _bank_service, _logistics_service
    global _event_bus, _purchase_order_queue, _queue_driver, _purchase_order_service

    _purchase_order_repository = None
    _equipment_repository = None
    _bank_service = None
    _logistics_service = None
    _event_bus = None
    _purchase_order_queue = None
    _queue_driver = None
    _purchase_order_service = None

    logger.info("Dependencies reset")
