"""Map a purchase order's status to the command that advances it."""

from typing import Callable, Dict
import logging

from core.application.interfaces import IBankService, ILogisticsService
from core.domain.entities import PurchaseOrder
from core.domain.enums import OrderStatus
from core.domain.repositories import EquipmentParametersRepository, PurchaseOrderRepository
from core.settings import get_app_settings

from .base import Command
from .logistics_payment import ProcessLogisticsPaymentCommand
from .noop import NoOpCommand
from .shipping_request import ProcessShippingRequestCommand
from .supplier_payment import ProcessSupplierPaymentCommand


logger = logging.getLogger(__name__)


def _default_company_id() -> str:
    return get_app_settings().company.company_id


def _default_bank_name() -> str:
    return get_app_settings().bank.bank_name


class QueueCommandFactory:
    """
    Builds the command for an order's current status.

    Statuses without a workflow step (waiting, terminal or unrecognized)
    map to a NoOpCommand. The factory is stateless apart from its collaborators
    and never raises for an unknown status.
    """

    def __init__(
        self,
        repository: PurchaseOrderRepository,
        bank_service: IBankService,
        logistics_service: ILogisticsService,
        equipment_repository: EquipmentParametersRepository,
        company_id_provider: Callable[[], str] = _default_company_id,
        bank_name_provider: Callable[[], str] = _default_bank_name,
    ) -> None:
        self._repository = repository
        self._bank_service = bank_service
        self._logistics_service = logistics_service
        self._equipment_repository = equipment_repository
        self._company_id_provider = company_id_provider
        self._bank_name_provider = bank_name_provider

        self._builders: Dict[OrderStatus, Callable[[PurchaseOrder], Command]] = {
            OrderStatus.REQUIRES_PAYMENT_TO_SUPPLIER: self._supplier_payment,
            OrderStatus.REQUIRES_DELIVERY: self._shipping_request,
            OrderStatus.REQUIRES_PAYMENT_TO_LOGISTICS: self._logistics_payment,
        }

    def create_command(self, purchase_order: PurchaseOrder) -> Command:
        """
        Select the workflow step for an order.

        Args:
            purchase_order: Order as last read from the repository

        Returns:
            Command bound to the order
        """
        status = OrderStatus.try_parse(purchase_order.status)
        builder = self._builders.get(status) if status is not None else None
        if builder is None:
            logger.debug(
                f"No workflow step for purchase order {purchase_order.id} in status {purchase_order.status}"
            )
            return NoOpCommand(purchase_order)
        return builder(purchase_order)

    def _supplier_payment(self, purchase_order: PurchaseOrder) -> Command:
        return ProcessSupplierPaymentCommand(
            purchase_order,
            self._bank_service,
            self._repository,
            to_bank_name=self._bank_name_provider(),
        )

    def _shipping_request(self, purchase_order: PurchaseOrder) -> Command:
        return ProcessShippingRequestCommand(
            purchase_order,
            self._logistics_service,
            self._repository,
            self._equipment_repository,
            company_id=self._company_id_provider(),
        )

    def _logistics_payment(self, purchase_order: PurchaseOrder) -> Command:
        return ProcessLogisticsPaymentCommand(
            purchase_order,
            self._bank_service,
            self._repository,
            to_bank_name=self._bank_name_provider(),
        )

