"""Application layer interfaces."""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List

from core.application.dtos.pickup_dto import PickupRequestItem, PickupRequestResult


class IBankService(ABC):
    """
    Interface for payment operations.

    This interface defines the contract for moving money from the company
    account to another bank account, allowing the workflow to pay suppliers
    and logistics providers without depending on a specific bank.
    """

    @abstractmethod
    async def make_payment(
        self,
        to_account_number: str,
        to_bank_name: str,
        amount: Decimal,
        description: str
    ) -> bool:
        """
        Transfer money from the company account.

        Args:
            to_account_number: Recipient account
            to_bank_name: Recipient bank
            amount: Amount to transfer
            description: Payment memo

        Returns:
            True if the bank confirmed the payment

        Raises:
            BusinessException: On network errors, timeouts or rejected payments
        """
        pass


class ILogisticsService(ABC):
    """
    Interface for logistics provider operations.
    """

    @abstractmethod
    async def request_pickup(
        self,
        origin_company_id: str,
        destination_company_id: str,
        original_external_order_id: str,
        items: List[PickupRequestItem]
    ) -> PickupRequestResult:
        """
        Ask the logistics provider to collect goods from a supplier.

        Args:
            origin_company_id: Supplier to collect from
            destination_company_id: Company to deliver to
            original_external_order_id: Supplier order reference
            items: Cargo list

        Returns:
            Shipment id, provider bank account and shipping price

        Raises:
            LogisticsServiceError: If the request fails
        """
        pass


__all__ = ["IBankService", "ILogisticsService"]
