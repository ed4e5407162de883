"""
Commercial Bank Client.

Makes payments from the company account via the commercial bank HTTP API.
"""
from decimal import Decimal
from typing import Union
import asyncio
import logging

import aiohttp

from core.application.interfaces import IBankService
from core.domain.exceptions import (
    BankServiceError,
    InsufficientFundsError,
    InvalidRequestError,
    SystemConfigurationError,
)
from core.settings.modules.bank_settings import BankSettings


logger = logging.getLogger(__name__)


def _json_amount(amount: Decimal) -> Union[int, float]:
    """The bank API takes plain JSON numbers."""
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


class CommercialBankClient(IBankService):
    """
    HTTP implementation of the payment service.

    Sends one POST /transaction per payment.
    """

    def __init__(self, settings: BankSettings):
        """
        Initialize commercial bank client.

        Args:
            settings: Bank settings with base URL and timeout
        """
        self.settings = settings
        self.timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)
        logger.info("CommercialBankClient initialized")

    @property
    def transaction_url(self) -> str:
        if not self.settings.base_url:
            raise SystemConfigurationError("Commercial bank URL not configured")
        return f"{self.settings.base_url.rstrip('/')}/transaction"

    async def make_payment(
        self,
        to_account_number: str,
        to_bank_name: str,
        amount: Decimal,
        description: str
    ) -> bool:
        """
        Transfer money to another account.

        Raises:
            InvalidRequestError: If the amount is not positive
            InsufficientFundsError: If the bank reports insufficient funds
            BankServiceError: On any other bank or transport failure
        """
        amount = Decimal(amount)
        if amount <= 0:
            raise InvalidRequestError(f"Payment amount must be positive, got {amount}")

        payload = {
            "to_account_number": to_account_number,
            "to_bank_name": to_bank_name,
            "amount": _json_amount(amount),
            "description": description,
        }

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(self.transaction_url, json=payload) as response:
                    if response.status >= 400:
                        error_text = await response.text()
                        if response.status == 400 and "insufficient" in error_text.lower():
                            raise InsufficientFundsError(amount)
                        raise BankServiceError(f"Payment failed: {response.status} - {error_text}")

                    body = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise BankServiceError(f"Bank service unavailable for payment to {to_account_number}: {e}") from e
        except asyncio.TimeoutError as e:
            raise BankServiceError(f"Bank service timeout during payment to {to_account_number}") from e
        except ValueError as e:
            raise BankServiceError(f"Invalid response format from bank: {e}") from e

        success = isinstance(body, dict) and body.get("success") is True
        if success:
            logger.info(
                f"Payment of {amount} to {to_account_number} accepted "
                f"(transaction {body.get('transaction_number')})"
            )
        else:
            logger.warning(f"Payment of {amount} to {to_account_number} was not confirmed: {body}")
        return success
