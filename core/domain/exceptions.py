"""
Business exceptions.

Every exception carries an error code and whether retrying the failed
operation can succeed later.
"""
from decimal import Decimal
from typing import Optional


class BusinessException(Exception):
    """Base class for all business errors."""

    retryable: bool = True

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class PurchaseOrderNotFoundError(BusinessException):
    retryable = False

    def __init__(self, reference: object) -> None:
        super().__init__("ORDER_NOT_FOUND", f"Purchase order {reference} not found")


class InvalidPurchaseOrderError(BusinessException):
    """Order data is malformed; retrying cannot fix it."""

    retryable = False

    def __init__(self, purchase_order_id: Optional[int], reason: str) -> None:
        super().__init__(
            "INVALID_PURCHASE_ORDER",
            f"Purchase order {purchase_order_id} is invalid: {reason}",
        )
        self.purchase_order_id = purchase_order_id


class InvalidOrderStateError(BusinessException):
    retryable = False

    def __init__(self, reference: object, current_state: str, required_state: str) -> None:
        super().__init__(
            "INVALID_ORDER_STATE",
            f"Order {reference} is in state '{current_state}', but requires '{required_state}'",
        )


class InvalidRequestError(BusinessException):
    retryable = False

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_REQUEST", message)


class SystemConfigurationError(BusinessException):
    retryable = False

    def __init__(self, message: str) -> None:
        super().__init__("SYSTEM_CONFIGURATION_ERROR", message)


class InsufficientFundsError(BusinessException):
    """Company account cannot cover a payment. Funds may arrive later."""

    def __init__(self, required: Decimal) -> None:
        super().__init__("INSUFFICIENT_FUNDS", f"Insufficient funds. Required: {required}")
        self.required = required


class ExternalServiceError(BusinessException):
    """A remote collaborator failed or was unreachable."""

    def __init__(self, service_name: str, message: str) -> None:
        super().__init__("EXTERNAL_SERVICE_ERROR", f"{service_name}: {message}")
        self.service_name = service_name


class BankServiceError(ExternalServiceError):
    def __init__(self, message: str) -> None:
        super().__init__("commercial-bank", message)


class LogisticsServiceError(ExternalServiceError):
    def __init__(self, message: str) -> None:
        super().__init__("bulk-logistics", message)
