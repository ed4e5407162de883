"""Command base - CommandResult and the Command contract."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import logging

from core.domain.entities import PurchaseOrder
from core.domain.exceptions import BusinessException


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one workflow step."""

    success: bool
    should_retry: bool = False
    error_message: Optional[str] = None

    @classmethod
    def succeeded(cls) -> "CommandResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error_message: str, should_retry: bool = True) -> "CommandResult":
        return cls(success=False, should_retry=should_retry, error_message=error_message)

    @classmethod
    def failed_no_retry(cls, error_message: str) -> "CommandResult":
        return cls.failed(error_message, should_retry=False)


class Command(ABC):
    """
    One workflow step bound to one purchase order.

    A command performs a single external action and, on success, advances the
    persisted order. It never touches queue state; it only reports an outcome.
    """

    name = "command"

    def __init__(self, purchase_order: PurchaseOrder) -> None:
        self.purchase_order = purchase_order

    async def execute(self) -> CommandResult:
        """Run the step. Exceptions are reported as failures, never raised."""
        try:
            return await self._execute()
        except BusinessException as exc:
            logger.error(
                f"{self.name} failed for purchase order {self.purchase_order.id} "
                f"[{exc.error_code}]: {exc}"
            )
            return CommandResult.failed(str(exc), should_retry=exc.retryable)
        except Exception as exc:
            logger.error(
                f"Error in {self.name} for purchase order {self.purchase_order.id}: {exc}",
                exc_info=True,
            )
            return CommandResult.failed(str(exc) or type(exc).__name__)

    @abstractmethod
    async def _execute(self) -> CommandResult:
        ...
