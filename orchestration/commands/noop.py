"""Command for statuses that need no workflow action."""

from core.domain.entities import PurchaseOrder

from .base import Command, CommandResult


class NoOpCommand(Command):
    """Waiting, terminal and unrecognized statuses."""

    name = "noop"

    def __init__(self, purchase_order: PurchaseOrder) -> None:
        super().__init__(purchase_order)
        self.status = purchase_order.status

    async def _execute(self) -> CommandResult:
        return CommandResult.succeeded()
