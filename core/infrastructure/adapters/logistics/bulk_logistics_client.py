"""
Bulk Logistics Client.

Requests supplier pickups from the bulk logistics provider.
"""
from decimal import Decimal, InvalidOperation
from typing import List
import asyncio
import logging

import aiohttp

from core.application.dtos.pickup_dto import PickupRequestItem, PickupRequestResult
from core.application.interfaces import ILogisticsService
from core.domain.exceptions import LogisticsServiceError, SystemConfigurationError
from core.settings.modules.logistics_settings import LogisticsSettings


logger = logging.getLogger(__name__)


class BulkLogisticsClient(ILogisticsService):
    """HTTP implementation of the logistics service."""

    def __init__(self, settings: LogisticsSettings):
        self.settings = settings
        self.timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)
        logger.info("BulkLogisticsClient initialized")

    @property
    def pickup_url(self) -> str:
        if not self.settings.base_url:
            raise SystemConfigurationError("Bulk logistics URL not configured")
        return f"{self.settings.base_url.rstrip('/')}/pickup-request"

    async def request_pickup(
        self,
        origin_company_id: str,
        destination_company_id: str,
        original_external_order_id: str,
        items: List[PickupRequestItem]
    ) -> PickupRequestResult:
        payload = {
            "originCompany": origin_company_id,
            "destinationCompany": destination_company_id,
            "originalExternalOrderId": original_external_order_id,
            "items": [
                {
                    "itemName": item.name,
                    "quantity": item.quantity,
                    "measurementType": item.measurement_type,
                }
                for item in items
            ],
        }

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(self.pickup_url, json=payload) as response:
                    if response.status >= 400:
                        error_text = await response.text()
                        raise LogisticsServiceError(f"Pickup request failed: {response.status} - {error_text}")
                    body = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise LogisticsServiceError(f"Bulk logistics service unavailable: {e}") from e
        except asyncio.TimeoutError as e:
            raise LogisticsServiceError("Bulk logistics service timeout") from e
        except ValueError as e:
            raise LogisticsServiceError(f"Invalid response format from bulk logistics service: {e}") from e

        if not isinstance(body, dict) or body.get("pickupRequestId") is None:
            raise LogisticsServiceError("Invalid response from bulk logistics service - missing pickup request ID")

        try:
            price = Decimal(str(body.get("cost", "0")))
        except InvalidOperation as e:
            raise LogisticsServiceError(f"Invalid shipping cost: {body.get('cost')!r}") from e

        result = PickupRequestResult(
            pickup_request_id=str(body["pickupRequestId"]),
            bank_account_number=str(body.get("accountNumber") or ""),
            price=price,
        )
        logger.info(
            f"Pickup requested for supplier order {original_external_order_id}: "
            f"shipment {result.pickup_request_id}, price {result.price}"
        )
        return result
