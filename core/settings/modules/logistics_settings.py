from __future__ import annotations

from typing import Optional

from pydantic import Field

from core.settings.base import ScreenProducerBaseSettings


class LogisticsSettings(ScreenProducerBaseSettings):
    """Bulk logistics provider settings."""

    base_url: Optional[str] = Field(None, alias="BULK_LOGISTICS_BASE_URL")
    timeout_seconds: float = Field(30.0, gt=0, alias="BULK_LOGISTICS_TIMEOUT_SECONDS")
