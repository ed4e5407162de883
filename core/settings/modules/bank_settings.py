from __future__ import annotations

from typing import Optional

from pydantic import Field

from core.settings.base import ScreenProducerBaseSettings


class BankSettings(ScreenProducerBaseSettings):
    """
    Commercial bank settings.
    Loaded from .env file with exact variable name matching.
    """

    base_url: Optional[str] = Field(None, alias="COMMERCIAL_BANK_BASE_URL")
    bank_name: str = Field("commercial-bank", alias="COMMERCIAL_BANK_NAME")
    timeout_seconds: float = Field(30.0, gt=0, alias="COMMERCIAL_BANK_TIMEOUT_SECONDS")
