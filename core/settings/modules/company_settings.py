from __future__ import annotations

from pydantic import Field

from core.settings.base import ScreenProducerBaseSettings


class CompanySettings(ScreenProducerBaseSettings):
    """Identity of this company towards suppliers and logistics providers."""

    company_id: str = Field("screen-supplier", alias="COMPANY_ID")
    company_name: str = Field("Screen Supplier", alias="COMPANY_NAME")
