from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.bank_settings import BankSettings
from core.settings.modules.company_settings import CompanySettings
from core.settings.modules.equipment_settings import EquipmentSettings
from core.settings.modules.logistics_settings import LogisticsSettings
from core.settings.modules.queue_settings import QueueSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    queue: QueueSettings
    company: CompanySettings
    bank: BankSettings
    logistics: LogisticsSettings
    equipment: EquipmentSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        queue=QueueSettings(),
        company=CompanySettings(),
        bank=BankSettings(),
        logistics=LogisticsSettings(),
        equipment=EquipmentSettings(),
    )


def reload_app_settings() -> AppSettings:
    """Drop the cached settings and re-read the environment."""
    get_app_settings.cache_clear()
    return get_app_settings()


def get_queue_settings() -> QueueSettings:
    return get_app_settings().queue
