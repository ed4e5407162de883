# Settings modules
from .app_settings import AppSettings, get_app_settings, get_queue_settings, reload_app_settings
from .bank_settings import BankSettings
from .company_settings import CompanySettings
from .equipment_settings import EquipmentSettings
from .logistics_settings import LogisticsSettings
from .queue_settings import QueueSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "get_queue_settings",
    "reload_app_settings",
    "BankSettings",
    "CompanySettings",
    "EquipmentSettings",
    "LogisticsSettings",
    "QueueSettings",
]
