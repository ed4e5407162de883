# Settings package
from core.settings.modules import (
    AppSettings,
    QueueSettings,
    get_app_settings,
    get_queue_settings,
    reload_app_settings,
)

__all__ = [
    "get_app_settings",
    "get_queue_settings",
    "reload_app_settings",
    "AppSettings",
    "QueueSettings",
]
