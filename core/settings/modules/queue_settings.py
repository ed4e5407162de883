from __future__ import annotations

from pydantic import Field

from core.settings.base import ScreenProducerBaseSettings


class QueueSettings(ScreenProducerBaseSettings):
    """
    Purchase order queue settings.
    Read on every drain, so changes apply without a restart.
    """

    enable_queue_processing: bool = Field(True, alias="QUEUE_ENABLE_PROCESSING")
    processing_interval_seconds: float = Field(30.0, gt=0, alias="QUEUE_PROCESSING_INTERVAL_SECONDS")
    max_retries: int = Field(3, ge=0, alias="QUEUE_MAX_RETRIES")
    max_concurrency: int = Field(1, ge=1, alias="QUEUE_MAX_CONCURRENCY")
