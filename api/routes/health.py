"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from fastapi import APIRouter, Depends
import platform

from api.dependencies import get_queue_driver
from core.utils.datetime import utc_now
from orchestration import QueueProcessingDriver


router = APIRouter()


@router.get("/health")
async def health_check(driver: QueueProcessingDriver = Depends(get_queue_driver)):
    """
    Health check endpoint.

    Returns system health status and whether the queue driver is running.
    """
    return {
        "status": "healthy",
        "timestamp": utc_now().isoformat(),
        "service": "screen-producer",
        "version": "1.0.0",
        "python_version": platform.python_version(),
        "queue_driver_running": driver.is_running,
    }
