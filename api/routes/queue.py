"""
Workflow queue endpoints.

Observability and manual draining of the purchase order queue.
"""
from fastapi import APIRouter, Depends, status
import logging

from api.dependencies import get_purchase_order_queue
from core.utils.datetime import utc_now
from orchestration import PurchaseOrderQueue


logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="Queue status",
    description="Number of purchase orders waiting for a workflow step",
)
async def get_queue_status(queue: PurchaseOrderQueue = Depends(get_purchase_order_queue)):
    return {
        "queue_count": queue.get_queue_count(),
        "timestamp": utc_now().isoformat(),
    }


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Drain queue",
    description="Run one drain pass immediately instead of waiting for the driver",
)
async def process_queue(queue: PurchaseOrderQueue = Depends(get_purchase_order_queue)):
    """
    Process the queue once.

    **Returns:**
    - Queue count before and after the drain
    - Per-outcome counts of the drain
    """
    count_before = queue.get_queue_count()
    logger.info(f"Manual queue drain requested ({count_before} pending)")

    summary = await queue.process_queue()

    return {
        "count_before": count_before,
        "count_after": queue.get_queue_count(),
        "summary": summary.to_dict(),
        "processed_at": utc_now().isoformat(),
    }
