"""
Purchase order endpoints.

Creating an order schedules it on the workflow queue.
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List
import logging

from api.dependencies import get_purchase_order_service
from core.application.dtos.purchase_order_dto import CreatePurchaseOrderRequest, PurchaseOrderDTO
from core.application.services.purchase_order_service import PurchaseOrderService


logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=PurchaseOrderDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create purchase order",
)
async def create_purchase_order(
    request: CreatePurchaseOrderRequest,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    """
    Create a purchase order with a supplier.

    The order starts in `requires_payment_supplier` and is enqueued for the
    supplier payment step.
    """
    return await service.create_purchase_order(request)


@router.get(
    "",
    response_model=List[PurchaseOrderDTO],
    status_code=status.HTTP_200_OK,
    summary="List purchase orders",
)
async def list_purchase_orders(
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of orders to return"),
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    return await service.list_purchase_orders(limit=limit)


@router.get(
    "/{purchase_order_id}",
    response_model=PurchaseOrderDTO,
    status_code=status.HTTP_200_OK,
    summary="Get purchase order by ID",
)
async def get_purchase_order(
    purchase_order_id: int,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    return await service.get_purchase_order(purchase_order_id)
