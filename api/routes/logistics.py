"""
Logistics provider callbacks.
"""
from fastapi import APIRouter, Depends, status

from api.dependencies import get_purchase_order_service
from core.application.dtos.purchase_order_dto import DropoffRequest, DropoffResult
from core.application.services.purchase_order_service import PurchaseOrderService


router = APIRouter()


@router.post(
    "/dropoff",
    response_model=DropoffResult,
    status_code=status.HTTP_200_OK,
    summary="Record a delivery",
    description="Called by the logistics provider when goods for a shipment arrive",
)
async def dropoff(
    request: DropoffRequest,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    return await service.handle_dropoff(request.shipment_id, request.quantity)
