from typing import Any, Dict
from fastapi import APIRouter, Depends
from app.core.payment_gateway import RazorpayGateway
from app.dependencies import get_payment_gateway
from app.schemas.payment import OrderCreate

router = APIRouter(prefix="/api/payment", tags=["payment"])

@router.post("/orders")
def create_order(order: OrderCreate, gateway: RazorpayGateway = Depends(get_payment_gateway)) -> Dict[str, Any]:
    return gateway.create_order(order.amount, order.currency)
