from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from services.auth_service.models import User
from shared.config.database import get_db
from shared.security import get_current_user, require_admin

from .schemas import (
    OrderCreate,
    OrderDeliver,
    OrderPay,
    OrderResponse,
    OrderWithOwnerContact,
    OrderWithOwnerSummary,
)
from .service import OrderService

router = APIRouter(tags=["Orders"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)


@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "order", "status": "running"}


@router.post("/", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.create_order(db, payload, user.id)


@router.get("/", response_model=list[OrderWithOwnerSummary], dependencies=[Depends(require_admin)])
async def list_orders(db: AsyncSession = Depends(get_db)):
    return await OrderService.list_orders(db)


# Declared before /{order_id} so it is not captured as an id
@router.get("/my-orders", response_model=list[OrderResponse])
async def list_my_orders(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.list_my_orders(db, user.id)


@router.get("/{order_id}", response_model=OrderWithOwnerContact, dependencies=[Depends(get_current_user)])
async def get_order(order_id: str, db: AsyncSession = Depends(get_db)):
    return await OrderService.get_order(db, order_id)


@router.put("/{order_id}/pay", response_model=OrderResponse, dependencies=[Depends(get_current_user)])
async def mark_order_paid(order_id: str, payload: OrderPay, db: AsyncSession = Depends(get_db)):
    return await OrderService.mark_paid(db, order_id, payload)


@router.put("/{order_id}/deliver", response_model=OrderResponse, dependencies=[Depends(require_admin)])
async def mark_order_delivered(
    order_id: str,
    payload: Optional[OrderDeliver] = None,
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.mark_delivered(db, order_id, payload or OrderDeliver())
