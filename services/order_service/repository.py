from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from .models import Order


class OrderRepository:

    @staticmethod
    def add(db: AsyncSession, order: Order) -> Order:
        """Stages a new order in the caller's transaction; the caller commits."""
        db.add(order)
        return order

    @staticmethod
    async def save(db: AsyncSession, order: Order) -> Order:
        db.add(order)
        await db.commit()
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str, with_owner: bool = False) -> Optional[Order]:
        stmt = select(Order).where(Order.id == order_id)
        if with_owner:
            stmt = stmt.options(selectinload(Order.user))
        result = await db.execute(stmt)
        return result.scalars().first()

    @staticmethod
    async def list_orders(db: AsyncSession):
        stmt = select(Order).options(selectinload(Order.user)).order_by(Order.created_at)
        result = await db.execute(stmt)
        return result.scalars().all()

    @staticmethod
    async def list_orders_for_user(db: AsyncSession, user_id: str):
        stmt = select(Order).where(Order.user_id == user_id).order_by(Order.created_at)
        result = await db.execute(stmt)
        return result.scalars().all()
