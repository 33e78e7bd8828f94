from datetime import timedelta

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from services.product_service.repository import ProductRepository
from shared.config.database import as_utc, utcnow
from shared.errors import NotFoundError, ValidationError
from shared.observability.metrics import (
    ecomm_order_items_per_order,
    ecomm_order_transitions_total,
    ecomm_orders_created_total,
)

from .models import Order, OrderItem
from .repository import OrderRepository
from .schemas import OrderCreate, OrderDeliver, OrderPay

logger = structlog.get_logger(__name__)

TAX_PRICE = 0.0
DELIVERY_DELAY = timedelta(days=1)


class OrderService:

    @staticmethod
    async def create_order(db: AsyncSession, data: OrderCreate, user_id: str) -> Order:
        if not data.cart_items:
            raise ValidationError("No order items.")

        # A supplied total of 0 counts as absent
        total_price = data.total_price or data.items_price + data.shipping_price + TAX_PRICE

        order = Order(
            user_id=user_id,
            order_items=[
                OrderItem(
                    position=position,
                    product_id=item.product_id,
                    name=item.name,
                    image=item.image,
                    price=item.price,
                    qty=item.qty,
                )
                for position, item in enumerate(data.cart_items)
            ],
            shipping_address=data.shipping_address,
            payment_method=data.payment_method,
            items_price=data.items_price,
            tax_price=TAX_PRICE,
            shipping_price=data.shipping_price,
            total_price=total_price,
        )

        # Order insert and every stock decrement commit together or not at all
        try:
            OrderRepository.add(db, order)
            for item in data.cart_items:
                product = await ProductRepository.get_product_by_id(db, item.product_id)
                if product is None:
                    logger.warning("order_product_missing", product_id=item.product_id)
                    continue
                product.stock -= item.qty
            await db.commit()
        except Exception as e:
            await db.rollback()
            logger.error("order_create_failed", user_id=user_id, error=str(e))
            raise

        ecomm_orders_created_total.inc()
        ecomm_order_items_per_order.observe(len(order.order_items))
        logger.info("order_created", order_id=order.id, user_id=user_id, total_price=total_price)
        return order

    @staticmethod
    async def mark_paid(db: AsyncSession, order_id: str, data: OrderPay) -> Order:
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise NotFoundError("Order not found!")

        paid_at = as_utc(data.paid_at) if data.paid_at else utcnow()
        order.is_paid = True
        order.paid_at = paid_at
        order.payment_result = {
            "paymentId": data.payment_id,
            "status": "paid",
            "email": data.email,
        }

        # Payment confirmation schedules delivery for the next day
        order.is_delivered = True
        order.delivered_at = paid_at + DELIVERY_DELAY

        order = await OrderRepository.save(db, order)
        ecomm_order_transitions_total.labels(transition="paid").inc()
        ecomm_order_transitions_total.labels(transition="delivered").inc()
        logger.info("order_paid", order_id=order.id, paid_at=paid_at.isoformat())
        return order

    @staticmethod
    async def mark_delivered(db: AsyncSession, order_id: str, data: OrderDeliver) -> Order:
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise NotFoundError("Order not found!")

        order.is_delivered = True
        order.delivered_at = as_utc(data.delivered_at) if data.delivered_at else utcnow()

        order = await OrderRepository.save(db, order)
        ecomm_order_transitions_total.labels(transition="delivered").inc()
        logger.info("order_delivered", order_id=order.id)
        return order

    @staticmethod
    async def list_orders(db: AsyncSession):
        orders = await OrderRepository.list_orders(db)
        if not orders:
            raise NotFoundError("Orders not found!")
        return orders

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str) -> Order:
        order = await OrderRepository.get_order(db, order_id, with_owner=True)
        if not order:
            raise NotFoundError("Order not found!")
        return order

    @staticmethod
    async def list_my_orders(db: AsyncSession, user_id: str):
        orders = await OrderRepository.list_orders_for_user(db, user_id)
        if not orders:
            raise NotFoundError("No orders found for the logged-in user.")
        return orders
