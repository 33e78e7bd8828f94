from sqlalchemy import JSON, Boolean, Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from services.auth_service.models import User  # noqa: F401 — owner relationship target
from shared.config.database import Base, UTCDateTime, generate_id, utcnow


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)

    shipping_address = Column(JSON, nullable=True)
    payment_method = Column(String, nullable=True)

    items_price = Column(Float, nullable=False, default=0.0)
    tax_price = Column(Float, nullable=False, default=0.0)
    shipping_price = Column(Float, nullable=False, default=0.0)
    total_price = Column(Float, nullable=False, default=0.0)

    is_paid = Column(Boolean, nullable=False, default=False)
    paid_at = Column(UTCDateTime(), nullable=True)
    payment_result = Column(JSON, nullable=True)  # {paymentId, status, email}

    is_delivered = Column(Boolean, nullable=False, default=False)
    delivered_at = Column(UTCDateTime(), nullable=True)

    created_at = Column(UTCDateTime(), default=utcnow)
    updated_at = Column(UTCDateTime(), default=utcnow, onupdate=utcnow)

    order_items = relationship(
        "OrderItem",
        back_populates="order",
        order_by="OrderItem.position",
        lazy="selectin",
        cascade="all, delete-orphan",
    )
    # Loaded explicitly where the owner is rendered
    user = relationship("User", lazy="raise")


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(32), ForeignKey("orders.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    # Plain reference: the product may be deleted later, the line item stays
    product_id = Column(String(32), nullable=False)
    name = Column(String, nullable=True)
    image = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    qty = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="order_items")

    @property
    def product(self) -> str:
        return self.product_id
