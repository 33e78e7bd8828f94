from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case accepted on input too."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# --- Requests ---

class CartItem(CamelModel):
    product_id: str = Field(alias="_id")
    qty: int
    name: Optional[str] = None
    image: Optional[str] = None
    price: float = 0.0


class OrderCreate(CamelModel):
    cart_items: Optional[List[CartItem]] = None
    shipping_address: Optional[Dict[str, Any]] = None
    payment_method: Optional[str] = None
    items_price: float = 0.0
    shipping_price: float = 0.0
    total_price: Optional[float] = None


class OrderPay(CamelModel):
    payment_id: str
    email: str
    paid_at: Optional[datetime] = None


class OrderDeliver(CamelModel):
    delivered_at: Optional[datetime] = None


# --- Responses ---

class OrderItemResponse(CamelModel):
    product: str
    name: Optional[str] = None
    image: Optional[str] = None
    price: float
    qty: int


class PaymentResult(CamelModel):
    payment_id: Optional[str] = None
    status: str
    email: Optional[str] = None


class OrderResponse(CamelModel):
    id: str
    user_id: str
    order_items: List[OrderItemResponse]
    shipping_address: Optional[Dict[str, Any]] = None
    payment_method: Optional[str] = None
    items_price: float
    tax_price: float
    shipping_price: float
    total_price: float
    is_paid: bool
    paid_at: Optional[datetime] = None
    payment_result: Optional[PaymentResult] = None
    is_delivered: bool
    delivered_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OwnerSummary(CamelModel):
    id: str
    name: str


class OwnerContact(CamelModel):
    name: str
    email: str


class OrderWithOwnerSummary(OrderResponse):
    user: OwnerSummary


class OrderWithOwnerContact(OrderResponse):
    user: OwnerContact
