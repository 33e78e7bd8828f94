from fastapi import FastAPI

from shared.config.database import Database
from shared.config.settings import Settings
from shared.errors import register_exception_handlers

from .models import Order, OrderItem  # noqa: F401 — registers models with SQLAlchemy Base
from .router import router, public_router


def create_order_app(settings: Settings, database: Database) -> FastAPI:
    order_app = FastAPI(title="Order Service", version="1.0.0")
    order_app.state.settings = settings
    order_app.state.database = database

    register_exception_handlers(order_app)

    order_app.include_router(public_router)
    order_app.include_router(router)
    return order_app
