from fastapi import FastAPI

from shared.config.database import Database
from shared.config.settings import Settings
from shared.errors import register_exception_handlers

from .models import Product  # noqa: F401 — registers model with SQLAlchemy Base
from .router import router, public_router


def create_product_app(settings: Settings, database: Database) -> FastAPI:
    product_app = FastAPI(title="Product Service", version="1.0.0")
    product_app.state.settings = settings
    product_app.state.database = database

    register_exception_handlers(product_app)

    product_app.include_router(public_router)
    product_app.include_router(router)
    return product_app
