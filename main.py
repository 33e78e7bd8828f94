"""
Ecommerce cluster entrypoint.

    uvicorn main:create_app --factory
"""
from typing import Optional

import structlog
from fastapi import FastAPI

from shared.config.database import Database
from shared.config.settings import Settings
from shared.errors import register_exception_handlers
from shared.observability import setup_observability
from shared.security import limiter

from services.auth_service.main import create_auth_app
from services.order_service.main import create_order_app
from services.product_service.main import create_product_app

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    database = Database(settings)

    app = FastAPI(title="Ecommerce Cluster")
    app.state.settings = settings
    app.state.database = database

    # --- OBSERVABILITY BOOTSTRAP ---
    setup_observability(app, "ecommerce", settings)

    # Unmatched paths outside the mounted services
    register_exception_handlers(app)

    # Process-wide: the login route is decorated with this one limiter at import time
    limiter.enabled = settings.rate_limit_enabled

    @app.on_event("startup")
    async def startup_event():
        # Models are registered with Base by the service imports above
        await database.create_all()
        logger.info("startup_complete", service="ecommerce")

    @app.on_event("shutdown")
    async def shutdown_event():
        await database.dispose()

    app.mount("/auth", create_auth_app(settings, database))
    app.mount("/products", create_product_app(settings, database))
    app.mount("/orders", create_order_app(settings, database))
    return app
