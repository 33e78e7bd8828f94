from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from shared.config.database import Database
from shared.config.settings import Settings
from shared.errors import register_exception_handlers
from shared.security import limiter, rate_limit_exceeded_handler

from .models import User  # noqa: F401 — registers model with SQLAlchemy Base
from .router import router, public_router


def create_auth_app(settings: Settings, database: Database) -> FastAPI:
    auth_app = FastAPI(
        title="Auth Service",
        version="2.0.0",
        description="JWT authentication: register, login, logout, current user.",
    )
    auth_app.state.settings = settings
    auth_app.state.database = database
    auth_app.state.limiter = limiter

    register_exception_handlers(auth_app)
    auth_app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    auth_app.include_router(public_router)
    auth_app.include_router(router)
    return auth_app
