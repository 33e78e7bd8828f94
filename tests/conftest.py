"""Pytest fixtures for the ecommerce order service tests."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from main import create_app
from services.auth_service.models import User
from services.auth_service.service import AuthService
from services.order_service.models import Order, OrderItem  # noqa: F401
from services.product_service.models import Product
from shared.config.database import Database
from shared.config.settings import Settings
from shared.security.jwt_handler import create_access_token

TEST_PASSWORD = "secret123"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def settings(db_path):
    return Settings(
        jwt_secret_key="test-secret-key",
        database_url=f"sqlite+aiosqlite:///{db_path}",
        metrics_enabled=False,
        rate_limit_enabled=False,
    )


# --- Service level: async session on a fresh database ---

@pytest.fixture
async def db(settings):
    database = Database(settings)
    await database.create_all()
    async with database.session_factory() as session:
        yield session
    await database.dispose()


@pytest.fixture
def make_user(db):
    async def _make_user(name="Alice", email="alice@example.com", is_admin=False):
        user = User(name=name, email=email, hashed_password="not-a-real-hash", is_admin=is_admin)
        db.add(user)
        await db.commit()
        return user

    return _make_user


@pytest.fixture
def make_product(db):
    async def _make_product(product_id, stock, name="Widget", price=10.0):
        product = Product(id=product_id, name=name, price=price, stock=stock)
        db.add(product)
        await db.commit()
        return product

    return _make_product


# --- API level: TestClient plus a sync session for seeding ---

@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed(client, db_path):
    """Sync session on the same database file. Tables exist once the client has started."""
    engine = create_engine(f"sqlite:///{db_path}")
    with Session(engine, expire_on_commit=False) as session:
        yield session
    engine.dispose()


@pytest.fixture
def create_user(seed):
    def _create_user(name="Alice", email="alice@example.com", is_admin=False):
        user = User(
            name=name,
            email=email,
            hashed_password=AuthService.hash_password(TEST_PASSWORD),
            is_admin=is_admin,
        )
        seed.add(user)
        seed.commit()
        return user

    return _create_user


@pytest.fixture
def create_product(seed):
    def _create_product(product_id, stock, name="Widget", price=10.0):
        product = Product(id=product_id, name=name, price=price, stock=stock)
        seed.add(product)
        seed.commit()
        return product

    return _create_product


@pytest.fixture
def token_for(settings):
    def _token_for(user, expires_delta=None):
        return create_access_token({"sub": user.id}, settings, expires_delta=expires_delta)

    return _token_for


@pytest.fixture
def auth_headers(token_for):
    def _auth_headers(user):
        return {"Authorization": f"Bearer {token_for(user)}"}

    return _auth_headers


@pytest.fixture
def expired_token(token_for):
    def _expired_token(user):
        return token_for(user, expires_delta=timedelta(minutes=-5))

    return _expired_token


@pytest.fixture
def user_password():
    return TEST_PASSWORD
