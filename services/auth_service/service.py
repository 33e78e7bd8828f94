import structlog
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.settings import Settings
from shared.errors import AuthError, ConflictError
from shared.security.jwt_handler import create_access_token

from .models import User
from .repository import UserRepository
from .schemas import TokenResponse, UserCreate, UserLogin

logger = structlog.get_logger(__name__)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthService:

    @staticmethod
    def hash_password(password: str) -> str:
        return _pwd_context.hash(password)

    @staticmethod
    def verify_password(plain: str, hashed: str) -> bool:
        return _pwd_context.verify(plain, hashed)

    @staticmethod
    async def register(db: AsyncSession, data: UserCreate) -> User:
        existing = await UserRepository.get_by_email(db, data.email)
        if existing:
            raise ConflictError("Email already registered")
        user = User(
            name=data.name,
            email=data.email,
            hashed_password=AuthService.hash_password(data.password),
        )
        user = await UserRepository.create(db, user)
        logger.info("user_registered", user_id=user.id)
        return user

    @staticmethod
    async def login(db: AsyncSession, data: UserLogin, settings: Settings) -> TokenResponse:
        user = await UserRepository.get_by_email(db, data.email)
        if not user or not AuthService.verify_password(data.password, user.hashed_password):
            raise AuthError("Invalid email or password")
        token = create_access_token(data={"sub": user.id}, settings=settings)
        logger.info("user_logged_in", user_id=user.id)
        return TokenResponse(access_token=token)
