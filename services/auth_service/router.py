from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.security import get_current_user, limiter

from .models import User
from .schemas import TokenResponse, UserCreate, UserLogin, UserResponse
from .service import AuthService

LOGIN_RATE_LIMIT = "5/minute"

router = APIRouter(tags=["Authentication"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)


@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "auth", "status": "running"}


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def register(payload: UserCreate, db: AsyncSession = Depends(get_db)):
    return await AuthService.register(db, payload)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Authenticate, receive a JWT and the auth cookie",
)
@limiter.limit(LOGIN_RATE_LIMIT)
async def login(
    request: Request,    # REQUIRED: slowapi needs this to check IP/Headers
    response: Response,
    payload: UserLogin,
    db: AsyncSession = Depends(get_db),
):
    settings = request.app.state.settings
    token = await AuthService.login(db, payload, settings)
    response.set_cookie(
        key=settings.jwt_cookie_name,
        value=token.access_token,
        httponly=True,
        samesite="strict",
        max_age=settings.access_token_expire_minutes * 60,
    )
    return token


@router.post("/logout", summary="Clear the auth cookie")
async def logout(request: Request, response: Response):
    response.delete_cookie(key=request.app.state.settings.jwt_cookie_name)
    return {"message": "Logged out successfully"}


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get the current authenticated user's profile",
)
async def get_me(user: User = Depends(get_current_user)):
    return user
