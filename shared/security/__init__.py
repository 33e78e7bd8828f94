from .jwt_handler import create_access_token, decode_access_token
from .dependencies import extract_token, get_current_user, require_admin
from .rate_limiter import limiter, rate_limit_exceeded_handler, user_id_or_ip

__all__ = [
    "create_access_token",
    "decode_access_token",
    "extract_token",
    "get_current_user",
    "require_admin",
    "limiter",
    "rate_limit_exceeded_handler",
    "user_id_or_ip",
]
