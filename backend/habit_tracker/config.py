import os
import logging
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./habit_tracker.db")

JWT_ACCESS_SECRET = os.getenv("JWT_ACCESS_SECRET", "")
JWT_REFRESH_SECRET = os.getenv("JWT_REFRESH_SECRET", "")
if not JWT_ACCESS_SECRET or not JWT_REFRESH_SECRET:
    logger.warning("JWT secrets are not set, falling back to development defaults")
    JWT_ACCESS_SECRET = JWT_ACCESS_SECRET or "access-secret"
    JWT_REFRESH_SECRET = JWT_REFRESH_SECRET or "refresh-secret"

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15"))
REFRESH_TOKEN_EXPIRE_DAYS = int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "7"))

COOKIE_ACCESS_TOKEN = "accessToken"
COOKIE_REFRESH_TOKEN = "refreshToken"
COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
GRAPHIQL = _env_bool("GRAPHIQL", True)
