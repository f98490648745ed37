"""
Environment configuration.

All settings come from environment variables (optionally loaded from a
.env file). Defaults are suitable for local development only.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
SQL_ECHO = _env_bool("SQL_ECHO")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = ["http://localhost:3000"]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    CORS_ORIGINS.extend(o.strip() for o in _extra.split(",") if o.strip())

JWT_SECRET = os.getenv("JWT_SECRET", "storefront-dev-secret-change-me-in-production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

TOKEN_COOKIE_NAME = "token"
COOKIE_SECURE = _env_bool("COOKIE_SECURE")
