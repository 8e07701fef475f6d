"""Configuration for todolist, loaded from environment variables (+ optional .env)."""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from todolist.common.errors import ConfigurationError

load_dotenv()

# Only the HMAC-SHA2 family is accepted for token signing.
SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")

DEFAULT_JWT_ISSUER = "todolist-api"
DEFAULT_JWT_AUDIENCE = "todolist-client"
DEFAULT_JWT_EXPIRATION_MINUTES = 60
DEFAULT_BCRYPT_ROUNDS = 12


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class JwtSettings:
    """Token signing settings."""
    secret_key: str
    algorithm: str = "HS256"
    issuer: str = DEFAULT_JWT_ISSUER
    audience: str = DEFAULT_JWT_AUDIENCE
    expiration_minutes: int = DEFAULT_JWT_EXPIRATION_MINUTES


@dataclass(frozen=True)
class AppSettings:
    """Application-level settings that are not secrets."""
    seed_database: bool = True
    expose_error_detail: bool = False
    cors_origins: List[str] = field(default_factory=list)
    log_level: str = "INFO"
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS


def load_jwt_settings() -> JwtSettings:
    """Load token settings from the environment.

    Raises:
        ConfigurationError: If the signing secret is missing, the algorithm
            is not an HMAC-SHA2 variant, or the expiration is not positive.
    """
    secret = os.getenv("JWT_SECRET_KEY", "").strip()
    if not secret:
        raise ConfigurationError(
            "JWT_SECRET_KEY is not set. Set it to a long random string to enable token signing."
        )

    algorithm = os.getenv("JWT_ALGORITHM", "HS256").strip().upper()
    if algorithm not in SUPPORTED_JWT_ALGORITHMS:
        raise ConfigurationError(
            f"JWT_ALGORITHM must be one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}, got {algorithm!r}"
        )

    expiration_minutes = env_int("JWT_EXPIRATION_MINUTES", DEFAULT_JWT_EXPIRATION_MINUTES)
    if expiration_minutes <= 0:
        raise ConfigurationError("JWT_EXPIRATION_MINUTES must be positive")

    return JwtSettings(
        secret_key=secret,
        algorithm=algorithm,
        issuer=os.getenv("JWT_ISSUER", DEFAULT_JWT_ISSUER),
        audience=os.getenv("JWT_AUDIENCE", DEFAULT_JWT_AUDIENCE),
        expiration_minutes=expiration_minutes,
    )


def load_app_settings() -> AppSettings:
    """Load non-secret application settings from the environment."""
    raw_origins = os.getenv("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    return AppSettings(
        seed_database=env_bool("SEED_DATABASE", True),
        expose_error_detail=env_bool("EXPOSE_ERROR_DETAIL", False),
        cors_origins=origins,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        bcrypt_rounds=env_int("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS),
    )
