"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os
import secrets
from collections.abc import Mapping
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ENV_PREFIX = "STUDENT_ADMIN_"

DEFAULT_TOKEN_TTL_SECONDS = 10 * 60 * 60  # 10 hours
DEFAULT_BCRYPT_ROUNDS = 12
DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass
class Settings:
    """Application settings.

    Attributes:
        db_path: SQLite database file. Use ":memory:" for an in-memory DB.
        jwt_secret: HMAC secret used to sign bearer tokens. Defaults to a random
            per-process secret, so tokens do not survive a restart.
        jwt_algorithm: JWT signing algorithm.
        token_ttl_seconds: Lifetime of an issued token.
        bcrypt_rounds: bcrypt cost factor for password hashing.
        cors_origins: Origins allowed by the CORS middleware.
        require_auth: Whether student routes require a bearer token.
        host: Bind address for the HTTP server.
        port: Bind port for the HTTP server.
        log_dir: Directory for log files (None = logging module default).
        log_level: Log level name (None = logging module default).
    """

    db_path: str = "student_admin.db"
    jwt_secret: str = field(default_factory=lambda: secrets.token_urlsafe(32))
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    require_auth: bool = False
    host: str = "127.0.0.1"
    port: int = 8080
    log_dir: str | None = None
    log_level: str | None = None

    def __post_init__(self) -> None:
        if not self.jwt_secret:
            raise ConfigError("jwt_secret must not be empty")
        if self.token_ttl_seconds <= 0:
            raise ConfigError("token_ttl_seconds must be positive")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ConfigError("bcrypt_rounds must be between 4 and 31")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from STUDENT_ADMIN_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings; unset variables keep their defaults.

        Raises:
            ConfigError: If a variable has an invalid value.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str) -> str | None:
            return env.get(f"{ENV_PREFIX}{name}")

        secret = get("JWT_SECRET")
        if secret is None:
            logger.warning(
                "%sJWT_SECRET is not set; signing tokens with a random per-process secret",
                ENV_PREFIX,
            )
        origins = get("CORS_ORIGINS")
        return cls(
            db_path=get("DB_PATH") or defaults.db_path,
            jwt_secret=defaults.jwt_secret if secret is None else secret,
            jwt_algorithm=get("JWT_ALGORITHM") or defaults.jwt_algorithm,
            token_ttl_seconds=_parse_int(
                "TOKEN_TTL_SECONDS", get("TOKEN_TTL_SECONDS"), defaults.token_ttl_seconds
            ),
            bcrypt_rounds=_parse_int("BCRYPT_ROUNDS", get("BCRYPT_ROUNDS"), defaults.bcrypt_rounds),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins is not None
                else defaults.cors_origins
            ),
            require_auth=_parse_bool("REQUIRE_AUTH", get("REQUIRE_AUTH"), defaults.require_auth),
            host=get("HOST") or defaults.host,
            port=_parse_int("PORT", get("PORT"), defaults.port),
            log_dir=get("LOG_DIR"),
            log_level=get("LOG_LEVEL"),
        )


def _parse_int(name: str, value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from e


def _parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be a boolean, got {value!r}")
