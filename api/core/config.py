"""
Environment-driven settings.

Every value has a default that works against a local development database,
so the API can start with no environment at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

DEFAULT_MAX_UPLOAD_BYTES = 1_000_000


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects some libpq-only query params.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class Settings:
    db_host: str = "127.0.0.1"
    db_port: int = 5432
    db_user: str = "poc_webapp"
    db_password: str = "poc_webapp"
    db_name: str = "poc_webapp"
    db_url_override: str = ""
    db_max_connections: int = 10
    db_command_timeout: int = 30
    images_dir: str = "../public/images"
    frontend_dir: str = "../public"
    default_account_id: int = 1
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        """
        DSN for asyncpg. `DATABASE_URL` wins over the individual parts.
        """
        if self.db_url_override:
            return _sanitize_database_url(self.db_url_override)
        user = quote(self.db_user, safe="")
        password = quote(self.db_password, safe="")
        return f"postgresql://{user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"


def load_settings() -> Settings:
    return Settings(
        db_host=_env_str("POSTGRES_HOST", "127.0.0.1"),
        db_port=_env_int("POSTGRES_PORT", 5432),
        db_user=_env_str("POSTGRES_USER", "poc_webapp"),
        db_password=_env_str("POSTGRES_PASSWORD", "poc_webapp"),
        db_name=_env_str("POSTGRES_DB", "poc_webapp"),
        db_url_override=_env_str("DATABASE_URL", ""),
        db_max_connections=_env_int("DB_MAX_CONNECTIONS", 10),
        db_command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
        images_dir=_env_str("IMAGES_DIR", "../public/images"),
        frontend_dir=_env_str("FRONTEND_DIR", "../public"),
        default_account_id=_env_int("DEFAULT_ACCOUNT_ID", 1),
        max_upload_bytes=_env_int("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
