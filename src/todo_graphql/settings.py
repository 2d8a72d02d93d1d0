from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List

DEFAULT_API_URL = "http://localhost:8000/graphql"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - HOST: interface the API server binds to. Default '0.0.0.0'
    - PORT: API server port. Default 8000
    - GRAPHQL_PATH: path the GraphQL endpoint is mounted on. Default '/graphql'
    - GRAPHIQL_ENABLED: 'false' to disable the in-browser IDE (default: true)
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - API_URL: GraphQL endpoint the todo page client queries. Default 'http://localhost:8000/graphql'
    - WEB_PORT: port of the todo page app. Default 5173
    - LOG_LEVEL: root log level name. Default 'INFO'
    """

    host: str
    port: int
    graphql_path: str
    graphiql_enabled: bool
    cors_allow_origins: List[str]
    api_url: str
    web_port: int
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_port(value: str, default: int) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


def _parse_path(value: str) -> str:
    path = "/" + value.strip().strip("/")
    return "/graphql" if path == "/" else path


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        # Fallback to INFO if unsupported
        log_level = "INFO"

    return Settings(
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_parse_port(_get_env("PORT", "8000"), 8000),
        graphql_path=_parse_path(_get_env("GRAPHQL_PATH", "/graphql")),
        graphiql_enabled=_parse_bool(_get_env("GRAPHIQL_ENABLED", "true"), True),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        api_url=_get_env("API_URL", DEFAULT_API_URL).strip(),
        web_port=_parse_port(_get_env("WEB_PORT", "5173"), 5173),
        log_level=log_level,
    )


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the run entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
