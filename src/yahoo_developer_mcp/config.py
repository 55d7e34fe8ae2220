"""
Runtime configuration read from the environment.

server.py loads a .env file (python-dotenv) before this is consulted.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .constants import EnvVar, ErrorMessages, PagingConfig, ServerConfig, YahooApiConfig
from .errors import ConfigurationError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG")


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigurationError(ErrorMessages.INVALID_PORT.format(raw)) from e
    if not 0 <= port <= 65535:
        raise ConfigurationError(ErrorMessages.INVALID_PORT.format(raw))
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            ErrorMessages.INVALID_LOG_LEVEL.format(raw, ", ".join(LOG_LEVELS))
        )
    # Canonical name, e.g. WARN -> WARNING
    return logging.getLevelName(logging.getLevelName(level))


@dataclass(frozen=True)
class AppConfig:
    host: str = ServerConfig.DEFAULT_HOST
    port: int = ServerConfig.DEFAULT_PORT
    allowed_origins: list[str] = field(
        default_factory=lambda: list(ServerConfig.DEFAULT_ALLOWED_ORIGINS)
    )
    yahoo_app_id: str | None = None
    yahoo_base_url: str = YahooApiConfig.BASE_URL
    log_level: str = "INFO"
    paging_ttl_seconds: float = PagingConfig.TTL_SECONDS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build the config from environment variables.

        Raises:
            ConfigurationError: If PORT or LOG_LEVEL is malformed
        """
        env = os.environ if environ is None else environ
        origins = env.get(EnvVar.ALLOWED_ORIGINS)
        return cls(
            host=env.get(EnvVar.HOST, ServerConfig.DEFAULT_HOST),
            port=_parse_port(env.get(EnvVar.PORT, str(ServerConfig.DEFAULT_PORT))),
            allowed_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else list(ServerConfig.DEFAULT_ALLOWED_ORIGINS)
            ),
            yahoo_app_id=env.get(EnvVar.YAHOO_APP_ID) or None,
            yahoo_base_url=env.get(EnvVar.YAHOO_API_BASE_URL, YahooApiConfig.BASE_URL),
            log_level=_parse_log_level(env.get(EnvVar.LOG_LEVEL, "INFO")),
        )
