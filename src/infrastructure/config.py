"""Runtime configuration and logging setup."""

import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv
from loguru import logger


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Client settings, overridable through ``OPENJUDGE_*`` environment variables."""

    domain: str = "openjudge.cn"
    scheme: str = "http"
    interface_language: str | None = None
    preferred_language: str | None = None
    groups: list[str] = field(default_factory=lambda: ["python"])
    poll_interval: float = 2.0
    max_poll_attempts: int = 30
    max_connections: int = 10
    keepalive_expiry: float = 30.0
    timeout: float = 30.0
    state_file: str = "~/.openjudge/state.json"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build settings from the environment (and a ``.env`` file when present)."""
    load_dotenv()

    defaults = Settings()
    return Settings(
        domain=os.getenv("OPENJUDGE_DOMAIN", defaults.domain),
        scheme=os.getenv("OPENJUDGE_SCHEME", defaults.scheme),
        interface_language=os.getenv("OPENJUDGE_INTERFACE_LANGUAGE") or None,
        preferred_language=os.getenv("OPENJUDGE_PREFERRED_LANGUAGE") or None,
        groups=_env_list("OPENJUDGE_GROUPS", defaults.groups),
        poll_interval=float(os.getenv("OPENJUDGE_POLL_INTERVAL", defaults.poll_interval)),
        max_poll_attempts=int(os.getenv("OPENJUDGE_MAX_POLL_ATTEMPTS", defaults.max_poll_attempts)),
        max_connections=int(os.getenv("OPENJUDGE_MAX_CONNECTIONS", defaults.max_connections)),
        keepalive_expiry=float(os.getenv("OPENJUDGE_KEEPALIVE_EXPIRY", defaults.keepalive_expiry)),
        timeout=float(os.getenv("OPENJUDGE_TIMEOUT", defaults.timeout)),
        state_file=os.getenv("OPENJUDGE_STATE_FILE", defaults.state_file),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
    )


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
