"""
Configuration Management

Test session configuration from environment variables with sensible defaults.
A ``.env`` file in the working directory is honoured when present.
"""

import os
from dataclasses import dataclass, replace
from urllib.parse import urlparse

from dotenv import load_dotenv

from .errors import SpotError

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_MAX_PAGE_LOAD_WAIT = 60000


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(env, name: str, default: int) -> int:
    raw = env.get(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise SpotError("invalid_config", f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    """Read-only settings shared by a session and its participants."""

    # Permanent pairing code for backend-enabled runs (empty disables backend)
    backend_pairing_code: str = ""

    # Milliseconds the TV is given to load its first page
    max_page_load_wait: int = DEFAULT_MAX_PAGE_LOAD_WAIT

    # Base URLs
    tv_url: str = DEFAULT_BASE_URL
    remote_url: str = DEFAULT_BASE_URL

    # Browser / logging
    headless: bool = True
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """Build configuration from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        return cls(
            backend_pairing_code=env.get("SPOT_BACKEND_PAIRING_CODE", ""),
            max_page_load_wait=_env_int(
                env, "SPOT_MAX_PAGE_LOAD_WAIT", DEFAULT_MAX_PAGE_LOAD_WAIT
            ),
            tv_url=env.get("SPOT_TV_URL", DEFAULT_BASE_URL),
            remote_url=env.get("SPOT_REMOTE_URL", DEFAULT_BASE_URL),
            headless=_env_bool(env.get("SPOT_HEADLESS", "true")),
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_json=_env_bool(env.get("LOG_JSON", "false")),
        )

    def validate(self) -> "Config":
        """Raise :class:`SpotError` for values no browser run could use."""
        if self.max_page_load_wait <= 0:
            raise SpotError(
                "invalid_config",
                f"SPOT_MAX_PAGE_LOAD_WAIT must be positive, got {self.max_page_load_wait}",
            )
        for name, url in (("SPOT_TV_URL", self.tv_url), ("SPOT_REMOTE_URL", self.remote_url)):
            parsed = urlparse(url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise SpotError("invalid_config", f"{name} is not an http(s) URL: {url!r}")
        return self


def get_config(**overrides) -> Config:
    """Get validated configuration, loading ``.env`` first.

    ``overrides`` replace environment values before validation, so a bad
    environment value can be corrected from the command line.
    """
    load_dotenv()
    return replace(Config.from_env(), **overrides).validate()
