from __future__ import annotations

import os
from typing import Optional

import httpx
from dotenv import find_dotenv, load_dotenv

from .core.client import DEFAULT_API_URL
from .core.errors import ConfigurationError


def _env_seconds(env_key: str, default: str) -> float:
    raw = os.getenv(env_key, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{env_key} must be a number of seconds, got {raw!r}") from exc


class Settings:
    """Connection settings read from the environment (and ``.env`` if present).

    Nothing in :mod:`monzo_client.core` reads the environment; callers opt in
    by building a ``Settings`` and handing it to ``MonzoClient.from_settings``.
    """

    def __init__(self, load_env_file: bool = True) -> None:
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))
        self.api_url: str = os.getenv("MONZO_API_URL", DEFAULT_API_URL)
        self.access_token: Optional[str] = os.getenv("MONZO_ACCESS_TOKEN") or None
        self.timeout: float = _env_seconds("MONZO_TIMEOUT", "20.0")
        self.connect_timeout: float = _env_seconds("MONZO_CONNECT_TIMEOUT", "5.0")

    def require_access_token(self) -> str:
        if not self.access_token:
            raise ConfigurationError("Missing access token. Set MONZO_ACCESS_TOKEN in environment or .env")
        return self.access_token


def build_http_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` using the configured timeouts.

    The returned client belongs to the caller, who is expected to close it
    (``async with build_http_client() as http: ...``).
    """
    settings = settings or Settings()
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout))
