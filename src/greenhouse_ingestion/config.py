from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional

from dotenv import load_dotenv

from .auth import BasicCredentials, BearerToken, Credentials
from .client import DEFAULT_BASE_URL, IngestionClient

ENV_BASE_URL = "GREENHOUSE_INGESTION_BASE_URL"
ENV_ACCESS_TOKEN = "GREENHOUSE_INGESTION_ACCESS_TOKEN"
ENV_API_KEY = "GREENHOUSE_INGESTION_API_KEY"
ENV_ON_BEHALF_OF = "GREENHOUSE_INGESTION_ON_BEHALF_OF"
ENV_TIMEOUT = "GREENHOUSE_INGESTION_TIMEOUT"


class MissingCredentialsError(ValueError):
    """Raised when neither an access token nor an API key is configured."""


class ConflictingCredentialsError(ValueError):
    """Raised when both an access token and an API key are configured."""


@dataclass(frozen=True)
class IngestionConfig:
    base_url: str = DEFAULT_BASE_URL
    access_token: Optional[str] = field(default=None, repr=False)
    api_key: Optional[str] = field(default=None, repr=False)
    on_behalf_of: Optional[str] = None
    timeout_seconds: float = 10.0

    def credentials(self) -> Credentials:
        if self.access_token and self.api_key:
            raise ConflictingCredentialsError(
                f"Set only one of {ENV_ACCESS_TOKEN} or {ENV_API_KEY}."
            )
        if self.access_token:
            return BearerToken(self.access_token)
        if self.api_key:
            return BasicCredentials(self.api_key, self.on_behalf_of)
        raise MissingCredentialsError(
            f"Missing {ENV_ACCESS_TOKEN} or {ENV_API_KEY} in environment."
        )


def _env(name: str) -> Optional[str]:
    val = os.getenv(name, "").strip()
    return val or None


def load_env_config(*, use_dotenv: bool = True) -> IngestionConfig:
    """Load Ingestion API settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()

    timeout_raw = _env(ENV_TIMEOUT)
    try:
        timeout = float(timeout_raw) if timeout_raw else 10.0
    except ValueError as exc:
        raise ValueError(f"{ENV_TIMEOUT} must be a number, got {timeout_raw!r}") from exc

    return IngestionConfig(
        base_url=_env(ENV_BASE_URL) or DEFAULT_BASE_URL,
        access_token=_env(ENV_ACCESS_TOKEN),
        api_key=_env(ENV_API_KEY),
        on_behalf_of=_env(ENV_ON_BEHALF_OF),
        timeout_seconds=timeout,
    )


def create_client_from_env(*, use_dotenv: bool = True, **kwargs: Any) -> IngestionClient:
    """Create an IngestionClient from environment variables."""
    cfg = load_env_config(use_dotenv=use_dotenv)
    kwargs.setdefault("base_url", cfg.base_url)
    kwargs.setdefault("timeout_seconds", cfg.timeout_seconds)
    return IngestionClient(credentials=cfg.credentials(), **kwargs)


__all__ = [
    "IngestionConfig",
    "MissingCredentialsError",
    "ConflictingCredentialsError",
    "load_env_config",
    "create_client_from_env",
]
