"""Authentication modes: OAuth bearer token, or API key + On-Behalf-Of."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

import httpx

ON_BEHALF_OF_HEADER = "On-Behalf-Of"


@dataclass(frozen=True)
class BearerToken:
    token: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("token must be provided.")

    def apply(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self.token}"


@dataclass(frozen=True)
class BasicCredentials:
    """API key sent as the Basic username with an empty password."""

    api_key: str = field(repr=False)
    on_behalf_of: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("api_key must be provided.")

    def apply(self, request: httpx.Request) -> None:
        # BasicAuth sets Authorization on its first (and only) yield
        next(httpx.BasicAuth(self.api_key, "").sync_auth_flow(request))
        if self.on_behalf_of:
            request.headers[ON_BEHALF_OF_HEADER] = self.on_behalf_of


Credentials = Union[BearerToken, BasicCredentials]

__all__ = ["BearerToken", "BasicCredentials", "Credentials", "ON_BEHALF_OF_HEADER"]
