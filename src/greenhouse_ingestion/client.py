from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .auth import BasicCredentials, BearerToken, Credentials
from .errors import (
    ClientError,
    DecodeError,
    EncodeError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
    parse_error_body,
)
from .services import (
    ApplicationService,
    CandidateService,
    JobService,
    ProspectPoolService,
    UserService,
)

DEFAULT_BASE_URL = "https://api.greenhouse.io/"
DEFAULT_API_VERSION = "v1"
SNIPPET_CHARS = 500

QueryParams = Union[Mapping[str, Any], Sequence[Tuple[str, Any]]]


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class IngestionClient:
    """
    Client for the Greenhouse Ingestion (partner) API.
    - Builds requests with bearer or Basic + On-Behalf-Of auth
    - Sends each request exactly once; retrying is up to the caller
    - Decodes 2xx bodies into typed models, raises typed errors otherwise
    - Read-only after construction, safe to share between tasks
    """

    def __init__(
        self,
        *,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout_seconds: float = 10.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")
        if not isinstance(credentials, (BearerToken, BasicCredentials)):
            raise TypeError("credentials must be a BearerToken or BasicCredentials.")

        self.base_url = base_url
        self.api_version = api_version.strip("/")
        self.credentials = credentials
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("greenhouse_ingestion.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=timeout_seconds,
        )

        self.candidates = CandidateService(self)
        self.applications = ApplicationService(self)
        self.jobs = JobService(self)
        self.prospect_pools = ProspectPoolService(self)
        self.users = UserService(self)

    @classmethod
    def with_token(cls, token: str, **kwargs: Any) -> "IngestionClient":
        return cls(credentials=BearerToken(token), **kwargs)

    @classmethod
    def with_api_key(
        cls, api_key: str, on_behalf_of: Optional[str] = None, **kwargs: Any
    ) -> "IngestionClient":
        return cls(credentials=BasicCredentials(api_key, on_behalf_of), **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "IngestionClient":
        from .config import create_client_from_env

        return create_client_from_env(**kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "IngestionClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{self.api_version}/{path.lstrip('/')}"

    def build_request(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        body: Any = None,
    ) -> httpx.Request:
        """
        Build an authenticated request without touching the network.
        Raises EncodeError if ``body`` cannot be serialized to JSON.
        """
        method = method.upper()
        url = self.url_for(path)
        headers = {"Accept": "application/json"}

        content: Optional[bytes] = None
        if body is not None:
            try:
                content = to_json(body, by_alias=True, exclude_none=True)
            except (PydanticSerializationError, TypeError, ValueError) as exc:
                raise EncodeError(
                    f"Could not encode request body for {method} {url}: {exc}"
                ) from exc
            headers["Content-Type"] = "application/json"

        request = self.http.build_request(
            method,
            url,
            params=_ordered_params(params),
            content=content,
            headers=headers,
        )
        self.credentials.apply(request)
        return request

    async def execute(
        self,
        request: httpx.Request,
        target: Any = None,
        *,
        resource: Optional[str] = None,
    ) -> Any:
        """
        Send ``request`` once and decode the response.
        - 2xx: returns the body validated as ``target`` (raw JSON if None);
          an empty body returns None
        - 4xx: raises ClientError; 5xx: raises ServerError
        - anything else: raises UnexpectedStatusError
        - network failures raise TransportError
        """
        method = request.method
        url = str(request.url)
        start = time.perf_counter()

        try:
            resp = await self.http.send(request)
        except httpx.HTTPError as exc:
            self.log.warning(
                "ingestion.transport_error",
                extra={"resource": resource, "method": method, "url": url},
            )
            raise TransportError(
                f"Network error calling {method} {url}: {exc}",
                method=method,
                url=url,
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "ingestion.request",
            extra={
                "resource": resource,
                "method": method,
                "url": url,
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        status = resp.status_code
        if 200 <= status < 300:
            return self._decode(resp, target, method=method, url=url)

        errors = parse_error_body(_json_or_none(resp))
        if 400 <= status < 500:
            raise ClientError(status_code=status, errors=errors, method=method, url=url)
        if 500 <= status < 600:
            raise ServerError(status_code=status, errors=errors, method=method, url=url)
        raise UnexpectedStatusError(
            status_code=status, errors=errors, method=method, url=url
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        body: Any = None,
        target: Any = None,
        resource: Optional[str] = None,
    ) -> Any:
        req = self.build_request(method, path, params=params, body=body)
        return await self.execute(req, target, resource=resource)

    def _decode(
        self, resp: httpx.Response, target: Any, *, method: str, url: str
    ) -> Any:
        # 201/204 with no body
        if not resp.content.strip():
            return None

        try:
            if target is None:
                return resp.json()
            return _adapter(target).validate_json(resp.content)
        except (ValidationError, ValueError) as exc:
            snippet = (resp.text or "")[:SNIPPET_CHARS]
            raise DecodeError(
                f"Could not decode response from {method} {url}: {exc}; "
                f"body snippet: {snippet!r}",
                method=method,
                url=url,
                snippet=snippet,
            ) from exc


def _ordered_params(params: Optional[QueryParams]) -> Optional[list]:
    if not params:
        return None
    items = params.items() if isinstance(params, Mapping) else params
    return [(k, v) for k, v in items if v is not None]


def _json_or_none(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


__all__ = ["IngestionClient", "DEFAULT_BASE_URL", "DEFAULT_API_VERSION"]
