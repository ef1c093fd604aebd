from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class ErrorKind(str, Enum):
    ENCODE = "encode"
    TRANSPORT = "transport"
    DECODE = "decode"
    CLIENT = "client"
    SERVER = "server"
    UNEXPECTED_STATUS = "unexpected_status"


class FieldError(BaseModel):
    """One entry of the ``errors`` array returned by the Ingestion API."""

    message: str = ""
    field: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        return "" if value is None else value


class IngestionError(Exception):
    """Base error for client failures."""

    kind: ErrorKind


class EncodeError(IngestionError):
    """Outbound body could not be serialized; nothing was sent."""

    kind = ErrorKind.ENCODE


class TransportError(IngestionError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class DecodeError(IngestionError):
    kind = ErrorKind.DECODE

    def __init__(self, message: str, *, method: str, url: str, snippet: str):
        super().__init__(message)
        self.method = method
        self.url = url
        self.snippet = snippet


class APIStatusError(IngestionError):
    """
    Non-2xx response carrying the status code and the field-level messages
    from the body, in the order the API returned them.
    """

    def __init__(
        self,
        *,
        status_code: int,
        errors: Optional[List[FieldError]] = None,
        method: str = "",
        url: str = "",
    ):
        self.status_code = status_code
        self.errors = list(errors or [])
        self.method = method
        self.url = url
        super().__init__(self._describe())

    def _describe(self) -> str:
        head = f"{self.status_code} {self.method} {self.url}".strip()
        if not self.errors:
            return head
        details = "; ".join(
            f"{e.field}: {e.message}" if e.field else e.message for e in self.errors
        )
        return f"{head}: {details}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.status_code, self.errors) == (other.status_code, other.errors)

    __hash__ = Exception.__hash__


class ClientError(APIStatusError):
    kind = ErrorKind.CLIENT


class ServerError(APIStatusError):
    kind = ErrorKind.SERVER


class UnexpectedStatusError(APIStatusError):
    """Status outside 2xx/4xx/5xx; the API does not document redirects."""

    kind = ErrorKind.UNEXPECTED_STATUS


def parse_error_body(payload: Any) -> List[FieldError]:
    """
    Extract ``errors`` from a decoded body, keeping API order.
    Entries that fail validation are skipped; a missing or non-list
    ``errors`` value yields [].
    """
    if not isinstance(payload, dict):
        return []
    entries = payload.get("errors")
    if not isinstance(entries, list):
        return []

    parsed: List[FieldError] = []
    for entry in entries:
        try:
            parsed.append(FieldError.model_validate(entry))
        except ValidationError:
            continue
    return parsed


def is_client_error(err: Optional[BaseException]) -> Optional[ClientError]:
    return err if isinstance(err, ClientError) else None


def is_server_error(err: Optional[BaseException]) -> Optional[ServerError]:
    return err if isinstance(err, ServerError) else None


__all__ = [
    "ErrorKind",
    "FieldError",
    "IngestionError",
    "EncodeError",
    "TransportError",
    "DecodeError",
    "APIStatusError",
    "ClientError",
    "ServerError",
    "UnexpectedStatusError",
    "parse_error_body",
    "is_client_error",
    "is_server_error",
]
