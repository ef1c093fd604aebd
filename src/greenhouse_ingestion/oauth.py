from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import urlencode

from .params import space_delimit

AUTHORIZE_URL = "https://api.greenhouse.io/oauth/authorize"


def authorization_url(
    client_id: str,
    redirect_uri: str,
    scopes: Sequence[str],
    *,
    state: Optional[str] = None,
    base_url: str = AUTHORIZE_URL,
) -> str:
    """
    URL to send a Greenhouse user to for granting access.
    Scopes such as ``candidates.create`` go out as one space-delimited value.
    """
    if not client_id:
        raise ValueError("client_id must be provided.")
    if not redirect_uri:
        raise ValueError("redirect_uri must be provided.")

    params = [
        ("client_id", client_id),
        ("redirect_uri", redirect_uri),
        ("response_type", "code"),
        ("scope", space_delimit(scopes)),
    ]
    if state:
        params.append(("state", state))
    return f"{base_url}?{urlencode(params)}"


__all__ = ["authorization_url", "AUTHORIZE_URL"]
