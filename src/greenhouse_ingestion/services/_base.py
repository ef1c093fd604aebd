from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from greenhouse_ingestion.client import IngestionClient


class Service:
    """Holds the client a resource service sends through."""

    def __init__(self, client: "IngestionClient"):
        self._client = client
