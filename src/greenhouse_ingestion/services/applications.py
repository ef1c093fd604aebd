from __future__ import annotations

from typing import List, Sequence

from greenhouse_ingestion.models import (
    Application,
    PostApplication,
    PostApplicationResponse,
)
from greenhouse_ingestion.params import to_csv

from ._base import Service

APPLICATIONS_PATH = "partner/applications"


class ApplicationService(Service):
    async def retrieve(self, ids: Sequence[int]) -> List[Application]:
        result = await self._client.request(
            "GET",
            APPLICATIONS_PATH,
            params={"application_ids": to_csv(ids)},
            target=List[Application],
            resource="applications",
        )
        return result or []

    async def post(
        self, applications: Sequence[PostApplication]
    ) -> List[PostApplicationResponse]:
        """Add existing candidates to jobs."""
        result = await self._client.request(
            "POST",
            APPLICATIONS_PATH,
            body=list(applications),
            target=List[PostApplicationResponse],
            resource="applications",
        )
        return result or []
