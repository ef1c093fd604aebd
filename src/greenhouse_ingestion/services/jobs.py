from __future__ import annotations

from typing import List

from greenhouse_ingestion.models import Job

from ._base import Service

JOBS_PATH = "partner/jobs"


class JobService(Service):
    async def list(self) -> List[Job]:
        """Jobs the authenticated user can submit candidates to."""
        result = await self._client.request(
            "GET", JOBS_PATH, target=List[Job], resource="jobs"
        )
        return result or []
