from __future__ import annotations

from typing import List

from greenhouse_ingestion.models import ProspectPool

from ._base import Service

PROSPECT_POOLS_PATH = "partner/prospect_pools"


class ProspectPoolService(Service):
    async def list(self) -> List[ProspectPool]:
        result = await self._client.request(
            "GET",
            PROSPECT_POOLS_PATH,
            target=List[ProspectPool],
            resource="prospect_pools",
        )
        return result or []
