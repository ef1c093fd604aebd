from __future__ import annotations

from typing import List, Sequence

from greenhouse_ingestion.models import Candidate, PostCandidate, PostCandidateResponse
from greenhouse_ingestion.params import to_csv

from ._base import Service

CANDIDATES_PATH = "partner/candidates"


class CandidateService(Service):
    async def retrieve(self, ids: Sequence[int]) -> List[Candidate]:
        """Fetch candidates (with their applications) by Greenhouse ID."""
        result = await self._client.request(
            "GET",
            CANDIDATES_PATH,
            params={"candidate_ids": to_csv(ids)},
            target=List[Candidate],
            resource="candidates",
        )
        return result or []

    async def post(
        self, candidates: Sequence[PostCandidate]
    ) -> List[PostCandidateResponse]:
        """Create candidates or prospects; results come back in input order."""
        result = await self._client.request(
            "POST",
            CANDIDATES_PATH,
            body=list(candidates),
            target=List[PostCandidateResponse],
            resource="candidates",
        )
        return result or []
