from __future__ import annotations

from greenhouse_ingestion.errors import DecodeError
from greenhouse_ingestion.models import CurrentUser

from ._base import Service

CURRENT_USER_PATH = "partner/current_user"


class UserService(Service):
    async def current(self) -> CurrentUser:
        """The Greenhouse user the credentials act as."""
        req = self._client.build_request("GET", CURRENT_USER_PATH)
        user = await self._client.execute(req, CurrentUser, resource="users")
        if user is None:
            raise DecodeError(
                "Empty body returned for current user",
                method=req.method,
                url=str(req.url),
                snippet="",
            )
        return user
