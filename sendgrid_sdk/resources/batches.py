"""Mail batch IDs for grouping scheduled sends."""

import httpx

from sendgrid_sdk.resources.base import Resource


class Batches(Resource):
    endpoint = "v3/mail/batch"

    async def post(self) -> httpx.Response:
        """Create a new batch ID."""
        return await self._dispatcher.post(self._path(), {})

    async def get(self, batch_id: str) -> httpx.Response:
        """Check whether a batch ID is valid."""
        return await self._dispatcher.get(self._path(batch_id))
