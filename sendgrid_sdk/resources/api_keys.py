"""API key management."""

import httpx

from sendgrid_sdk.resources.base import Resource, build_payload
from sendgrid_sdk.resources.models import NamePayload


class APIKeys(Resource):
    """Create, rename, list and revoke API keys."""

    endpoint = "v3/api_keys"

    async def get(self) -> httpx.Response:
        """List all API keys belonging to the authenticated user."""
        return await self._dispatcher.get(self._path())

    async def post(self, name: str) -> httpx.Response:
        """Create a new API key.

        Args:
            name: Name of the new key.

        Returns:
            The API response; on success the body contains the key itself.
        """
        return await self._dispatcher.post(self._path(), build_payload(NamePayload, name=name))

    async def patch(self, api_key_id: str, name: str) -> httpx.Response:
        """Rename an API key."""
        data = build_payload(NamePayload, name=name)
        return await self._dispatcher.patch(self._path(api_key_id), data)

    async def delete(self, api_key_id: str) -> httpx.Response:
        """Revoke an API key."""
        return await self._dispatcher.delete(self._path(api_key_id))
