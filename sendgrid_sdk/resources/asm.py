"""Advanced suppression management: unsubscribe groups and suppressions."""

import httpx

from sendgrid_sdk.resources.base import Resource, build_payload
from sendgrid_sdk.resources.models import RecipientEmails, UnsubscribeGroupCreate


class UnsubscribeGroups(Resource):
    """Unsubscribe groups recipients can opt out of individually."""

    endpoint = "v3/asm/groups"

    async def get(self, group_id: int | None = None) -> httpx.Response:
        """List all unsubscribe groups, or retrieve one when group_id is given."""
        if group_id is None:
            return await self._dispatcher.get(self._path())
        return await self._dispatcher.get(self._path(group_id))

    async def post(
        self, name: str, description: str, is_default: bool = False
    ) -> httpx.Response:
        """Create an unsubscribe group.

        Args:
            name: Group name, shown to recipients.
            description: Group description, shown to recipients.
            is_default: Make this the default group for new sends.

        Returns:
            The API response.
        """
        data = build_payload(
            UnsubscribeGroupCreate,
            name=name,
            description=description,
            is_default=is_default,
        )
        return await self._dispatcher.post(self._path(), data)

    async def delete(self, group_id: int) -> httpx.Response:
        """Delete an unsubscribe group."""
        return await self._dispatcher.delete(self._path(group_id))


class Suppressions(Resource):
    """Addresses suppressed within a single unsubscribe group."""

    endpoint = "v3/asm/groups"

    async def get(self, group_id: int) -> httpx.Response:
        """List suppressed addresses for a group."""
        return await self._dispatcher.get(self._path(group_id, "suppressions"))

    async def post(self, group_id: int, emails: list[str]) -> httpx.Response:
        """Add addresses to a group's suppression list.

        Raises:
            SendGridValidationError: If emails is empty or not a list.
        """
        data = build_payload(RecipientEmails, recipient_emails=emails)
        return await self._dispatcher.post(self._path(group_id, "suppressions"), data)

    async def delete(self, group_id: int, email: str) -> httpx.Response:
        """Remove an address from a group's suppression list."""
        return await self._dispatcher.delete(self._path(group_id, "suppressions", email))


class GlobalSuppressions(Resource):
    """Addresses that receive no email at all."""

    endpoint = "v3/asm/suppressions/global"

    async def get(self, email: str) -> httpx.Response:
        """Check whether an address is globally suppressed."""
        return await self._dispatcher.get(self._path(email))

    async def post(self, emails: list[str]) -> httpx.Response:
        """Add addresses to the global suppression list.

        Raises:
            SendGridValidationError: If emails is empty or not a list.
        """
        data = build_payload(RecipientEmails, recipient_emails=emails)
        return await self._dispatcher.post(self._path(), data)

    async def delete(self, email: str) -> httpx.Response:
        """Remove an address from the global suppression list."""
        return await self._dispatcher.delete(self._path(email))
