"""Transactional templates and their versions."""

from typing import Any

import httpx

from sendgrid_sdk.exceptions import SendGridValidationError
from sendgrid_sdk.resources.base import Resource, build_payload
from sendgrid_sdk.resources.models import (
    NamePayload,
    TemplateVersionCreate,
    TemplateVersionUpdate,
)


class Templates(Resource):
    endpoint = "v3/templates"

    async def get(self, template_id: str | None = None) -> httpx.Response:
        """List all templates, or retrieve one when template_id is given."""
        if template_id is None:
            return await self._dispatcher.get(self._path())
        return await self._dispatcher.get(self._path(template_id))

    async def post(self, name: str) -> httpx.Response:
        """Create a template."""
        return await self._dispatcher.post(self._path(), build_payload(NamePayload, name=name))

    async def patch(self, template_id: str, name: str) -> httpx.Response:
        """Rename a template."""
        data = build_payload(NamePayload, name=name)
        return await self._dispatcher.patch(self._path(template_id), data)

    async def delete(self, template_id: str) -> httpx.Response:
        """Delete a template and all of its versions."""
        return await self._dispatcher.delete(self._path(template_id))


class Versions(Resource):
    """Versions of a transactional template.

    Only one version of a template is active at a time; activating a version
    deactivates the others.
    """

    endpoint = "v3/templates"

    def _version_path(self, template_id: str, *segments: Any) -> str:
        return self._path(template_id, "versions", *segments)

    async def get(self, template_id: str, version_id: str) -> httpx.Response:
        """Retrieve a template version."""
        return await self._dispatcher.get(self._version_path(template_id, version_id))

    async def post(
        self,
        template_id: str,
        name: str,
        subject: str,
        html_content: str | None = None,
        plain_content: str | None = None,
        active: bool = True,
    ) -> httpx.Response:
        """Create a new version of a template.

        Args:
            template_id: Template the version belongs to.
            name: Version name.
            subject: Subject line; may contain the <%subject%> tag.
            html_content: HTML body; may contain the <%body%> tag.
            plain_content: Plain text body.
            active: Make this the active version.

        Returns:
            The API response.
        """
        data = build_payload(
            TemplateVersionCreate,
            name=name,
            subject=subject,
            html_content=html_content,
            plain_content=plain_content,
            active=active,
        )
        return await self._dispatcher.post(self._version_path(template_id), data)

    async def patch(self, template_id: str, version_id: str, **fields: Any) -> httpx.Response:
        """Update a template version.

        Args:
            template_id: Template the version belongs to.
            version_id: Version to update.
            **fields: Fields to update (name, subject, html_content,
                plain_content, active).

        Returns:
            The API response.

        Raises:
            SendGridValidationError: If no valid field is given.
        """
        valid_fields = {
            k: v
            for k, v in fields.items()
            if k in TemplateVersionUpdate.model_fields and v is not None
        }
        if not valid_fields:
            raise SendGridValidationError("No valid fields to update", field="fields")

        data = build_payload(TemplateVersionUpdate, **valid_fields)
        return await self._dispatcher.patch(self._version_path(template_id, version_id), data)

    async def delete(self, template_id: str, version_id: str) -> httpx.Response:
        """Delete a template version."""
        return await self._dispatcher.delete(self._version_path(template_id, version_id))

    async def activate(self, template_id: str, version_id: str) -> httpx.Response:
        """Make a version the active version of its template."""
        return await self._dispatcher.post(
            self._version_path(template_id, version_id, "activate"), {}
        )
