"""User-facing SendGridClient.

Example usage:
    from sendgrid_sdk import SendGridClient

    client = SendGridClient(api_key="SG.xxxxx")

    response = await client.templates.post("Welcome email")
    if response.status_code == 201:
        template_id = response.json()["id"]

    # Raw verbs for endpoints without a wrapper
    response = await client.get("v3/user/profile")
"""

from collections.abc import Mapping
from typing import Any

import httpx

from sendgrid_sdk._internal.request.client import RequestDispatcher, config_from_env
from sendgrid_sdk._internal.request.models import DEFAULT_BASE_URI, DEFAULT_TIMEOUT
from sendgrid_sdk._version import __version__
from sendgrid_sdk.resources import (
    APIKeys,
    Batches,
    GlobalStats,
    GlobalSuppressions,
    Suppressions,
    Templates,
    UnsubscribeGroups,
    Versions,
)


class SendGridClient:
    """Client for the SendGrid v3 Web API.

    Authenticates with an API key, or with a username and password when both
    are given. Resource wrappers share one RequestDispatcher.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        username: str | None = None,
        password: str | None = None,
        base_uri: str = DEFAULT_BASE_URI,
        version: str = __version__,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: SendGrid API key.
            username: SendGrid username (basic auth, requires password).
            password: SendGrid password (basic auth, requires username).
            base_uri: Base SendGrid API URI.
            version: Library version reported in the User-Agent header.
            timeout: Request timeout in seconds.
            debug: Enable debug logging to stderr.

        Raises:
            SendGridConfigError: If the configuration is invalid.
        """
        self.dispatcher = RequestDispatcher(
            api_key,
            username=username,
            password=password,
            base_uri=base_uri,
            version=version,
            timeout=timeout,
            debug=debug,
        )
        self.api_keys = APIKeys(self.dispatcher)
        self.unsubscribe_groups = UnsubscribeGroups(self.dispatcher)
        self.suppressions = Suppressions(self.dispatcher)
        self.global_suppressions = GlobalSuppressions(self.dispatcher)
        self.global_stats = GlobalStats(self.dispatcher)
        self.templates = Templates(self.dispatcher)
        self.versions = Versions(self.dispatcher)
        self.batches = Batches(self.dispatcher)

    @classmethod
    def from_env(cls) -> "SendGridClient":
        """Create a client from SENDGRID_* environment variables.

        See `RequestDispatcher.from_env()` for the variables read.
        """
        return cls(**config_from_env())

    @property
    def version(self) -> str:
        return self.dispatcher.version

    async def get(self, endpoint: str) -> httpx.Response:
        return await self.dispatcher.get(endpoint)

    async def post(self, endpoint: str, data: Mapping[str, Any]) -> httpx.Response:
        return await self.dispatcher.post(endpoint, data)

    async def patch(self, endpoint: str, data: Mapping[str, Any]) -> httpx.Response:
        return await self.dispatcher.patch(endpoint, data)

    async def delete(self, endpoint: str) -> httpx.Response:
        return await self.dispatcher.delete(endpoint)
