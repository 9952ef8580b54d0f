"""Shared HTTP client configuration."""

import httpx

from sendgrid_sdk._internal.request.models import MEDIA_TYPE, ClientConfig


def build_headers(config: ClientConfig) -> dict[str, str]:
    """Build the headers attached to every outbound request.

    Args:
        config: Dispatcher configuration.

    Returns:
        Accept, Authorization and User-Agent headers.
    """
    return {
        "Accept": MEDIA_TYPE,
        "Authorization": config.auth.header_value(),
        "User-Agent": config.user_agent,
    }


def create_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Create a configured, single-use async HTTP client.

    The caller owns the client and must close it (use it as an async
    context manager).

    Args:
        config: Dispatcher configuration.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=config.timeout,
        base_url=config.base_uri,
        headers=build_headers(config),
    )
