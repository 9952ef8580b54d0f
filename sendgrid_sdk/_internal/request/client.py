"""Request dispatcher for the SendGrid v3 API."""

import os
import sys
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from sendgrid_sdk._internal.http import create_http_client
from sendgrid_sdk._internal.request.models import (
    BAD_METHOD_MESSAGE,
    DEFAULT_BASE_URI,
    DEFAULT_TIMEOUT,
    BasicAuth,
    BearerAuth,
    ClientConfig,
    Method,
    resolve_auth,
)
from sendgrid_sdk._internal.request.redaction import redact_headers
from sendgrid_sdk._version import __version__
from sendgrid_sdk.exceptions import SendGridConfigError, SendGridValidationError

TRANSPORT_ERROR_PREFIX = "Python httpx.HTTPError, raw message: \n\n"
GENERIC_ERROR_PREFIX = "Python Exception, raw message: \n\n"

# A freshly constructed response carries 200 until something sets it.
EXCEPTION_STATUS_CODE = 200


class RequestDispatcher:
    """Credential-attaching HTTP dispatcher for the SendGrid API.

    Every call opens its own httpx.AsyncClient, attaches the Accept,
    Authorization and User-Agent headers, sends one request and closes the
    client again. Calls never raise: transport failures and unexpected errors
    come back as synthesized responses whose body describes the error, so
    callers must inspect the status code and body.

    Use `RequestDispatcher.from_api_key()`, `RequestDispatcher.from_credentials()`
    or `RequestDispatcher.from_env()` to create a dispatcher.
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
        """Initialize the dispatcher.

        Args:
            api_key: SendGrid API key, used unless username and password are both set.
            username: SendGrid username for basic auth.
            password: SendGrid password for basic auth.
            base_uri: Absolute root of the API. Endpoints are resolved against it.
            version: Library version embedded in the User-Agent header.
            timeout: Request timeout in seconds.
            debug: Enable debug logging to stderr.

        Raises:
            SendGridConfigError: If the configuration is invalid.
        """
        try:
            self._config = ClientConfig(
                base_uri=base_uri,
                auth=resolve_auth(api_key, username, password),
                version=version,
                timeout=timeout,
                debug=debug,
            )
        except ValidationError as e:
            raise SendGridConfigError(f"Invalid client configuration: {e}") from e

    @classmethod
    def from_api_key(
        cls, api_key: str | None, base_uri: str = DEFAULT_BASE_URI, **options: Any
    ) -> "RequestDispatcher":
        """Create a dispatcher using bearer API key authentication."""
        return cls(api_key, base_uri=base_uri, **options)

    @classmethod
    def from_credentials(
        cls,
        username: str | None,
        password: str | None,
        base_uri: str = DEFAULT_BASE_URI,
        **options: Any,
    ) -> "RequestDispatcher":
        """Create a dispatcher using basic username/password authentication.

        If either value is blank the dispatcher falls back to bearer auth with
        an empty key, like the API-key form with no key.
        """
        return cls(username=username, password=password, base_uri=base_uri, **options)

    @classmethod
    def from_env(cls) -> "RequestDispatcher":
        """Create a dispatcher from environment variables.

        Environment variables:
            SENDGRID_API_KEY: API key for bearer auth.
            SENDGRID_USERNAME: Username for basic auth.
            SENDGRID_PASSWORD: Password for basic auth.
            SENDGRID_BASE_URI: Override the API root.
            SENDGRID_TIMEOUT_MS: Request timeout in milliseconds.
            SENDGRID_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured RequestDispatcher.

        Raises:
            SendGridConfigError: If a variable holds an invalid value.
        """
        return cls(**config_from_env())

    @property
    def config(self) -> ClientConfig:
        """The immutable configuration captured at construction."""
        return self._config

    @property
    def auth(self) -> BearerAuth | BasicAuth:
        return self._config.auth

    @property
    def base_uri(self) -> str:
        return self._config.base_uri

    @property
    def version(self) -> str:
        return self._config.version

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[sendgrid-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Public Verbs
    # =========================================================================

    async def get(self, endpoint: str) -> httpx.Response:
        """Send a GET request.

        Args:
            endpoint: Resource endpoint relative to the base URI, no leading slash.

        Returns:
            The API response, or a synthesized response describing the error.
        """
        return await self._request(Method.GET, endpoint)

    async def post(self, endpoint: str, data: Mapping[str, Any]) -> httpx.Response:
        """Send a POST request with a JSON object body.

        Args:
            endpoint: Resource endpoint relative to the base URI, no leading slash.
            data: JSON object to send as the request body.

        Returns:
            The API response, or a synthesized response describing the error.
        """
        return await self._request(Method.POST, endpoint, data)

    async def patch(self, endpoint: str, data: Mapping[str, Any]) -> httpx.Response:
        """Send a PATCH request with a JSON object body.

        The target URL is the base URI and the endpoint joined as plain strings.

        Args:
            endpoint: Resource endpoint relative to the base URI, no leading slash.
            data: JSON object to send as the request body.

        Returns:
            The API response, or a synthesized response describing the error.
        """
        return await self._request(Method.PATCH, endpoint, data)

    async def delete(self, endpoint: str) -> httpx.Response:
        """Send a DELETE request.

        Args:
            endpoint: Resource endpoint relative to the base URI, no leading slash.

        Returns:
            The API response, or a synthesized response describing the error.
        """
        return await self._request(Method.DELETE, endpoint)

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def _request(
        self,
        method: Method | str,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Dispatch one request and always return a response.

        Args:
            method: HTTP verb, case-insensitive.
            endpoint: Resource endpoint, do not prepend a slash.
            data: JSON object body for POST and PATCH.

        Returns:
            The API response; a 405 response for unsupported verbs; or a
            response whose body carries the error message if anything raised.
        """
        try:
            async with create_http_client(self._config) as client:
                return await self._send(client, method, endpoint, data)
        except httpx.HTTPError as e:
            self._log_debug(f"{method} {endpoint} transport error: {e}")
            return self._error_response(TRANSPORT_ERROR_PREFIX, e, method, endpoint)
        except Exception as e:
            self._log_debug(f"{method} {endpoint} error: {e}")
            return self._error_response(GENERIC_ERROR_PREFIX, e, method, endpoint)

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: Method | str,
        endpoint: str,
        data: Mapping[str, Any] | None,
    ) -> httpx.Response:
        verb = Method.parse(method)
        if verb is None:
            self._log_debug(f"Unsupported method {method!r}")
            return httpx.Response(
                405,
                content=BAD_METHOD_MESSAGE.encode("utf-8"),
                request=self._placeholder_request(method, endpoint),
            )

        self._log_debug(f"{verb.value} {endpoint} headers={redact_headers(client.headers)}")

        if verb is Method.GET:
            response = await client.get(endpoint)
        elif verb is Method.POST:
            response = await client.post(endpoint, json=_json_object(data))
        elif verb is Method.PATCH:
            request = client.build_request(
                "PATCH", self._config.base_uri + endpoint, json=_json_object(data)
            )
            response = await client.send(request)
        else:
            response = await client.delete(endpoint)

        self._log_debug(f"{verb.value} {response.request.url} -> {response.status_code}")
        return response

    def _target_url(self, verb: Method | None, endpoint: str) -> str:
        """The URL a verb is sent to, resolved the same way as in `_send`."""
        if verb is Method.PATCH:
            return self._config.base_uri + endpoint
        # httpx forces a trailing slash onto base_url and strips the endpoint's leading one
        base = self._config.base_uri
        if not base.endswith("/"):
            base += "/"
        return base + endpoint.lstrip("/")

    def _placeholder_request(self, method: Method | str, endpoint: Any) -> httpx.Request:
        """Build the request attached to a synthesized response."""
        verb = Method.parse(method)
        name = verb.value if verb is not None else str(method).strip().upper() or "GET"
        try:
            return httpx.Request(name, self._target_url(verb, str(endpoint)))
        except httpx.InvalidURL:
            return httpx.Request(name, self._config.base_uri)

    def _error_response(
        self, prefix: str, error: Exception, method: Method | str, endpoint: Any
    ) -> httpx.Response:
        return httpx.Response(
            EXCEPTION_STATUS_CODE,
            content=(prefix + str(error)).encode("utf-8"),
            request=self._placeholder_request(method, endpoint),
        )


def _json_object(data: Mapping[str, Any] | None) -> dict[str, Any]:
    """Validate that a request body is a JSON object."""
    if not isinstance(data, Mapping):
        raise SendGridValidationError(
            f"Request body must be a JSON object, got {type(data).__name__}",
            field="data",
        )
    return dict(data)


def config_from_env() -> dict[str, Any]:
    """Read dispatcher keyword arguments from SENDGRID_* environment variables."""
    timeout_ms = os.environ.get("SENDGRID_TIMEOUT_MS", str(int(DEFAULT_TIMEOUT * 1000)))
    try:
        timeout = int(timeout_ms) / 1000
    except ValueError as e:
        raise SendGridConfigError(f"SENDGRID_TIMEOUT_MS must be an integer, got {timeout_ms!r}") from e

    return {
        "api_key": os.environ.get("SENDGRID_API_KEY"),
        "username": os.environ.get("SENDGRID_USERNAME"),
        "password": os.environ.get("SENDGRID_PASSWORD"),
        "base_uri": os.environ.get("SENDGRID_BASE_URI") or DEFAULT_BASE_URI,
        "timeout": timeout,
        "debug": os.environ.get("SENDGRID_DEBUG", "") == "1",
    }
