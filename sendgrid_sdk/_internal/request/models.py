"""Pydantic models for request dispatcher configuration.

Authentication is an explicit two-variant type chosen once at construction:
either a bearer API key or a basic username/password pair.
"""

import base64
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sendgrid_sdk._version import __version__

# =============================================================================
# Constants
# =============================================================================

DEFAULT_BASE_URI = "https://api.sendgrid.com/"
DEFAULT_TIMEOUT = 5.0  # seconds, same as httpx's own default
MEDIA_TYPE = "application/json"
USER_AGENT_TAG = "python"

BAD_METHOD_MESSAGE = (
    '{"errors":[{"message":"Bad method call, supported methods are GET, POST, PATCH and DELETE"}]}'
)

# =============================================================================
# Methods
# =============================================================================


class Method(str, Enum):
    """HTTP verbs supported by the dispatcher."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: "str | Method") -> "Method | None":
        """Parse a verb case-insensitively. Returns None for unsupported verbs."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


# =============================================================================
# Authentication
# =============================================================================


class BearerAuth(BaseModel):
    """API key authentication.

    A missing key still produces a well-formed header carrying only the scheme.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["bearer"] = "bearer"
    api_key: str | None = Field(default=None, repr=False)

    def header_value(self) -> str:
        if not self.api_key:
            return "Bearer"
        return f"Bearer {self.api_key}"


class BasicAuth(BaseModel):
    """Username/password authentication."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["basic"] = "basic"
    username: str
    password: str = Field(repr=False)

    def header_value(self) -> str:
        # non-ASCII characters are sent as "?"
        raw = f"{self.username}:{self.password}".encode("ascii", errors="replace")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


Auth = Annotated[BearerAuth | BasicAuth, Field(discriminator="kind")]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def resolve_auth(
    api_key: str | None = None,
    username: str | None = None,
    password: str | None = None,
) -> BearerAuth | BasicAuth:
    """Pick the authentication variant for the given credentials.

    Basic auth is used iff both username and password are non-blank;
    otherwise bearer auth with the API key (which may itself be empty).

    Args:
        api_key: SendGrid API key.
        username: SendGrid account username.
        password: SendGrid account password.

    Returns:
        A BasicAuth or BearerAuth instance.
    """
    if not _is_blank(username) and not _is_blank(password):
        return BasicAuth(username=username, password=password)  # type: ignore[arg-type]
    return BearerAuth(api_key=api_key)


# =============================================================================
# Client Configuration
# =============================================================================


class ClientConfig(BaseModel):
    """Immutable configuration captured by the dispatcher at construction.

    Fields:
        base_uri: Absolute http(s) root of the API, e.g. https://api.sendgrid.com/
        auth: Bearer or basic authentication
        version: Library release string embedded in the User-Agent
        timeout: Request timeout in seconds
        debug: Enable debug logging to stderr
    """

    model_config = ConfigDict(frozen=True)

    base_uri: str = DEFAULT_BASE_URI
    auth: Auth = Field(default_factory=BearerAuth)
    version: str = __version__
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    @field_validator("base_uri")
    @classmethod
    def base_uri_absolute(cls, v: str) -> str:
        scheme, sep, rest = v.partition("://")
        if not sep or scheme.lower() not in ("http", "https") or not rest.split("/")[0]:
            raise ValueError(f"base_uri must be an absolute http(s) URL, got {v!r}")
        return v

    @property
    def user_agent(self) -> str:
        return f"sendgrid/{self.version};{USER_AGENT_TAG}"
