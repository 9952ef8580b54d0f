"""Request dispatcher for the SendGrid API.

The dispatcher is the only component that talks to the network. Resource
wrappers call its four verbs.
"""

from sendgrid_sdk._internal.request.client import RequestDispatcher
from sendgrid_sdk._internal.request.models import (
    DEFAULT_BASE_URI,
    BasicAuth,
    BearerAuth,
    ClientConfig,
    Method,
    resolve_auth,
)

__all__ = [
    "RequestDispatcher",
    "ClientConfig",
    "BearerAuth",
    "BasicAuth",
    "Method",
    "resolve_auth",
    "DEFAULT_BASE_URI",
]
