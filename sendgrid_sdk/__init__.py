"""SendGrid SDK for Python.

A thin async client for the SendGrid v3 Web API.

Public API:
    SendGridClient - User-facing client with resource wrappers
    exceptions - SendGridError and subclasses

Internal (not for direct use):
    _internal.request - Request dispatcher
"""

from sendgrid_sdk._version import __version__
from sendgrid_sdk.client import SendGridClient
from sendgrid_sdk.exceptions import (
    SendGridConfigError,
    SendGridError,
    SendGridValidationError,
)

__all__ = [
    "__version__",
    "SendGridClient",
    "SendGridError",
    "SendGridConfigError",
    "SendGridValidationError",
]
