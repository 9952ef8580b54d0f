"""Public models for the SendGrid SDK."""

from sendgrid_sdk._internal.request.models import BasicAuth, BearerAuth, ClientConfig, Method
from sendgrid_sdk.resources.models import (
    NamePayload,
    RecipientEmails,
    StatsQuery,
    TemplateVersionCreate,
    TemplateVersionUpdate,
    UnsubscribeGroupCreate,
)

__all__ = [
    "BasicAuth",
    "BearerAuth",
    "ClientConfig",
    "Method",
    "NamePayload",
    "RecipientEmails",
    "StatsQuery",
    "TemplateVersionCreate",
    "TemplateVersionUpdate",
    "UnsubscribeGroupCreate",
]
