"""Pydantic request models for SendGrid API resources.

These models define the JSON bodies and query parameters sent by the
resource wrappers.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_serializer, model_validator

# =============================================================================
# Constants
# =============================================================================

NAME_MAX_LENGTH = 100

StatsAggregation = Literal["day", "week", "month"]

# =============================================================================
# API Keys and Templates
# =============================================================================


class NamePayload(BaseModel):
    """Body for creating or renaming an API key or template."""

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)


# =============================================================================
# Suppression Management
# =============================================================================


class UnsubscribeGroupCreate(BaseModel):
    """Body for creating an unsubscribe group.

    Required fields:
        name: Group name shown to recipients
        description: Group description shown to recipients

    Optional fields:
        is_default: Whether this is the default group (default: False)
    """

    name: str = Field(min_length=1, max_length=30)
    description: str = Field(max_length=100)
    is_default: bool = False


class RecipientEmails(BaseModel):
    """Body for adding addresses to a suppression list."""

    recipient_emails: list[str] = Field(min_length=1)


# =============================================================================
# Template Versions
# =============================================================================


class TemplateVersionCreate(BaseModel):
    """Body for creating a template version.

    The API expects ``active`` as 0 or 1.
    """

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    subject: str
    html_content: str | None = None
    plain_content: str | None = None
    active: bool = True

    @field_serializer("active")
    def serialize_active(self, v: bool) -> int:
        return int(v)


class TemplateVersionUpdate(BaseModel):
    """Body for updating a template version.

    All fields are optional - only provided fields are sent.
    """

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    subject: str | None = None
    html_content: str | None = None
    plain_content: str | None = None
    active: bool | None = None

    @field_serializer("active")
    def serialize_active(self, v: bool | None) -> int | None:
        return None if v is None else int(v)


# =============================================================================
# Stats
# =============================================================================


class StatsQuery(BaseModel):
    """Query parameters for global stats."""

    start_date: date
    end_date: date | None = None
    aggregated_by: StatsAggregation | None = None

    @model_validator(mode="after")
    def end_not_before_start(self) -> "StatsQuery":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
