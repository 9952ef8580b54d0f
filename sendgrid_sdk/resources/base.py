"""Shared plumbing for resource wrappers."""

from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from sendgrid_sdk._internal.request.client import RequestDispatcher
from sendgrid_sdk.exceptions import SendGridValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class Resource:
    """Base class for a SendGrid API resource.

    Subclasses set `endpoint` to the resource root (relative, no leading slash)
    and map their operations onto the dispatcher's verbs.
    """

    endpoint: str = ""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def _path(self, *segments: Any) -> str:
        """Join the resource root with percent-encoded path segments."""
        parts = [self.endpoint] + [quote(str(s), safe="") for s in segments]
        return "/".join(parts)


def build_payload(model: type[ModelT], **fields: Any) -> dict[str, Any]:
    """Validate fields against a request model and dump them as JSON.

    Raises:
        SendGridValidationError: If the fields don't satisfy the model.
    """
    try:
        instance = model(**fields)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or None
        raise SendGridValidationError(f"Invalid {model.__name__}: {first['msg']}", field=field) from e
    return instance.model_dump(mode="json", exclude_none=True)
