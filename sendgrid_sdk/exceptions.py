"""Public exceptions for the SendGrid SDK."""


class SendGridError(Exception):
    """Base exception for all SendGrid SDK errors."""


class SendGridConfigError(SendGridError):
    """Configuration error (invalid base URI, malformed env vars)."""


class SendGridValidationError(SendGridError):
    """Validation error for request arguments or payloads."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
