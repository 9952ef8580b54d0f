"""Internal modules for the SendGrid SDK.

These modules back the public SendGridClient and are not intended for
direct use in application code.

Modules:
    request - Request dispatcher and its configuration models
    http - Shared HTTP client configuration
"""
