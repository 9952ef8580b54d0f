"""Redaction of credentials in headers written to debug output."""

from collections.abc import Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of headers with sensitive values replaced.

    Header names are matched case-insensitively. For Authorization headers the
    scheme (``Bearer``/``Basic``) is kept so debug output still shows which
    auth mode was used.

    Args:
        headers: Any mapping of header names to values (including httpx.Headers).

    Returns:
        A new plain dict. The input is never mutated.
    """
    result: dict[str, str] = {}
    for key, value in headers.items():
        key_lower = key.lower()
        if key_lower in ("authorization", "proxy-authorization"):
            scheme, _, credentials = value.partition(" ")
            result[key] = f"{scheme} {REDACTED_VALUE}" if credentials else REDACTED_VALUE
        elif key_lower in REDACT_HEADERS:
            result[key] = REDACTED_VALUE
        else:
            result[key] = value
    return result
