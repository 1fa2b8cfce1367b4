"""Redaction of credentials in request bodies written to debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "key",
    "token",
    "password",
    "authorization",
    "x-redmine-api-key",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a JSON payload.

    Creates a copy - the original payload is never mutated. Upload tokens
    are redacted too since they grant access to the uploaded file.

    Args:
        payload: The decoded JSON value to redact.

    Returns:
        A new value with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
