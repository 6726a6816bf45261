"""Masks credentials before they reach the log.

Covers what this service actually handles: bearer tokens, Cloudinary API
keys and request signatures, and passwords embedded in MongoDB URIs.
"""

import re
from typing import Any

MASK = "[REDACTED]"

# each pattern captures (prefix)(secret); only the secret is masked
_SECRET_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"(bearer\s+)([\w\-.~+/=]+)",
        r"(authorization:\s*)([\w\-.~+/=]+)",
        r"(api_(?:key|secret)\s*[:=]\s*['\"]?)([\w\-.~+/=]+)",
        r"(signature\s*[:=]\s*['\"]?)([0-9a-f]+)",
        r"(://[^:/\s@]+:)([^@\s]+)(?=@)",
    )
]

_SENSITIVE_KEY_PARTS = (
    "authorization",
    "api_key",
    "api_secret",
    "signature",
    "token",
    "password",
    "secret",
)


def _is_sensitive(key: Any) -> bool:
    lowered = str(key).lower()
    return any(part in lowered for part in _SENSITIVE_KEY_PARTS)


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(lambda m: m.group(1) + MASK, text)
    return text


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``obj`` with sensitive keys masked and string values scrubbed, recursively."""
    return {key: MASK if _is_sensitive(key) else _redact_value(value) for key, value in obj.items()}


def _redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, list):
        return [_redact_value(item) for item in value]
    return value
