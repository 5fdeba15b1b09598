"""
Sensitive data sanitization.

Keeps credentials out of logs and terminal output: headers are redacted,
request bodies lose their token fields, and tokens shown to a user are masked.
"""

from typing import Any, Dict, Optional, Set

from ...constants import TOKEN_MASK_VISIBLE_CHARS


class SensitiveDataSanitizer:
    """Sanitize sensitive data from payloads and headers."""

    SENSITIVE_PAYLOAD_KEYS: Set[str] = {
        "password",
        "token",
        "refresh",
        "access",
        "secret",
        "authorization",
    }

    SENSITIVE_HEADER_KEYS: Set[str] = {
        "authorization",
        "proxy-authorization",
        "cookie",
        "set-cookie",
        "x-api-key",
        "x-auth-token",
    }

    @classmethod
    def sanitize_payload(cls, payload: Any) -> Any:
        """Return a copy of ``payload`` with sensitive fields redacted."""
        if not isinstance(payload, dict):
            return payload

        sanitized = {}
        for key, value in payload.items():
            key_lower = str(key).lower()
            if any(sensitive in key_lower for sensitive in cls.SENSITIVE_PAYLOAD_KEYS):
                if isinstance(value, str):
                    sanitized[key] = f"[REDACTED_{len(value)}_CHARS]"
                else:
                    sanitized[key] = "[REDACTED]"
            elif isinstance(value, dict):
                sanitized[key] = cls.sanitize_payload(value)
            else:
                sanitized[key] = value

        return sanitized

    @classmethod
    def sanitize_headers(cls, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        """Return a copy of ``headers`` with credential headers redacted."""
        if not headers:
            return {}

        return {
            key: "[REDACTED]" if key.lower() in cls.SENSITIVE_HEADER_KEYS else value
            for key, value in headers.items()
        }


def mask_token(token: Optional[str], visible: int = TOKEN_MASK_VISIBLE_CHARS) -> str:
    """Mask a token for display, keeping only a short prefix.

    >>> mask_token("abcdefghijkl")
    'abcd********'
    """
    if not token:
        return "<none>"
    if len(token) <= visible:
        return "*" * len(token)
    return token[:visible] + "*" * min(len(token) - visible, 8)
