"""
Security utilities for authclient.

Redaction and masking of credentials before they reach logs or a terminal.
"""

from .sanitizer import SensitiveDataSanitizer, mask_token

__all__ = ["SensitiveDataSanitizer", "mask_token"]
