"""Sanitizer implementations."""

from .bleach_sanitizer import DEFAULT_ALLOWED, BleachSanitizer

__all__ = [
    "BleachSanitizer",
    "DEFAULT_ALLOWED",
]
