"""Sanitizer port - makes untrusted text safe to render."""

from typing import Protocol


class SanitizerPort(Protocol):
    """Protocol for markup sanitization.

    Implementations may let a small allow-list of elements and
    attributes through; everything else must be neutralized.
    """

    def sanitize(self, text: str) -> str:
        """Return ``text`` safe for rendering."""
        ...
