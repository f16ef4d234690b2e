"""HTML sanitizer backed by bleach."""

from collections.abc import Mapping, Sequence

import bleach

# Elements the server is allowed to style output with
DEFAULT_ALLOWED: dict[str, list[str]] = {
    "span": ["class"],
    "br": [],
}


class BleachSanitizer:
    """Allow-list sanitizer for server and echo markup.

    Disallowed markup is escaped rather than stripped so the user still
    sees what was sent.
    """

    def __init__(self, allowed: Mapping[str, Sequence[str]] | None = None) -> None:
        allowed = DEFAULT_ALLOWED if allowed is None else allowed
        self._tags = frozenset(allowed)
        self._attributes = {tag: list(attrs) for tag, attrs in allowed.items()}

    @property
    def allowed_tags(self) -> frozenset[str]:
        return self._tags

    def sanitize(self, text: str) -> str:
        if not text:
            return ""
        return bleach.clean(
            text,
            tags=self._tags,
            attributes=self._attributes,
            strip=False,
        )
