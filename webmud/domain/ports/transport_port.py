"""Transport port - interface for the bidirectional text channel."""

from typing import Protocol


class TransportError(Exception):
    """Raised by transports when the channel fails or is unavailable."""


class TransportPort(Protocol):
    """Protocol for the single connection a session talks through.

    Infrastructure implements this (websocket client, test fakes).
    Lifecycle events flow the other way, into the session's
    ``on_connecting``/``on_open``/``on_frame``/``on_close``/``on_error``.
    """

    @property
    def is_open(self) -> bool:
        """Whether frames can currently be written."""
        ...

    def send(self, data: str) -> None:
        """Write one text frame. Raises TransportError on failure."""
        ...

    def close(self) -> None:
        """Close the channel."""
        ...
