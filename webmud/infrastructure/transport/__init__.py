"""Transport implementations."""

from .websocket_transport import DEFAULT_OPEN_TIMEOUT, TransportEvents, WebSocketTransport

__all__ = [
    "WebSocketTransport",
    "TransportEvents",
    "DEFAULT_OPEN_TIMEOUT",
]
