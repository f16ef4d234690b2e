"""Connection state value objects."""

from enum import Enum


class ConnectionState(str, Enum):
    """Lifecycle state of the primary transport."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERRORED = "errored"


class LinkStatus(str, Enum):
    """Status of a link reported inside protocol messages."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    @classmethod
    def from_wire(cls, value: object) -> "LinkStatus | None":
        """Map a wire literal to a status, None for anything unrecognized."""
        if value == "connected":
            return cls.CONNECTED
        if value == "disconnected":
            return cls.DISCONNECTED
        return None
