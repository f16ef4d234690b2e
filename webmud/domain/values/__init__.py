"""Domain value objects - immutable data structures."""

from .connection_state import ConnectionState, LinkStatus
from .messages import (
    DecodeError,
    DecodeErrorKind,
    DecodeResult,
    Message,
    ProxyConnStatus,
    RemoteConnStatus,
    ServerStatus,
    TextOutput,
)
from .output_entry import EntryKind, OutputEntry

__all__ = [
    "ConnectionState",
    "LinkStatus",
    "Message",
    "TextOutput",
    "ServerStatus",
    "RemoteConnStatus",
    "ProxyConnStatus",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeResult",
    "EntryKind",
    "OutputEntry",
]
