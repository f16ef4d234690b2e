"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import DEFAULT_MSG_LIMIT, ENVELOPE_TEMPLATE, OutputBuffer

# Ports
from .ports import (
    ConnectionObserver,
    OutputObserver,
    SanitizerPort,
    TransportError,
    TransportPort,
)

# Services
from .services import (
    DEFAULT_EXTRACTORS,
    ConnectionStateMachine,
    FieldExtractor,
    MessageCodec,
    format_echo,
    format_notice,
)

# Value Objects
from .values import (
    ConnectionState,
    DecodeError,
    DecodeErrorKind,
    DecodeResult,
    EntryKind,
    LinkStatus,
    Message,
    OutputEntry,
    ProxyConnStatus,
    RemoteConnStatus,
    ServerStatus,
    TextOutput,
)

__all__ = [
    # Values
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
    # Entities
    "OutputBuffer",
    "DEFAULT_MSG_LIMIT",
    "ENVELOPE_TEMPLATE",
    # Services
    "ConnectionStateMachine",
    "MessageCodec",
    "FieldExtractor",
    "DEFAULT_EXTRACTORS",
    "format_echo",
    "format_notice",
    # Ports
    "SanitizerPort",
    "TransportPort",
    "TransportError",
    "OutputObserver",
    "ConnectionObserver",
]
