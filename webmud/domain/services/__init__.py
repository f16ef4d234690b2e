"""Domain services - pure business logic operations."""

from .connection_state_machine import ConnectionStateMachine
from .markup import format_echo, format_notice
from .message_codec import DEFAULT_EXTRACTORS, FieldExtractor, MessageCodec

__all__ = [
    "ConnectionStateMachine",
    "MessageCodec",
    "FieldExtractor",
    "DEFAULT_EXTRACTORS",
    "format_echo",
    "format_notice",
]
