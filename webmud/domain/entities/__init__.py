"""Domain entities - objects with identity and lifecycle."""

from .output_buffer import DEFAULT_MSG_LIMIT, ENVELOPE_TEMPLATE, OutputBuffer

__all__ = [
    "OutputBuffer",
    "DEFAULT_MSG_LIMIT",
    "ENVELOPE_TEMPLATE",
]
