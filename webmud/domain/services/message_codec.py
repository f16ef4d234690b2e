"""Message codec - decodes JSON frames into typed messages."""

import json
from collections.abc import Callable
from typing import Any

from ..values import (
    DecodeResult,
    LinkStatus,
    Message,
    ProxyConnStatus,
    RemoteConnStatus,
    ServerStatus,
    TextOutput,
)

FieldExtractor = Callable[[dict[str, Any]], Message | None]


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def extract_text_output(data: dict[str, Any]) -> Message | None:
    value = data.get("message")
    return TextOutput(_as_text(value)) if value else None


def extract_server_status(data: dict[str, Any]) -> Message | None:
    value = data.get("server_status")
    return ServerStatus(_as_text(value)) if value else None


def extract_remote_status(data: dict[str, Any]) -> Message | None:
    status = LinkStatus.from_wire(data.get("conn_status"))
    return RemoteConnStatus(status) if status else None


def extract_proxy_status(data: dict[str, Any]) -> Message | None:
    status = LinkStatus.from_wire(data.get("fconn_status"))
    return ProxyConnStatus(status) if status else None


# Field-check order is part of the protocol
DEFAULT_EXTRACTORS: tuple[FieldExtractor, ...] = (
    extract_text_output,
    extract_server_status,
    extract_remote_status,
    extract_proxy_status,
)


class MessageCodec:
    """Decode raw text frames.

    A frame is a sparse JSON object; each recognized field is read by
    its own extractor, in order, and yields at most one message.
    Unknown fields are ignored. Decoding never raises.
    """

    def __init__(self, extractors: tuple[FieldExtractor, ...] = DEFAULT_EXTRACTORS) -> None:
        self._extractors = extractors

    def decode(self, raw: str | bytes) -> DecodeResult:
        """Decode one frame into zero or more messages."""
        try:
            data = json.loads(raw)
        # ValueError includes JSONDecodeError, UnicodeDecodeError and the int digit limit
        except (ValueError, RecursionError, TypeError) as e:
            return DecodeResult.malformed(str(e))

        if not isinstance(data, dict):
            return DecodeResult.malformed(f"expected object, got {type(data).__name__}")

        messages = []
        for extract in self._extractors:
            message = extract(data)
            if message is not None:
                messages.append(message)
        return DecodeResult(messages=tuple(messages))
