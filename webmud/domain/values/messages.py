"""Decoded protocol messages (value objects)."""

from dataclasses import dataclass, field
from enum import Enum

from .connection_state import LinkStatus


@dataclass(frozen=True, slots=True)
class TextOutput:
    """A chunk of content for the output window."""

    text: str


@dataclass(frozen=True, slots=True)
class ServerStatus:
    """A line for the server status channel."""

    payload: str


@dataclass(frozen=True, slots=True)
class RemoteConnStatus:
    """Status of the proxy's leg to the game server."""

    state: LinkStatus


@dataclass(frozen=True, slots=True)
class ProxyConnStatus:
    """Status of the bridge's own upstream leg."""

    state: LinkStatus


Message = TextOutput | ServerStatus | RemoteConnStatus | ProxyConnStatus


class DecodeErrorKind(str, Enum):
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class DecodeError:
    """Why a frame could not be decoded."""

    kind: DecodeErrorKind
    detail: str = ""


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Outcome of decoding one frame."""

    messages: tuple[Message, ...] = field(default_factory=tuple)
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def malformed(cls, detail: str) -> "DecodeResult":
        return cls(error=DecodeError(DecodeErrorKind.MALFORMED, detail))
