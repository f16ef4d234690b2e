"""Shared test fixtures and configuration."""

import pytest

from webmud.application.services import ClientSession
from webmud.domain import (
    ConnectionState,
    ConnectionStateMachine,
    LinkStatus,
    MessageCodec,
    OutputBuffer,
    OutputEntry,
    TransportError,
)
from webmud.infrastructure.sanitizer import BleachSanitizer

# ============= Mock Fixtures =============


class PassthroughSanitizer:
    """Sanitizer that returns text unchanged."""

    def sanitize(self, text: str) -> str:
        return text


class FakeTransport:
    """Fake transport for testing."""

    def __init__(self):
        self.sent: list[str] = []
        self.closed = False
        self.is_open = True
        self.fail_writes = False

    def send(self, data: str) -> None:
        if self.fail_writes:
            raise TransportError("write failed")
        self.sent.append(data)

    def close(self) -> None:
        self.closed = True
        self.is_open = False


class RecordingObserver:
    """Records every observer callback in order."""

    def __init__(self):
        self.events: list[tuple[str, object]] = []

    def on_append(self, entry: OutputEntry) -> None:
        self.events.append(("append", entry))

    def on_evict(self, entry: OutputEntry) -> None:
        self.events.append(("evict", entry))

    def on_status(self, text: str) -> None:
        self.events.append(("status", text))

    def on_transport_state(self, state: ConnectionState) -> None:
        self.events.append(("transport", state))

    def on_remote_status(self, status: LinkStatus) -> None:
        self.events.append(("remote", status))

    def on_proxy_status(self, status: LinkStatus) -> None:
        self.events.append(("proxy", status))

    def of(self, kind: str) -> list[object]:
        """Payloads of one event kind."""
        return [payload for name, payload in self.events if name == kind]


@pytest.fixture
def passthrough_sanitizer():
    return PassthroughSanitizer()


@pytest.fixture
def bleach_sanitizer():
    """Sanitizer with the default span/br allow-list."""
    return BleachSanitizer()


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def recorder():
    return RecordingObserver()


# ============= Domain Fixtures =============


@pytest.fixture
def output_buffer(passthrough_sanitizer):
    """Empty output buffer with the default limit."""
    return OutputBuffer(sanitizer=passthrough_sanitizer)


@pytest.fixture
def small_buffer(passthrough_sanitizer):
    """Output buffer holding three entries."""
    return OutputBuffer(sanitizer=passthrough_sanitizer, msg_limit=3)


@pytest.fixture
def codec():
    return MessageCodec()


@pytest.fixture
def state_machine():
    return ConnectionStateMachine()


# ============= Session Fixtures =============


@pytest.fixture
def session(codec, output_buffer, state_machine, fake_transport):
    """Session wired to a fake transport."""
    return ClientSession(
        codec=codec,
        output_buffer=output_buffer,
        state_machine=state_machine,
        transport=fake_transport,
    )


@pytest.fixture
def detached_session(codec, output_buffer, state_machine):
    """Session without a transport."""
    return ClientSession(codec=codec, output_buffer=output_buffer, state_machine=state_machine)
