"""Tests for the composition root and CLI wiring."""

import asyncio

from webmud.cli import RemoteAutoConnect, pump_lines
from webmud.composition import create_container, create_transport
from webmud.config import Config, OutputConfig, RemoteConfig
from webmud.domain import ConnectionState, EntryKind
from webmud.infrastructure.sanitizer import BleachSanitizer
from webmud.infrastructure.transport import WebSocketTransport


class TestCreateContainer:
    """Tests for create_container."""

    def test_wiring(self):
        """Test the session shares the container's collaborators."""
        container = create_container(config=Config(output=OutputConfig(msg_limit=5)))

        assert container.session.output_buffer is container.output_buffer
        assert container.session.state_machine is container.state_machine
        assert container.session.codec is container.codec
        assert container.output_buffer.msg_limit == 5
        assert isinstance(container.sanitizer, BleachSanitizer)
        assert container.session.transport is None

    def test_loads_config_path(self, tmp_path):
        """Test config is read from the given path."""
        path = tmp_path / "webmud.yaml"
        path.write_text("output:\n  msg_limit: 9\n", encoding="utf-8")

        container = create_container(config_path=path)

        assert container.config.output.msg_limit == 9

    def test_containers_are_independent(self):
        """Test two containers share no state."""
        first = create_container(config=Config())
        second = create_container(config=Config())

        first.session.on_frame('{"message":"hi"}')

        assert len(first.output_buffer) == 1
        assert second.output_buffer.is_empty

    def test_create_transport_attaches(self):
        """Test the transport is attached to the session."""
        container = create_container(config=Config())
        transport = create_transport(container)

        assert isinstance(transport, WebSocketTransport)
        assert container.session.transport is transport
        assert transport.url == container.config.transport.url


class TestRemoteAutoConnect:
    """Tests for the connect-on-open hook."""

    def test_connects_when_open(self, fake_transport):
        """Test the proxy connect command is sent once the transport opens."""
        container = create_container(
            config=Config(remote=RemoteConfig(host="mud.example.org", port=4000))
        )
        container.session.attach_transport(fake_transport)
        container.state_machine.subscribe(RemoteAutoConnect(container))

        container.session.on_connecting()
        assert fake_transport.sent == []

        container.session.on_open()
        assert fake_transport.sent == ["PHUD:CONNECT mud.example.org 4000 false"]

    def test_no_host_no_command(self, fake_transport):
        """Test nothing is sent without a configured host."""
        container = create_container(config=Config())
        container.session.attach_transport(fake_transport)
        container.state_machine.subscribe(RemoteAutoConnect(container))

        container.session.on_open()

        assert container.state_machine.state is ConnectionState.CONNECTED
        assert fake_transport.sent == []


class TestPumpLines:
    """Tests for the input pump."""

    def test_lines_sent_until_eof(self, fake_transport):
        """Test each input line is sent without its line ending."""
        container = create_container(config=Config())
        container.session.attach_transport(fake_transport)

        async def pump():
            reader = asyncio.StreamReader()
            reader.feed_data(b"look\r\nsay hi\n\n")
            reader.feed_eof()
            await pump_lines(reader, container)

        asyncio.run(pump())

        # The blank line is rejected as empty input
        assert fake_transport.sent == ["look", "say hi"]
        kinds = [e.kind for e in container.output_buffer.entries()]
        assert kinds == [EntryKind.ECHO, EntryKind.ECHO]
