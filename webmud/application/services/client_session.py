"""Client session - wires transport events to the codec, buffer and state."""

import logging

from webmud.domain import (
    ConnectionStateMachine,
    DecodeResult,
    EntryKind,
    Message,
    MessageCodec,
    OutputBuffer,
    ProxyConnStatus,
    RemoteConnStatus,
    ServerStatus,
    TextOutput,
    TransportError,
    TransportPort,
    format_echo,
    format_notice,
)
from webmud.domain.services.markup import NOTICE_CLASS

logger = logging.getLogger(__name__)

CONNECT_COMMAND = "PHUD:CONNECT"
TRANSPORT_ERROR_NOTICE = "WebSocket error"
TRANSPORT_ERROR_CLASS = "tnc_red"
MALFORMED_FRAME_NOTICE = "Dropped malformed frame from server"
NOT_CONNECTED_NOTICE = "Not connected"


class ClientSession:
    """One logical connection to the proxy.

    Owns the state machine and output buffer for that connection and
    holds a reference to the active transport. Every handler runs to
    completion synchronously; nothing is queued.
    """

    def __init__(
        self,
        codec: MessageCodec,
        output_buffer: OutputBuffer,
        state_machine: ConnectionStateMachine,
        transport: TransportPort | None = None,
    ) -> None:
        self.codec = codec
        self.output_buffer = output_buffer
        self.state_machine = state_machine
        self._transport = transport

    @property
    def transport(self) -> TransportPort | None:
        return self._transport

    def attach_transport(self, transport: TransportPort) -> None:
        """Use ``transport`` for outgoing data."""
        self._transport = transport

    # Transport lifecycle

    def on_connecting(self) -> None:
        self.state_machine.begin_connect()

    def on_open(self) -> None:
        logger.info("Transport open")
        self.state_machine.open()

    def on_close(self, reason: str | None = None) -> None:
        logger.info("Transport closed reason=%s", reason)
        self.state_machine.close()

    def on_error(self, error: BaseException | str | None = None) -> None:
        logger.error("Transport error: %s", error)
        self.notify(TRANSPORT_ERROR_NOTICE, TRANSPORT_ERROR_CLASS)
        self.state_machine.error()

    def on_frame(self, raw: str | bytes) -> DecodeResult:
        """Decode one frame and dispatch each message it carries."""
        result = self.codec.decode(raw)
        if result.error is not None:
            logger.warning(
                "Malformed frame dropped kind=%s detail=%s",
                result.error.kind.value,
                result.error.detail,
            )
            self.output_buffer.append_status(MALFORMED_FRAME_NOTICE)
            return result

        for message in result.messages:
            self._dispatch(message)
        return result

    def _dispatch(self, message: Message) -> None:
        if isinstance(message, TextOutput):
            self.output_buffer.append(message.text)
        elif isinstance(message, ServerStatus):
            self.output_buffer.append_status(message.payload)
        elif isinstance(message, RemoteConnStatus):
            self.state_machine.set_remote(message.state)
        elif isinstance(message, ProxyConnStatus):
            self.state_machine.set_proxy(message.state)

    # User input

    def send(self, text: str) -> bool:
        """Echo and forward user input.

        Returns False without touching the transport when ``text`` is
        empty or no open transport is attached. The echo is local and
        does not depend on the write succeeding.
        """
        if text == "":
            logger.debug("Empty input rejected")
            return False
        transport = self._open_transport()
        if transport is None:
            self.output_buffer.append_status(NOT_CONNECTED_NOTICE)
            return False

        self.output_buffer.append(format_echo(text), EntryKind.ECHO)
        self._write(transport, text)
        return True

    def send_direct(self, text: str) -> bool:
        """Forward non-empty ``text`` without echoing it."""
        if text == "":
            return False
        transport = self._open_transport()
        if transport is None:
            logger.debug("Direct send dropped, transport not open")
            return False
        self._write(transport, text)
        return True

    def connect_remote(self, host: str, port: int, tls: bool = False) -> bool:
        """Ask the proxy to open its telnet leg to ``host:port``."""
        if not host or any(c.isspace() for c in host):
            raise ValueError(f"Invalid host: {host!r}")
        if not 1 <= port <= 65535:
            raise ValueError(f"Invalid port: {port}")
        command = f"{CONNECT_COMMAND} {host} {port} {'true' if tls else 'false'}"
        logger.info("Requesting remote connection host=%s port=%d tls=%s", host, port, tls)
        return self.send_direct(command)

    def notify(self, text: str, css_class: str = NOTICE_CLASS) -> None:
        """Render a client-side notice in the output window."""
        self.output_buffer.append(format_notice(text, css_class), EntryKind.NOTICE)

    def close(self) -> None:
        """Close the active transport, if any."""
        if self._transport is not None:
            self._transport.close()

    def _open_transport(self) -> TransportPort | None:
        if self._transport is None or not self._transport.is_open:
            return None
        return self._transport

    def _write(self, transport: TransportPort, text: str) -> None:
        try:
            transport.send(text)
        except TransportError as e:
            self.on_error(e)
