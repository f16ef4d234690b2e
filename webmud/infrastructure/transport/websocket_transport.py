"""WebSocket transport using the websockets client."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

import websockets
from websockets.exceptions import ConnectionClosed, InvalidHandshake, InvalidURI

from webmud.domain import TransportError

logger = logging.getLogger(__name__)

DEFAULT_OPEN_TIMEOUT = 10.0


class TransportEvents(Protocol):
    """Receiver of transport lifecycle events (the client session)."""

    def on_connecting(self) -> None: ...

    def on_open(self) -> None: ...

    def on_frame(self, raw: str | bytes) -> Any: ...

    def on_close(self, reason: str | None = None) -> None: ...

    def on_error(self, error: BaseException | str | None = None) -> None: ...


class WebSocketTransport:
    """Single websocket connection to the proxy.

    ``run()`` dials, pumps incoming frames into ``events`` and returns
    once the connection is gone. All callbacks happen on the event loop
    running ``run()``. Outgoing frames go through one writer task so
    they leave in the order ``send()`` was called.
    """

    def __init__(
        self,
        url: str,
        events: TransportEvents,
        open_timeout: float = DEFAULT_OPEN_TIMEOUT,
        connect: Callable[..., Any] = websockets.connect,
    ) -> None:
        self.url = url
        self._events = events
        self._open_timeout = open_timeout
        self._connect = connect
        self._ws: Any = None
        self._outgoing: asyncio.Queue[str | None] | None = None
        self._closing = False

    @property
    def is_open(self) -> bool:
        return self._ws is not None and not self._closing

    def send(self, data: str) -> None:
        """Queue one text frame for the writer task."""
        if not self.is_open or self._outgoing is None:
            raise TransportError("WebSocket is not open")
        self._outgoing.put_nowait(data)

    def close(self) -> None:
        """Request a graceful close."""
        if self._closing:
            return
        self._closing = True
        if self._outgoing is not None:
            self._outgoing.put_nowait(None)

    async def run(self) -> None:
        """Connect and process frames until the connection ends."""
        self._events.on_connecting()
        self._outgoing = asyncio.Queue()
        self._closing = False
        logger.info("Connecting url=%s", self.url)

        try:
            async with self._connect(self.url, open_timeout=self._open_timeout) as ws:
                self._ws = ws
                self._events.on_open()
                writer = asyncio.create_task(self._write_loop(ws))
                try:
                    await self._read_loop(ws)
                finally:
                    writer.cancel()
                    try:
                        await writer
                    except asyncio.CancelledError:
                        pass
        except (ConnectionClosed, InvalidURI, InvalidHandshake, OSError) as e:
            logger.warning("Connection failed url=%s error=%s", self.url, e)
            self._events.on_error(e)
        finally:
            self._ws = None
            self._outgoing = None
            self._closing = True
            self._events.on_close()

    async def _read_loop(self, ws: Any) -> None:
        # Iteration ends quietly on a normal close and raises otherwise
        async for message in ws:
            if isinstance(message, bytes):
                message = message.decode("utf-8", errors="replace")
            self._events.on_frame(message)

    async def _write_loop(self, ws: Any) -> None:
        assert self._outgoing is not None
        while True:
            data = await self._outgoing.get()
            if data is None:
                await ws.close()
                return
            try:
                await ws.send(data)
            except ConnectionClosed as e:
                logger.warning("Write failed, connection closed: %s", e)
                self._events.on_error(TransportError(str(e)))
                return
