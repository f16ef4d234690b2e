"""Command line entry point."""

import asyncio
import logging
import sys

from pydantic import ValidationError
from rich.console import Console

from webmud.composition import apply_overrides, create_container, create_transport
from webmud.config import load_config
from webmud.container import Container
from webmud.domain import ConnectionState, LinkStatus
from webmud.infrastructure.transport import WebSocketTransport
from webmud.logging_setup import setup_logging, setup_logging_from_env

from .args import config_overrides, parse_args
from .display import ConsoleRenderer, display_startup_screen

logger = logging.getLogger(__name__)


class RemoteAutoConnect:
    """Issues the proxy connect command each time the transport opens."""

    def __init__(self, container: Container) -> None:
        self._container = container

    def on_transport_state(self, state: ConnectionState) -> None:
        remote = self._container.config.remote
        if state is ConnectionState.CONNECTED and remote.host:
            self._container.session.connect_remote(remote.host, remote.port, remote.tls)

    def on_remote_status(self, status: LinkStatus) -> None:
        pass

    def on_proxy_status(self, status: LinkStatus) -> None:
        pass


async def pump_lines(reader: asyncio.StreamReader, container: Container) -> None:
    """Send each line from ``reader`` through the session until EOF."""
    while True:
        line = await reader.readline()
        if not line:
            break
        container.session.send(line.decode("utf-8", errors="replace").rstrip("\r\n"))


async def _open_stdin() -> asyncio.StreamReader:
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)
    return reader


async def run_client(
    container: Container,
    transport: WebSocketTransport | None = None,
    reader: asyncio.StreamReader | None = None,
) -> None:
    """Run the transport and the input pump until either finishes.

    An exception raised by the transport task propagates to the caller.
    """
    if transport is None:
        transport = create_transport(container)
    else:
        container.session.attach_transport(transport)
    if reader is None:
        reader = await _open_stdin()

    transport_task = asyncio.create_task(transport.run())
    input_task = asyncio.create_task(pump_lines(reader, container))

    done, _ = await asyncio.wait(
        {transport_task, input_task}, return_when=asyncio.FIRST_COMPLETED
    )
    if input_task in done:
        transport.close()
        await transport_task
    else:
        input_task.cancel()
        try:
            await input_task
        except asyncio.CancelledError:
            pass
        transport_task.result()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.verbose or args.log_file:
        setup_logging(verbose=args.verbose, log_file=args.log_file)
    else:
        setup_logging_from_env()

    console = Console()
    try:
        config = apply_overrides(load_config(args.config), config_overrides(args))
    except (ValidationError, ValueError) as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        return 2

    container = create_container(config=config)
    renderer = ConsoleRenderer(console)
    container.output_buffer.subscribe(renderer)
    container.state_machine.subscribe(renderer)
    container.state_machine.subscribe(RemoteAutoConnect(container))

    remote = config.remote
    display_startup_screen(
        console,
        config.transport.url,
        f"{remote.host}:{remote.port}" if remote.host else None,
    )

    try:
        asyncio.run(run_client(container))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Client stopped on unexpected error")
        return 1
    return 0


__all__ = ["main", "run_client", "pump_lines", "RemoteAutoConnect"]
