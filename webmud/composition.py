"""Composition root - the ONLY place where dependencies are wired."""

from pathlib import Path
from typing import Any

from webmud.application.services import ClientSession
from webmud.config import Config, load_config
from webmud.container import Container
from webmud.domain import ConnectionStateMachine, MessageCodec, OutputBuffer
from webmud.infrastructure.sanitizer import BleachSanitizer
from webmud.infrastructure.transport import WebSocketTransport


def apply_overrides(config: Config, overrides: dict[str, dict[str, Any]]) -> Config:
    """Return a copy of ``config`` with per-section overrides applied.

    ``None`` values are ignored so unset CLI flags keep file values.
    """
    data = config.model_dump()
    for section, values in overrides.items():
        for key, value in values.items():
            if value is not None:
                data[section][key] = value
    return Config.model_validate(data)


def create_container(
    config_path: Path | str = "webmud.yaml",
    config: Config | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    This is the composition root - the single place where all
    dependencies are created and wired together.

    Args:
        config_path: Path to config file, used when ``config`` is None.
        config: Already loaded configuration.

    Returns:
        Fully wired dependency container.
    """
    if config is None:
        config = load_config(config_path)

    sanitizer = BleachSanitizer(config.sanitizer.allowed)
    output_buffer = OutputBuffer(sanitizer=sanitizer, msg_limit=config.output.msg_limit)
    state_machine = ConnectionStateMachine()
    codec = MessageCodec()

    session = ClientSession(
        codec=codec,
        output_buffer=output_buffer,
        state_machine=state_machine,
    )

    return Container(
        session=session,
        codec=codec,
        state_machine=state_machine,
        output_buffer=output_buffer,
        sanitizer=sanitizer,
        config=config,
    )


def create_transport(container: Container) -> WebSocketTransport:
    """Create the websocket transport and attach it to the session."""
    transport = WebSocketTransport(
        url=container.config.transport.url,
        events=container.session,
        open_timeout=container.config.transport.open_timeout,
    )
    container.session.attach_transport(transport)
    return transport
