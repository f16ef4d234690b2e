"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from webmud.application.services import ClientSession
from webmud.config import Config
from webmud.domain import ConnectionStateMachine, MessageCodec, OutputBuffer, SanitizerPort


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    One container per logical connection; everything is wired at
    startup and nothing lives in module globals.
    """

    # Services
    session: ClientSession
    codec: MessageCodec
    state_machine: ConnectionStateMachine

    # Entities
    output_buffer: OutputBuffer

    # Capabilities
    sanitizer: SanitizerPort

    # Configuration
    config: Config
