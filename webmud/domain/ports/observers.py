"""Observer ports - renderers subscribe to buffer and state changes."""

from typing import Protocol

from ..values import ConnectionState, LinkStatus, OutputEntry


class OutputObserver(Protocol):
    """Receives output buffer mutations as they happen."""

    def on_append(self, entry: OutputEntry) -> None: ...

    def on_evict(self, entry: OutputEntry) -> None: ...

    def on_status(self, text: str) -> None: ...


class ConnectionObserver(Protocol):
    """Receives connection state transitions in the order they occur."""

    def on_transport_state(self, state: ConnectionState) -> None: ...

    def on_remote_status(self, status: LinkStatus) -> None: ...

    def on_proxy_status(self, status: LinkStatus) -> None: ...
