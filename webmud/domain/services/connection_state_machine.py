"""Connection state machine for the primary transport and reported links."""

import logging

from ..ports import ConnectionObserver
from ..values import ConnectionState, LinkStatus

logger = logging.getLogger(__name__)


class ConnectionStateMachine:
    """Track transport state plus the remote and proxy link indicators.

    The three are independent: transport events never touch the link
    indicators and protocol messages never touch the transport state.
    Re-delivering the current value is a no-op. Observers are notified
    synchronously in the order events arrive. Nothing is retried here.
    """

    def __init__(self) -> None:
        self._state = ConnectionState.DISCONNECTED
        self._remote = LinkStatus.DISCONNECTED
        self._proxy = LinkStatus.DISCONNECTED
        self._observers: list[ConnectionObserver] = []

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def remote(self) -> LinkStatus:
        return self._remote

    @property
    def proxy(self) -> LinkStatus:
        return self._proxy

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    def subscribe(self, observer: ConnectionObserver) -> None:
        self._observers.append(observer)

    # Transport events

    def begin_connect(self) -> bool:
        """Transport is dialing."""
        if self._state in (ConnectionState.CONNECTING, ConnectionState.CONNECTED):
            logger.warning("Connect requested while state=%s", self._state.value)
            return False
        return self._transition(ConnectionState.CONNECTING)

    def open(self) -> bool:
        """Transport reported open."""
        return self._transition(ConnectionState.CONNECTED)

    def close(self) -> bool:
        """Transport reported close, from any state."""
        return self._transition(ConnectionState.DISCONNECTED)

    def error(self) -> bool:
        """Transport reported an error; a close is expected to follow."""
        return self._transition(ConnectionState.ERRORED)

    # Protocol-reported links

    def set_remote(self, status: LinkStatus) -> bool:
        if status is self._remote:
            return False
        self._remote = status
        logger.info("Remote link status=%s", status.value)
        for observer in self._observers:
            observer.on_remote_status(status)
        return True

    def set_proxy(self, status: LinkStatus) -> bool:
        if status is self._proxy:
            return False
        self._proxy = status
        logger.info("Proxy link status=%s", status.value)
        for observer in self._observers:
            observer.on_proxy_status(status)
        return True

    def _transition(self, new_state: ConnectionState) -> bool:
        if new_state is self._state:
            return False
        logger.debug("Transport state %s -> %s", self._state.value, new_state.value)
        self._state = new_state
        for observer in self._observers:
            observer.on_transport_state(new_state)
        return True
