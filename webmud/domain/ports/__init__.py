"""Domain ports - interfaces for infrastructure to implement."""

from .observers import ConnectionObserver, OutputObserver
from .sanitizer_port import SanitizerPort
from .transport_port import TransportError, TransportPort

__all__ = [
    "SanitizerPort",
    "TransportPort",
    "TransportError",
    "OutputObserver",
    "ConnectionObserver",
]
