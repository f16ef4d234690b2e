"""Application services - use case implementations."""

from .client_session import ClientSession

__all__ = [
    "ClientSession",
]
