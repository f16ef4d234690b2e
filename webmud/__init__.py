"""Webmud - realtime client for websocket-proxied telnet servers."""

__version__ = "0.1.0"
