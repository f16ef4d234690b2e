"""Command line argument parsing."""

import argparse
from typing import Any

from webmud import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webmud",
        description="Webmud - terminal client for websocket-proxied MUD servers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default="webmud.yaml",
        help="Path to YAML config file (default: webmud.yaml)",
    )
    parser.add_argument(
        "--url",
        help="Proxy websocket URL, e.g. ws://example.org:8000/ws",
    )
    parser.add_argument(
        "--msg-limit",
        type=int,
        help="Maximum number of output entries kept in scrollback",
    )
    parser.add_argument(
        "--remote-host",
        help="Game server host the proxy should connect to",
    )
    parser.add_argument(
        "--remote-port",
        type=int,
        help="Game server port",
    )
    parser.add_argument(
        "--tls",
        action="store_true",
        default=None,
        help="Ask the proxy to use TLS for the game server connection",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - config: Path to the YAML config file
        - url, msg_limit, remote_host, remote_port, tls: config overrides
        - verbose: Whether to show debug logs
        - log_file: Optional log file path
    """
    return build_parser().parse_args(argv)


def config_overrides(args: argparse.Namespace) -> dict[str, dict[str, Any]]:
    """Map CLI flags onto config sections; unset flags stay None."""
    return {
        "transport": {"url": args.url},
        "output": {"msg_limit": args.msg_limit},
        "remote": {
            "host": args.remote_host,
            "port": args.remote_port,
            "tls": args.tls,
        },
    }
