"""Display utilities: startup screen and the console output renderer."""

import html
import logging
import re
import sys

from rich.align import Align
from rich.console import Console
from rich.table import Table
from rich.text import Text

from webmud import __version__
from webmud.domain import ConnectionState, LinkStatus, OutputEntry

logger = logging.getLogger(__name__)

# Force UTF-8 for Windows console
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

LOGO = r"""
█   █ █▀▀ █▀▄ █▀▄▀█ █ █ █▀▄
█ █ █ █▀▀ █▀▄ █ ▀ █ █ █ █ █
▀▀ ▀▀ ▀▀▀ ▀▀  ▀   ▀ ▀▀▀ ▀▀
"""

# CSS classes emitted by the proxy's ANSI converter -> rich style fragments
TNC_STYLES: dict[str, str] = {
    "tnc_black": "black",
    "tnc_red": "red",
    "tnc_green": "green",
    "tnc_yellow": "yellow",
    "tnc_blue": "blue",
    "tnc_magenta": "magenta",
    "tnc_cyan": "cyan",
    "tnc_white": "white",
    "tnc_grey": "grey50",
    "tnc_light_grey": "grey70",
    "tnc_bg_black": "on black",
    "tnc_bg_red": "on red",
    "tnc_bg_green": "on green",
    "tnc_bg_yellow": "on yellow",
    "tnc_bg_blue": "on blue",
    "tnc_bg_magenta": "on magenta",
    "tnc_bg_cyan": "on cyan",
    "tnc_bg_silver": "on grey70",
    "tnc_bold": "bold",
    "tnc_italic": "italic",
    "tnc_underline": "underline",
    "tnc_inverse": "reverse",
    "tnc_line_through": "strike",
    "tnc_blink": "blink",
}

_TAG_RE = re.compile(r"<\s*(/?)\s*([A-Za-z][A-Za-z0-9]*)([^>]*)>")
_CLASS_RE = re.compile(r"""class\s*=\s*(?:"([^"]*)"|'([^']*)')""")


def classes_to_style(classes: str) -> str:
    """Translate a space separated class list into a rich style string."""
    return " ".join(TNC_STYLES[c] for c in classes.split() if c in TNC_STYLES)


def render_markup(markup: str) -> Text:
    """Render the server's HTML subset (span classes, br, p) as rich text.

    Unknown tags are dropped; entities are unescaped.
    """
    text = Text()
    styles: list[str] = []
    pos = 0

    for match in _TAG_RE.finditer(markup):
        if match.start() > pos:
            segment = html.unescape(markup[pos : match.start()])
            text.append(segment, style=" ".join(s for s in styles if s))
        pos = match.end()

        closing, tag, attrs = match.group(1), match.group(2).lower(), match.group(3)
        if tag in ("br", "p"):
            text.append("\n")
        elif tag == "span":
            if closing:
                if styles:
                    styles.pop()
            else:
                class_match = _CLASS_RE.search(attrs)
                classes = (class_match.group(1) or class_match.group(2)) if class_match else ""
                styles.append(classes_to_style(classes or ""))

    if pos < len(markup):
        text.append(html.unescape(markup[pos:]), style=" ".join(s for s in styles if s))
    return text


def _status_badge(connected: bool, label: str) -> str:
    if connected:
        return f"[green]●[/green] [bold green]{label} CONNECTED[/bold green]"
    return f"[red]●[/red] [bold red]{label} DISCONNECTED[/bold red]"


class ConsoleRenderer:
    """Renders session output and connection changes to a rich console.

    Implements both observer ports. The terminal owns scrollback, so
    evictions only need to be logged.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def on_append(self, entry: OutputEntry) -> None:
        self.console.print(render_markup(entry.rendered_text), end="", soft_wrap=True)

    def on_evict(self, entry: OutputEntry) -> None:
        logger.debug("Evicted entry element_id=%s", entry.element_id)

    def on_status(self, text: str) -> None:
        line = render_markup(text)
        line.stylize("magenta")
        self.console.print(Text("[server] ", style="dim").append_text(line))

    def on_transport_state(self, state: ConnectionState) -> None:
        if state is ConnectionState.CONNECTED:
            self.console.print(_status_badge(True, "PROXY"))
        elif state is ConnectionState.DISCONNECTED:
            self.console.print(_status_badge(False, "PROXY"))
        elif state is ConnectionState.CONNECTING:
            self.console.print("[yellow]●[/yellow] [yellow]CONNECTING...[/yellow]")
        else:
            self.console.print("[red]●[/red] [bold red]CONNECTION ERROR[/bold red]")

    def on_remote_status(self, status: LinkStatus) -> None:
        self.console.print(_status_badge(status is LinkStatus.CONNECTED, "GAME"))

    def on_proxy_status(self, status: LinkStatus) -> None:
        self.console.print(_status_badge(status is LinkStatus.CONNECTED, "BRIDGE"))


def display_startup_screen(console: Console, url: str, remote: str | None = None) -> None:
    """Display the startup banner.

    Args:
        console: Console to print to.
        url: Proxy URL being dialed.
        remote: ``host:port`` the proxy will be asked to connect to.
    """
    left_lines = [
        *(f"[bold bright_cyan]{line}[/bold bright_cyan]" for line in LOGO.strip("\n").split("\n")),
        f"[dim]v{__version__}[/dim]",
        "",
        f"[bold cyan]{url}[/bold cyan]",
    ]
    if remote:
        left_lines.append(f"[dim]game server: {remote}[/dim]")
    left_lines.append("[dim]Type to send, Ctrl+D or Ctrl+C to quit[/dim]")

    table = Table.grid(padding=(0, 4))
    table.add_column(justify="left", vertical="middle")
    table.add_row("\n".join(left_lines))

    console.print()
    console.print(Align.center(table))
    console.print()
