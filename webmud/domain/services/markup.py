"""Markup helpers for locally generated output lines."""

ECHO_CLASS = "tnc_grey"
NOTICE_CLASS = "tnc_light_grey"


def format_notice(text: str, css_class: str = NOTICE_CLASS) -> str:
    """Wrap a client-side line the way the server's own lines look."""
    return f"<br><span class='{css_class}'>&rarr; {text}</span><br>"


def format_echo(text: str) -> str:
    """Format user input for local echo."""
    return format_notice(text, ECHO_CLASS)
