"""Rich Console factory and theme for durctl output.

Consoles render into a StringIO buffer so formatters keep a
``format_result() -> str`` contract. Off a TTY (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DUR_THEME = Theme(
    {
        "dur.ok": "bold green",
        "dur.error": "bold red",
        "dur.warning": "bold yellow",
        "dur.op": "bold cyan",
        "dur.key": "dim",
        "dur.instant": "bold blue",
        "dur.duration": "magenta",
    }
)

_KEY_STYLES: dict[str, str] = {
    "ends_at": "dur.instant",
    "starts_at": "dur.instant",
    "duration": "dur.duration",
    "iso": "dur.duration",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DUR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style for a result data key."""
    return _KEY_STYLES.get(key, "")
