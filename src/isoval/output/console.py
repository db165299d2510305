"""Rich Console factory and theme for isoval output.

Consoles render into a StringIO buffer so renderers can return plain
strings; Rich drops color codes automatically outside a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ISOVAL_THEME = Theme(
    {
        "iso.ok": "bold green",
        "iso.error": "bold red",
        "iso.warning": "bold yellow",
        "iso.op": "bold cyan",
        "iso.key": "dim",
        "iso.path": "bold blue",
        "iso.code": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ISOVAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
