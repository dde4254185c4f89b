"""Rich Console factory and theme for formgrid output.

Consoles render to a StringIO buffer so formatters keep returning plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FORMGRID_THEME = Theme(
    {
        "fg.ok": "bold green",
        "fg.error": "bold red",
        "fg.warning": "bold yellow",
        "fg.op": "bold cyan",
        "fg.key": "dim",
        "fg.group": "bold magenta",
        "fg.container": "bold blue",
        "fg.control": "",
        "fg.button": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=FORMGRID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
