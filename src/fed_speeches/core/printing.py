"""Console rendering helpers for fetched speeches."""

from __future__ import annotations

from pydantic import TypeAdapter
from rich.console import Console
from rich.table import Table

from fed_speeches.models import Speech

_SPEECH_LIST = TypeAdapter(list[Speech])


def print_speech_table(speeches: list[Speech], console: Console) -> None:
    """Render speeches as a rich table."""
    if not speeches:
        console.print("[yellow]No speeches matched.[/yellow]")
        return

    table = Table(title=f"Federal Reserve speeches ({len(speeches)})")
    table.add_column("Date (UTC)", no_wrap=True)
    table.add_column("Speaker")
    table.add_column("Talk")
    table.add_column("Location")
    table.add_column("Video", justify="center")
    table.add_column("Link", overflow="fold")
    for speech in speeches:
        table.add_row(
            speech.timestamp.strftime("%Y-%m-%d %H:%M"),
            speech.speaker,
            speech.talk,
            speech.location,
            "yes" if speech.has_inline_video else "",
            speech.link,
        )
    console.print(table)


def speeches_to_json(speeches: list[Speech]) -> str:
    """Serialize speeches to an indented JSON array."""
    return _SPEECH_LIST.dump_json(speeches, indent=2).decode("utf-8")
