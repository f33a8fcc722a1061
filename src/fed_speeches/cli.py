"""CLI entrypoints for fed-speeches."""

from __future__ import annotations

from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape

from fed_speeches.config import AppConfig
from fed_speeches.core.printing import print_speech_table, speeches_to_json
from fed_speeches.errors import FeedError
from fed_speeches.models import JEROME_POWELL, FilterOption, Speech
from fed_speeches.pipeline.fetch_speeches import fetch_fed_speech

app = typer.Typer(
    no_args_is_help=True,
    help="Commands for fetching the Federal Reserve speeches feed.",
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Supported renderings of the fetched speeches."""

    REPR = "repr"
    TABLE = "table"
    JSON = "json"


SPEAKER_OPTION = typer.Option(
    JEROME_POWELL,
    "--speaker",
    help="Keep only speeches whose speaker contains this text (case-sensitive).",
)
ALL_SPEAKERS_OPTION = typer.Option(
    False,
    "--all",
    help="Return speeches from every speaker (ignores --speaker).",
)
FORMAT_OPTION = typer.Option(
    OutputFormat.REPR,
    "--format",
    case_sensitive=False,
    help="Output format.",
)
TIMEOUT_OPTION = typer.Option(
    None,
    "--timeout",
    help="Request timeout in seconds (default: FS_TIMEOUT or 30).",
)


def _status(message: str) -> None:
    err_console.print(f"[dim]{message}[/dim]")


def _render(speeches: list[Speech], output_format: OutputFormat) -> None:
    if output_format is OutputFormat.TABLE:
        print_speech_table(speeches, console)
    elif output_format is OutputFormat.JSON:
        typer.echo(speeches_to_json(speeches))
    else:
        typer.echo(repr(speeches))


@app.command("config")
def show_config() -> None:
    """Print the current app configuration."""
    cfg = AppConfig()
    console.print(f"[bold]Feed URL:[/bold] {cfg.feed_url}")
    console.print(f"[bold]Site origin:[/bold] {cfg.site_origin}")
    console.print(f"[bold]Timeout:[/bold] {cfg.timeout}s")
    console.print(f"[bold]User agent:[/bold] {cfg.user_agent}")


@app.command("speeches")
def speeches_command(
    speaker: str = SPEAKER_OPTION,
    all_speakers: bool = ALL_SPEAKERS_OPTION,
    output_format: OutputFormat = FORMAT_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
) -> None:
    """Fetch speeches, optionally filtered by speaker, and print them."""
    if timeout is not None and timeout <= 0:
        raise typer.BadParameter("--timeout must be > 0")

    config = AppConfig() if timeout is None else AppConfig(timeout=timeout)
    filter_option = None if all_speakers else FilterOption(speaker=speaker)

    try:
        speeches = fetch_fed_speech(filter_option, config=config, on_status=_status)
    except FeedError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]", highlight=False)
        raise typer.Exit(code=1) from exc

    _render(speeches, output_format)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
