"""termfolio CLI - browse a YAML portfolio from the terminal."""

from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import settings
from .exceptions import TermfolioError
from .utils.console import console
from .utils.logging import get_logger, setup_logging
from .validation.models import SourceInput, ViewInput

logger = get_logger(__name__)


def _validate_input(model_class: type, **kwargs: Any) -> Any:
    """Validate input using Pydantic model, exit on validation error.

    Args:
        model_class: Pydantic model class to use for validation
        **kwargs: Keyword arguments to pass to the model constructor

    Returns:
        The validated model instance

    Raises:
        typer.Exit: If validation fails (exits with code 1)
    """
    try:
        return model_class(**kwargs)
    except PydanticValidationError as e:
        console.print(f"[red]Validation error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)


def _print_panel(message: str, style: str = "blue") -> None:
    """Print a styled panel message."""
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


def _describe_source(source: str) -> str:
    from .data.fetcher import is_remote

    if is_remote(source):
        return f"remote config file: {source}"
    if Path(source).exists():
        return f"local config file: {source}"
    return f"config file (not found locally): {source}"


app = typer.Typer(
    name="termfolio",
    help="Terminal Portfolio Viewer - browse a YAML portfolio from your terminal",
    no_args_is_help=True,
)

SourceArgument = Annotated[
    str | None,
    typer.Argument(help="URL or path of the portfolio YAML (defaults to TERMFOLIO_DEFAULT_SOURCE)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Log debug output"),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]termfolio[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """termfolio - your portfolio, in a terminal."""


@app.command("view")
def view(
    source: SourceArgument = None,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Wrap width in columns (default: terminal width)"),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write logs to this file while the viewer runs"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Open the interactive viewer.

    Keys: h home, ←/→ (or j/l) previous/next section, 0-9 jump to a
    section, any other letter jumps to the first section starting with it,
    Ctrl-R reloads, q quits.
    """
    from .ui.app import run_viewer

    params = _validate_input(ViewInput, source=source or settings.default_source, width=width)
    log_file = log_file or settings.log_file
    # Console logging would draw over the full-screen display
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_file=log_file,
        console=False,
    )
    console.print(f"Using {_describe_source(params.source)}")
    logger.debug("Starting viewer on %s", params.source)

    session = run_viewer(params.source, width=params.width, console=console)
    if session.snapshot is None and session.last_error:
        console.print(f"[red]{session.last_error}[/red]")
        raise typer.Exit(code=1)


@app.command("check")
def check(
    source: SourceArgument = None,
    verbose: VerboseOption = False,
) -> None:
    """Load a portfolio without opening the viewer and summarize it."""
    from .session import Session

    params = _validate_input(SourceInput, source=source or settings.default_source)
    setup_logging(level="DEBUG" if verbose else settings.log_level)

    _print_panel(f"Checking {params.source}")
    session = Session(params.source)
    try:
        snapshot = session.reload()
    except TermfolioError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    portfolio = snapshot.portfolio
    console.print(f"[bold cyan]{portfolio.name}[/bold cyan] - {portfolio.title}")

    sections = Table(title="Sections", show_lines=False)
    sections.add_column("#", style="yellow", justify="right")
    sections.add_column("Title", style="bold")
    sections.add_column("Layout")
    sections.add_column("Items", justify="right")
    for index, section in enumerate(portfolio.content_sections, start=1):
        sections.add_row(str(index), section.title, section.layout, str(len(section.items)))
    console.print(sections)

    if portfolio.social:
        social = Table(title="Social")
        social.add_column("Platform", style="blue")
        social.add_column("URL")
        for entry in portfolio.social:
            social.add_row(entry.platform, entry.url)
        console.print(social)

    console.print("[green]✓ Portfolio loaded successfully[/green]")
