"""Command-line interface for fuzzy-edit."""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import DEFAULT_CONFIG_NAME, Config, setup_logging
from .errors import EditError, FileAccessError
from .matching import REPLACERS, resolve_replacement
from .tools import EditTool, normalize_line_endings

app = typer.Typer(
    name="fuzzy-edit",
    help="Resilient search-and-replace for text files",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


DEFAULT_CONFIG = """# fuzzy-edit configuration

edit:
  encoding: "utf-8"
  context_lines: 3
  trim_diff: true
  normalize_line_endings: true

logging:
  level: "WARNING"
"""


def _load_config(config: Optional[Path], verbose: bool) -> Config:
    try:
        cfg = Config.load(config)
    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print("Run 'fuzzy-edit init' to create a configuration file.")
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if verbose:
        cfg.logging.level = "DEBUG"
    setup_logging(cfg)
    return cfg


def _text_argument(
    value: Optional[str], path: Optional[Path], name: str, encoding: str
) -> str:
    """Resolve a text option given either inline or as a file."""
    if value is not None and path is not None:
        console.print(f"[red]Error: use either --{name} or --{name}-file, not both[/red]")
        raise typer.Exit(2)
    if path is not None:
        try:
            return normalize_line_endings(path.read_text(encoding=encoding))
        except UnicodeError as e:
            console.print(f"[red]Error: cannot decode {path}: {escape(str(e))}[/red]")
            raise typer.Exit(2)
    if value is None:
        console.print(f"[red]Error: one of --{name} or --{name}-file is required[/red]")
        raise typer.Exit(2)
    return value


@app.command()
def edit(
    file: Path = typer.Argument(..., help="File to edit"),
    old: Optional[str] = typer.Option(None, "--old", help="Text to replace (empty overwrites the file)"),
    old_file: Optional[Path] = typer.Option(
        None, "--old-file", help="Read the text to replace from a file", exists=True, dir_okay=False
    ),
    new: Optional[str] = typer.Option(None, "--new", help="Replacement text"),
    new_file: Optional[Path] = typer.Option(
        None, "--new-file", help="Read the replacement text from a file", exists=True, dir_okay=False
    ),
    replace_all: bool = typer.Option(
        False, "--replace-all", "-a", help="Replace every occurrence"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to configuration file"
    ),
    no_diff: bool = typer.Option(False, "--no-diff", help="Do not print the diff"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Replace text in a file, tolerating whitespace and indentation drift.

    Examples:
        fuzzy-edit edit app.py --old "x = 1" --new "x = 2"
        fuzzy-edit edit app.py --old-file before.txt --new-file after.txt
        fuzzy-edit edit app.py --old foo --new bar --replace-all
    """
    cfg = _load_config(config, verbose)
    old_string = _text_argument(old, old_file, "old", cfg.edit.encoding)
    new_string = _text_argument(new, new_file, "new", cfg.edit.encoding)

    outcome = EditTool(cfg).edit(file, old_string, new_string, replace_all=replace_all)

    if not outcome.succeeded:
        console.print(f"[red]Error editing {outcome.file_path}: {escape(outcome.error or '')}[/red]")
        raise typer.Exit(1)

    if outcome.diff and not no_diff:
        console.print(Syntax(outcome.diff, "diff", theme="ansi_dark"))
    console.print(f"[green]{outcome.message}[/green]")
    if outcome.strategy:
        console.print(f"[dim]Matched by: {outcome.strategy}[/dim]")


@app.command()
def match(
    file: Path = typer.Argument(..., help="File to search", exists=True, dir_okay=False),
    old: Optional[str] = typer.Option(None, "--old", help="Text to locate"),
    old_file: Optional[Path] = typer.Option(
        None, "--old-file", help="Read the text to locate from a file", exists=True, dir_okay=False
    ),
    replace_all: bool = typer.Option(
        False, "--replace-all", "-a", help="Accept multiple occurrences"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Show which strategy would locate the text, without modifying the file."""
    cfg = _load_config(config, verbose)
    old_string = _text_argument(old, old_file, "old", cfg.edit.encoding)

    logger.debug(f"Dry run against {file}")
    try:
        content = EditTool(cfg).read(file)
        # Any replacement different from old_string will do for a dry run
        result = resolve_replacement(content, old_string, old_string + "\0", replace_all)
    except FileAccessError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except EditError as e:
        console.print(f"[red]No match: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"Strategy: [bold]{result.strategy}[/bold]")
    console.print(f"Occurrences: {result.replacements}")
    console.print(Panel(Text(result.candidate), title="Matched text", expand=False))


@app.command()
def strategies():
    """List the matching strategies in the order they are tried."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("#")
    table.add_column("Strategy", no_wrap=True)
    table.add_column("Description")

    for position, (name, replacer) in enumerate(REPLACERS, 1):
        summary = (replacer.__doc__ or "").strip().splitlines()
        table.add_row(str(position), name, summary[0] if summary else "")

    console.print(table)


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing config file"
    ),
):
    """Initialize a new configuration file.

    Creates a fuzzy-edit.yaml file in the current directory with
    default settings that you can customize.
    """
    config_path = Path(DEFAULT_CONFIG_NAME)

    if config_path.exists() and not force:
        console.print(f"[yellow]Config file already exists: {config_path}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(1)

    config_path.write_text(DEFAULT_CONFIG)
    console.print(f"[green]Created config file: {config_path}[/green]")


@app.command()
def version():
    """Show version information."""
    console.print(f"fuzzy-edit v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
