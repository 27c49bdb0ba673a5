"""CLI interface using Typer."""

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
)

from unused_deps.analyzer import UnusedDependencyAnalyzer
from unused_deps.config import get_config
from unused_deps.exceptions import ManifestError, NoSourceFilesError
from unused_deps.reporters.json_formats import JSONReporter
from unused_deps.reporters.terminal import TerminalReporter

# Set up logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="unused-deps",
    help="Find package.json dependencies that no source file imports",
    add_completion=False,
)

console = Console()


class OutputFormat(str, Enum):
    """Output format options."""
    terminal = "terminal"
    json = "json"


@app.command()
def check(
    package_json: Path = typer.Option(
        None,
        "--package-json",
        "-m",
        help="Path to the package.json file [default: ./package.json]",
    ),
    files: str = typer.Option(
        None,
        "--files",
        "-f",
        help="Glob pattern for files to check [default: src/**/*.ts]",
    ),
    max_parallel_files: int = typer.Option(
        None,
        "--max-parallel-files",
        "-j",
        min=1,
        help="Maximum number of files to process in parallel [default: 100]",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode",
    ),
    include_dev: bool = typer.Option(
        False,
        "--include-dev",
        help="Also check devDependencies",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Path to output file (json format only)",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.terminal,
        "--format",
        help="Output format (terminal, json)",
    ),
    fail_on_unused: bool = typer.Option(
        False,
        "--fail-on-unused",
        help="Exit with code 1 if unused dependencies are found (CI mode)",
    ),
    config_file: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML configuration file",
    ),
) -> None:
    """Check a project for unused dependencies."""

    logging.getLogger().setLevel(logging.DEBUG if debug else logging.WARNING)

    config = get_config(config_file)
    project_root = Path.cwd()

    try:
        analyzer = UnusedDependencyAnalyzer(
            project_root=project_root,
            manifest_file=package_json,
            files_pattern=files,
            max_parallel_files=max_parallel_files,
            include_dev=include_dev,
        )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        if output_format == OutputFormat.terminal:
            console.print("[dim]Reading files...[/dim]")

            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                console=console,
            ) as progress:
                task = progress.add_task("[green]Scanning imports...", total=None)

                def advance(completed: int, total: int) -> None:
                    progress.update(task, completed=completed, total=total)

                report = analyzer.analyze(on_progress=advance)
        else:
            report = analyzer.analyze()

    except ManifestError as e:
        console.print(f"[red]Error reading package.json: {e.reason}[/red]")
        console.print(f"[dim]{e.path}[/dim]")
        raise typer.Exit(1)
    except NoSourceFilesError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if output_format == OutputFormat.terminal:
        reporter = TerminalReporter(
            color=config.color,
            console=console if config.color else None,
        )

        if debug:
            console.print(f"[dim]Used dependencies: {', '.join(sorted(report.used))}[/dim]")
            reporter.print_errors(report)

        console.print("")
        reporter.print_unused(report)
        reporter.print_statistics(report)

    else:
        json_output = JSONReporter().generate_report(report, output)

        if output:
            console.print(f"[green]✅ Report saved to: {output}[/green]")
        else:
            typer.echo(json_output)

    if fail_on_unused and report.has_unused:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""

    from unused_deps import __version__

    console.print(f"[bold]unused-deps[/bold] v{__version__}")
