"""Terminal reporter using Rich library."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from unused_deps.models import UnusedReport


class TerminalReporter:
    """Generates terminal output using Rich."""
    
    def __init__(self, color: bool = True, console: Console | None = None) -> None:
        """Initialize terminal reporter.
        
        Args:
            color: If True, use colored output
            console: Console to print to (created if omitted)
        """
        self.console = console or Console(color_system="auto" if color else None)
    
    def print_unused(self, report: UnusedReport) -> None:
        """Print the unused dependencies as a table.
        
        Args:
            report: Unused dependency report
        """
        if not report.unused:
            self.console.print("[green]✅ No unused dependencies found[/green]")
            return
        
        table = Table(
            title="📦 Unused Dependencies",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Package", style="bold")
        
        for index, name in enumerate(report.unused, 1):
            table.add_row(str(index), name)
        
        self.console.print(table)
    
    def print_errors(self, report: UnusedReport) -> None:
        """Print files that were skipped.
        
        Args:
            report: Unused dependency report
        """
        if not report.errors:
            return
        
        self.console.print(f"\n[bold yellow]⚠️  Skipped {report.files_failed} file(s):[/bold yellow]")
        for error in report.errors:
            self.console.print(f"  • {error.path}: {error.reason}", style="dim")
    
    def print_statistics(self, report: UnusedReport) -> None:
        """Print overall statistics.
        
        Args:
            report: Unused dependency report
        """
        stats = Text()
        stats.append("📊 Summary: ", style="bold")
        stats.append(f"{len(report.declared)} declared | ")
        stats.append(f"{report.files_scanned} files scanned | ")
        
        if report.files_failed > 0:
            stats.append(f"{report.files_failed} skipped | ", style="yellow")
        
        if report.unused:
            stats.append(f"🔴 {len(report.unused)} unused", style="bold red")
        else:
            stats.append("🟢 0 unused", style="bold green")
        
        self.console.print(Panel(stats, border_style="blue"))
