"""Rich rendering for CLI output."""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from rich.console import Console
from rich.table import Table

from filekit.config import Settings


class ConsoleUI:
    """Terminal output for filekit commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize console UI.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_entries(self, title: str, directories: list[str], files: list[str]) -> None:
        """Display a directory listing.

        Args:
            title: Table title, usually the directory path.
            directories: Subdirectory names.
            files: File names.
        """
        if not directories and not files:
            self.console.print(f"[yellow]{title} is empty[/yellow]")
            return

        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Type")

        for name in directories:
            table.add_row(f"{name}/", "dir")
        for name in files:
            table.add_row(name, "file")

        self.console.print(table)

    def show_headers(self, headers: Mapping[str, str | int]) -> None:
        """Display download headers, one per line, in order."""
        for name, value in headers.items():
            self.console.print(f"[bold]{name}[/bold]: {value}", highlight=False)

    def show_file_info(
        self,
        path: str,
        size: int,
        modified: int,
        mime_type: str | None,
        is_image: bool,
    ) -> None:
        """Display a summary table for one file."""
        table = Table(title=path, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("Size", f"{size} bytes")
        table.add_row("Modified", datetime.fromtimestamp(modified).strftime("%Y-%m-%d %H:%M"))
        table.add_row("MIME type", mime_type or "unknown")
        table.add_row("Image", "yes" if is_image else "no")

        self.console.print(table)

    def show_settings(self, settings: Settings, location: str) -> None:
        """Display current configuration."""
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Config file: {location}")
        self.console.print(f"  Directory mode: {settings.dir_mode:#o}")
        self.console.print(f"  Content sniffing: {settings.content_sniffing}")
        self.console.print(f"  Log level: {settings.log_level}")

    def show_text(self, text: str) -> None:
        """Print raw text without markup processing."""
        self.console.print(text, markup=False, highlight=False, end="")

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {message}")
