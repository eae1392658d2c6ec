"""Display components for CLI using Rich."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    console.print()
    console.print(
        Panel(
            f"[bold green]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="green",
        )
    )


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_summary(
    source_files: list[Path],
    search_paths: list[Path],
    output_directory: Path,
    generator: str,
) -> None:
    """Display the compile configuration before running."""
    table = Table(title="Thrift Compilation", show_header=False, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Generator", escape(generator))
    table.add_row("Output", escape(str(output_directory)))
    table.add_row("Search path", escape("\n".join(str(p) for p in search_paths)) or "-")
    table.add_row("Sources", str(len(source_files)))

    console.print()
    console.print(table)


def show_process_output(stdout: str, stderr: str) -> None:
    """Display the captured compiler output, skipping empty streams."""
    if stdout.strip():
        console.print(Panel(escape(stdout.rstrip()), title="stdout", border_style="blue"))
    if stderr.strip():
        console.print(Panel(escape(stderr.rstrip()), title="stderr", border_style="yellow"))
