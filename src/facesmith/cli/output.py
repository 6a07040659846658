"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
for startup progress, resource summaries and errors.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Facesmith[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a startup step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_library_info(path: str, families: list[str], font_count: int, verbose: bool) -> None:
    """Print font library summary.

    Args:
        path: Font library directory
        families: Loaded family names
        font_count: Total number of font files
        verbose: Whether to list family names
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  [green]{len(families)}[/green] families {SYM_DOT} {font_count} fonts")
    if verbose and families:
        names = ", ".join(families[:20])
        if len(families) > 20:
            names += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(families) - 20} more)"
        console.print(f"  {names}")


def print_whitelist_info(path: str, domain_count: int) -> None:
    """Print whitelist summary."""
    line = Text("  ")
    line.append(path)
    line.append(f" ({domain_count} prefixes)")
    console.print(line)


def print_serving(host: str, port: int, flags: dict[str, bool]) -> None:
    """Print the listening address and enabled features.

    Args:
        host: Bound address
        port: Bound port
        flags: Feature name -> enabled
    """
    enabled = [name for name, on in flags.items() if on]
    features = f" {SYM_DOT} ".join(enabled) if enabled else "no optional features"
    console.print(f"\n[bold green]{SYM_OK} Serving[/bold green] on http://{host}:{port}/css/")
    console.print(f"  {features}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
