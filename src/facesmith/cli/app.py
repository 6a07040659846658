"""CLI application entry point for facesmith.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
import uvicorn

from facesmith import __version__
from facesmith.cli.output import (
    console,
    print_error,
    print_header,
    print_library_info,
    print_serving,
    print_step,
    print_whitelist_info,
)
from facesmith.config import (
    DEFAULT_MAX_AGE,
    FacesmithSettings,
    LibraryConfig,
    LoggingConfig,
    ServerConfig,
    parse_bind_address,
)
from facesmith.core import FontIndex, HandlerContext, StylesheetRenderer
from facesmith.exceptions import (
    ConfigurationError,
    FacesmithError,
    FontLibraryError,
    WhitelistError,
)
from facesmith.http import create_app
from facesmith.io import FontLibrary, Whitelist
from facesmith.utils import RequestLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="facesmith",
    help="Serve @font-face stylesheets with embedded fonts.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Facesmith[/bold blue] v{__version__}")
        raise typer.Exit()


def load_context(settings: FacesmithSettings, quiet: bool = True, verbose: bool = False) -> HandlerContext:
    """Load the font library, whitelist and templates.

    Args:
        settings: Application settings
        quiet: Suppress progress output
        verbose: List loaded families

    Returns:
        Handler context ready for serving

    Raises:
        ConfigurationError: If any resource is missing, invalid or empty
    """
    lib = settings.library

    if not quiet:
        print_step("Loading font library")
    library = FontLibrary.load(lib.fonts_dir)
    if len(library) == 0:
        raise FontLibraryError(str(lib.fonts_dir), "empty font library")
    index = FontIndex.build(library)
    if not quiet:
        print_library_info(str(lib.fonts_dir), index.families, len(index), verbose)

    if not quiet:
        print_step("Reading whitelist")
    whitelist = Whitelist.read(lib.whitelist_path)
    if len(whitelist) == 0:
        raise WhitelistError(str(lib.whitelist_path), "empty whitelist")
    if not quiet:
        print_whitelist_info(str(lib.whitelist_path), len(whitelist))

    renderer = StylesheetRenderer(lib.templates_dir)
    renderer.check()

    return HandlerContext(
        server=settings.server,
        index=index,
        renderer=renderer,
        whitelist=whitelist,
    )


@app.command()
def serve(
    bind: Annotated[
        str,
        typer.Option(
            "--bind",
            "-b",
            help="TCP address to bind to (host:port)",
        ),
    ] = "0.0.0.0:80",
    max_age: Annotated[
        int,
        typer.Option(
            "--max-age",
            "-c",
            help="Cache-Control max-age value",
            min=0,
        ),
    ] = DEFAULT_MAX_AGE,
    etag: Annotated[
        bool,
        typer.Option(
            "--etag",
            "-e",
            help="Toggle entity tags validation",
        ),
    ] = False,
    gzip: Annotated[
        bool,
        typer.Option(
            "--gzip",
            "-g",
            help="Toggle response gzip compression",
        ),
    ] = False,
    library: Annotated[
        Path,
        typer.Option(
            "--library",
            "-l",
            help="Path to font library",
        ),
    ] = Path("fonts"),
    cors: Annotated[
        bool,
        typer.Option(
            "--cors",
            "-o",
            help="Toggle cross-origin resource sharing",
        ),
    ] = False,
    templates: Annotated[
        Path | None,
        typer.Option(
            "--templates",
            "-t",
            help="Path to templates directory (default: bundled templates)",
        ),
    ] = None,
    whitelist: Annotated[
        Path,
        typer.Option(
            "--whitelist",
            "-w",
            help="Path to whitelist file",
        ),
    ] = Path("whitelist.json"),
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "INFO",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Serve @font-face stylesheets embedding fonts from a font library.

    Stylesheets are requested from /css/ with a family specification:

        /css/?family=Amaranth:400,700italic|Open+Sans&format=woff
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        host, port = parse_bind_address(bind)
    except ValueError as e:
        print_error(f"Invalid bind address: {bind}", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = FacesmithSettings(
        server=ServerConfig(
            host=host,
            port=port,
            max_age=max_age,
            etag=etag,
            gzip=gzip,
            cors=cors,
        ),
        library=LibraryConfig(
            fonts_dir=library,
            templates_dir=templates,
            whitelist_path=whitelist,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        context = load_context(settings, quiet=quiet, verbose=verbose)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except FacesmithError as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)

    asgi_app = create_app(context, RequestLogger(logger.bind(component="request")))

    if not quiet:
        print_serving(
            host,
            port,
            {"etag": etag, "gzip": gzip, "cors": cors},
        )

    uvicorn.run(
        asgi_app,
        host=host,
        port=port,
        log_level=settings.logging.log_level.lower(),
        server_header=False,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
