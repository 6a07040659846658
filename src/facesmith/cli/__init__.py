"""Command-line interface for facesmith.

This module provides the CLI using Typer with rich output for
user-friendly startup feedback.

Key features:
- Flags for caching, entity tags, gzip and CORS
- Font library, whitelist and template validation before serving
- Verbose/quiet output modes
"""

from facesmith.cli.app import cli, load_context, main

__all__ = ["cli", "load_context", "main"]
