"""Configuration settings for Facesmith."""

from pathlib import Path

from pydantic import BaseModel, Field

from facesmith import PROG_NAME, __version__

DEFAULT_MAX_AGE = 2592000


class ServerConfig(BaseModel):
    """HTTP server and response header settings."""

    host: str = Field(
        default="0.0.0.0",
        description="Address to bind to",
    )
    port: int = Field(
        default=80,
        ge=1,
        le=65535,
        description="TCP port to bind to",
    )
    max_age: int = Field(
        default=DEFAULT_MAX_AGE,
        ge=0,
        description="Cache-Control max-age value in seconds",
    )
    etag: bool = Field(
        default=False,
        description="Generate and validate entity tags",
    )
    gzip: bool = Field(
        default=False,
        description="Compress responses for clients accepting gzip",
    )
    cors: bool = Field(
        default=False,
        description="Send Access-Control-Allow-Origin: *",
    )
    server_name: str = Field(
        default=f"{PROG_NAME}/{__version__}",
        description="Server header value (empty disables the header)",
    )


class LibraryConfig(BaseModel):
    """Locations of the resources loaded at startup."""

    fonts_dir: Path = Field(
        default=Path("fonts"),
        description="Font library directory",
    )
    templates_dir: Path | None = Field(
        default=None,
        description="Directory overriding the bundled stylesheet templates",
    )
    whitelist_path: Path = Field(
        default=Path("whitelist.json"),
        description="Referrer whitelist file",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="INFO",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FacesmithSettings(BaseModel):
    """Main application settings."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FacesmithSettings:
    """Get default application settings."""
    return FacesmithSettings()


def parse_bind_address(value: str) -> tuple[str, int]:
    """Split a ``host:port`` bind address.

    An empty host binds to all interfaces.

    Raises:
        ValueError: If the port is missing or not a valid TCP port
    """
    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid bind address '{value}'")
    number = int(port)
    if not 1 <= number <= 65535:
        raise ValueError(f"port out of range in '{value}'")
    return host or "0.0.0.0", number
