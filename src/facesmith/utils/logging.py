"""Logging utilities for Facesmith."""

import logging
from pathlib import Path

import structlog


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("facesmith")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RequestLogger:
    """Structured logging for stylesheet request outcomes.

    Every terminal outcome of a request goes through one of these methods,
    so rejections are observable without leaking details to clients.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger("facesmith.request")

    def log_rejected(
        self,
        status_code: int,
        error: Exception,
        family: str | None = None,
        referer: str | None = None,
    ) -> None:
        """Log a request that ended with an error status."""
        log = self._logger.error if status_code >= 500 else self._logger.info
        log(
            "Request rejected",
            status=status_code,
            error=str(error),
            error_type=type(error).__name__,
            family=family,
            referer=referer,
        )

    def log_not_modified(self, family: str, etag: str) -> None:
        """Log a conditional request answered with 304."""
        self._logger.debug("Not modified", family=family, etag=etag)

    def log_served(self, family: str, fonts: int, size: int, duration_ms: float) -> None:
        """Log a successfully rendered stylesheet."""
        self._logger.info(
            "Stylesheet served",
            family=family,
            fonts=fonts,
            bytes=size,
            duration_ms=round(duration_ms, 2),
        )

    def log_fingerprint_unavailable(self, reason: str, client_token: str | None) -> None:
        """Log an entity tag that could not be computed."""
        self._logger.warning(
            "Entity tag unavailable",
            reason=reason,
            echoed=client_token is not None,
        )
