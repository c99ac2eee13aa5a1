"""Loguru sink setup for applications embedding shardsplit."""

import sys

from loguru import logger

from shardsplit.core.config.logging_config import LoggingConfig


def setup_logging(verbose: bool = False, config: LoggingConfig | None = None) -> None:
    """Replace loguru's default handler with console (and optional file) sinks.

    Args:
        verbose: Log everything down to DEBUG on the console
        config: Logging configuration; console-only WARNING when None
    """
    logger.remove()

    console_level = "DEBUG" if verbose else (config.console_level if config else "WARNING")
    logger.add(
        sys.stderr,
        level=console_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )

    if config is not None and config.file.enabled:
        logger.add(
            config.file.path,
            level=config.file.level,
            rotation=config.file.rotation,
            retention=config.file.retention,
            format=config.file.format,
            enqueue=True,
        )
