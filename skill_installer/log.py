"""Logging configuration for skill-installer.

Console output goes to stderr and stays at WARNING unless verbose mode is
requested. An optional file sink records DEBUG detail for troubleshooting.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

# Remove default handler
logger.remove()

_logger_configured = False


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru sinks once per process.

    Args:
        verbose: Lower the console threshold to DEBUG
        log_file: Optional file that receives every DEBUG record
    """
    global _logger_configured

    if _logger_configured:
        return

    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if verbose else "WARNING",
        colorize=None,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
        )

    _logger_configured = True
