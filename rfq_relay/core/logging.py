"""Loguru sink configuration for relay processes."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Configure loguru logging.

    Args:
        level: Console log level
        log_dir: Optional directory for rotating debug log files
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
        "<level>{message}</level>",
        level=level.upper(),
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "relay_{time}.log",
            rotation="1 day",
            retention="7 days",
            level="DEBUG",
        )
