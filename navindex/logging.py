from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "NAV_INDEX_LOG_DIR",
        Path.home() / ".local" / "state" / "nav-index" / "logs",
    )
)

# Note: TRACE level already exists in loguru at level 5 (below DEBUG which is 10)


def _should_log_traversal(record) -> bool:
    """Filter per-node traversal logs - only show in TRACE mode."""
    tags = record["extra"].get("tags", [])

    if "traversal" in tags:
        return record["level"].no <= logger.level("TRACE").no

    return True


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
) -> Logger:
    """
    Setup logging sinks.

    Log Files (only when log_dir is given):
    - operations.log: INFO+ events (7 day retention)
    - structured.jsonl: Structured JSON logs for analysis (7 day retention)

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (per-node traversal)
        log_dir: Directory for file sinks; console only when omitted
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})
    logger.enable("navindex")

    if trace:
        console_level = "TRACE"
    elif debug:
        console_level = "DEBUG"
    else:
        console_level = "INFO"

    logger.add(
        sys.stderr,
        level=console_level,
        backtrace=False,
        diagnose=False,
        filter=_should_log_traversal if not trace else None,
        colorize=True,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]: <10}</cyan> | "
            "{message}"
        ),
    )

    if log_dir is None:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_dir / "operations.log",
        level="INFO",
        rotation="5 MB",
        retention="7 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{extra[source]: <10} | "
            "{message}"
        ),
    )

    logger.add(
        log_dir / "structured.jsonl",
        level="INFO",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
        serialize=True,
        format="{message}",
    )

    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["navindex", "build"])
        source: Source component (e.g., "builder", "config")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating component loggers with fixed source and tags.
    """

    @staticmethod
    def for_builder() -> Logger:
        """Logger for building the navigation index."""
        return logger.bind(source="builder", tags=["navindex", "build"])

    @staticmethod
    def for_traversal() -> Logger:
        """Logger for per-node tree traversal (TRACE only)."""
        return logger.bind(source="builder", tags=["navindex", "traversal"])

    @staticmethod
    def for_reducer() -> Logger:
        """Logger for index update events."""
        return logger.bind(source="reducer", tags=["navindex", "update"])

    @staticmethod
    def for_config() -> Logger:
        """Logger for settings and menu tree loading."""
        return logger.bind(source="config", tags=["config"])

    @staticmethod
    def for_store() -> Logger:
        """Logger for the state container."""
        return logger.bind(source="store", tags=["navindex", "store"])
