"""Structured logging configuration."""

import logging
import sys
from typing import Any

from medassess.core.config import settings


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured data."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        for key in ("action", "entity", "entity_id", "outcome"):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Simple key=value format for readability
        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def setup_logging() -> None:
    """Configure application logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if settings.is_dev:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = StructuredFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class ActivityLogger:
    """Logger for record store write activity."""

    def __init__(self) -> None:
        self.logger = get_logger("activity")

    def log(
        self,
        action: str,
        entity: str,
        entity_id: Any,
        outcome: str = "success",
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Log a create/update/delete outcome."""
        level = logging.INFO if outcome == "success" else logging.WARNING
        self.logger.log(
            level,
            f"ACTIVITY: action={action} entity={entity}:{entity_id} "
            f"outcome={outcome} metadata={metadata or {}}",
            extra={
                "action": action,
                "entity": entity,
                "entity_id": entity_id,
                "outcome": outcome,
            },
        )


activity_logger = ActivityLogger()
