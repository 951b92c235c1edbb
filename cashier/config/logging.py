"""
Structured logging configuration for Cashier.

Log records are rendered as single-line JSON outside of development so that
invoice rendering problems can be searched by component and action.

Key Features:
- Structured JSON output
- Automatic log level management by environment
- Error categorization
"""

import json
import logging
import logging.config
import traceback
from datetime import datetime, timezone
from typing import Any

from cashier.config.env import EnvConfig


class StructuredFormatter(logging.Formatter):
  """
  JSON formatter for searchable structured logs.

  - Timestamp in ISO format
  - Consistent field names for filtering
  - Hierarchical component/action structure
  - Metadata preserved as searchable fields
  """

  def format(self, record: logging.LogRecord) -> str:
    log_entry = {
      "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
      .isoformat()
      .replace("+00:00", "Z"),
      "level": record.levelname,
      "component": getattr(record, "component", record.name),
      "message": record.getMessage(),
    }

    if hasattr(record, "action"):
      log_entry["action"] = record.action

    if hasattr(record, "line_item_id"):
      log_entry["line_item_id"] = record.line_item_id
    if hasattr(record, "currency"):
      log_entry["currency"] = record.currency

    if record.levelno >= logging.ERROR:
      if record.exc_info:
        log_entry["error"] = {
          "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
          "message": str(record.exc_info[1]) if record.exc_info[1] else "",
          "traceback": traceback.format_exception(*record.exc_info),
        }

      if hasattr(record, "error_category"):
        log_entry["error_category"] = record.error_category

    if hasattr(record, "metadata"):
      log_entry["metadata"] = record.metadata

    return json.dumps(log_entry, default=str, separators=(",", ":"))


def get_logging_config(environment: str | None = None) -> dict[str, Any]:
  """
  Generate logging configuration based on environment.

  Environment names are normalized with EnvConfig.get_environment_key, so
  "prod" and "production" configure identically.

  - production: INFO level, structured output
  - staging: INFO level, structured output
  - test: WARNING level, minimal output for clean test runs
  - development: DEBUG level, plain text (unless LOG_LEVEL overrides)
  """
  env = EnvConfig.get_environment_key(environment)

  log_level_override = getattr(EnvConfig, "LOG_LEVEL", None)

  if env in ("production", "staging"):
    default_level = "INFO"
  elif env == "test":
    default_level = "WARNING"
  else:  # development
    default_level = log_level_override or "DEBUG"

  return {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
      "structured": {
        "()": StructuredFormatter,
      },
      "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
      "console": {
        "class": "logging.StreamHandler",
        "level": default_level,
        "formatter": "simple" if env == "development" else "structured",
        "stream": "ext://sys.stdout",
      },
      "errors": {
        "class": "logging.StreamHandler",
        "level": "ERROR",
        "formatter": "structured",
        "stream": "ext://sys.stderr",
      },
    },
    "loggers": {
      "cashier": {
        "level": default_level,
        "handlers": ["console"],
        "propagate": False,
      },
      "stripe": {
        "level": "WARNING",
        "handlers": ["console"],
        "propagate": False,
      },
    },
    "root": {
      "level": "WARNING",
      "handlers": ["errors"] if env != "development" else ["console"],
    },
  }


def setup_logging(environment: str | None = None) -> None:
  """Initialize structured logging configuration."""
  logging.config.dictConfig(get_logging_config(environment))


def get_logger(name: str) -> logging.Logger:
  """Get a logger with structured logging capabilities."""
  return logging.getLogger(name)


def log_error(
  logger: logging.Logger,
  error: Exception,
  component: str,
  action: str,
  error_category: str = "application",
  metadata: dict[str, Any] | None = None,
  currency: str | None = None,
) -> None:
  """Log error with structured data for easy searching."""
  extra = {
    "component": component,
    "action": action,
    "error_category": error_category,
    "metadata": metadata or {},
  }
  if currency is not None:
    extra["currency"] = currency

  logger.error(f"Error in {component}.{action}: {error!s}", exc_info=True, extra=extra)
