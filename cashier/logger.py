"""
Cashier logging entry point.

Importing this module configures structured logging once and exposes the
package logger along with the structured helpers from ``config.logging``.
"""

import logging
from typing import Any, Dict, Optional

from .config import env
from .config.logging import get_logger, log_error, setup_logging

setup_logging()

logger = get_logger("cashier")

if env.is_development():
  # Stripe's HTTP client logs every request at INFO
  logging.getLogger("stripe").setLevel(logging.WARNING)
  logging.getLogger("urllib3").setLevel(logging.WARNING)


def log_app_error(
  error: Exception,
  component: str,
  action: str,
  error_category: str = "application",
  metadata: Optional[Dict[str, Any]] = None,
  currency: Optional[str] = None,
) -> None:
  """Log application errors with context."""
  log_error(
    logger,
    error,
    component,
    action,
    error_category,
    metadata,
    currency=currency,
  )


__all__ = [
  "logger",
  "log_app_error",
  "log_error",
  "get_logger",
]
