"""
Custom exception types for Cashier.

Each exception carries a machine-readable error code and a details mapping so
that callers rendering invoices can report formatting problems consistently.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class CashierError(Exception):
  """
  Base exception for all Cashier errors.

  Attributes:
      message: Human-readable error message
      error_code: Application-specific error code for categorization
      details: Additional error context and metadata
      timestamp: When the error occurred
  """

  def __init__(
    self,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message)
    self.message = message
    self.error_code = error_code or self.__class__.__name__
    self.details = details or {}
    self.timestamp = datetime.now(timezone.utc).isoformat()

  def to_dict(self) -> Dict[str, Any]:
    """Convert exception to dictionary for API responses."""
    return {
      "error": self.error_code,
      "message": self.message,
      "details": self.details,
      "timestamp": self.timestamp,
    }


# ============================================================================
# Currency Exceptions
# ============================================================================


class CurrencyError(CashierError):
  """Base exception for currency formatting."""

  pass


class InvalidCurrencyError(CurrencyError):
  """Raised when a currency code is not a known ISO 4217 code."""

  def __init__(self, currency: Optional[str]):
    super().__init__(
      f"Unknown currency '{currency}'",
      error_code="INVALID_CURRENCY",
      details={"currency": currency},
    )


class InvalidLocaleError(CurrencyError):
  """Raised when a locale identifier cannot be parsed."""

  def __init__(self, locale: Optional[str], reason: Optional[str] = None):
    details = {"locale": locale}
    if reason:
      details["reason"] = reason
    super().__init__(
      f"Unknown locale '{locale}'",
      error_code="INVALID_LOCALE",
      details=details,
    )


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(CashierError):
  """Raised when there are configuration issues."""

  def __init__(self, config_key: str, reason: str):
    super().__init__(
      f"Configuration error for '{config_key}': {reason}",
      error_code="CONFIGURATION_ERROR",
      details={"config_key": config_key, "reason": reason},
    )
