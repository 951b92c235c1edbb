"""
Centralized environment variable configuration.

This module provides a single source of truth for the environment variables
read by Cashier, with default values.

Organization:
- Helper functions for env var access
- Core application settings
- Currency display defaults
"""

import os
from typing import Optional


# ==========================================================================
# HELPER FUNCTIONS FOR ENVIRONMENT VARIABLE ACCESS
# ==========================================================================


def get_str_env(key: str, default: str = "") -> str:
  """
  Get a string environment variable.

  Args:
      key: Environment variable name
      default: Default value if not set

  Returns:
      String value from environment or default
  """
  return os.getenv(key, default)


# ==========================================================================
# MAIN CONFIGURATION CLASS
# ==========================================================================


class EnvConfig:
  """
  Centralized environment variable configuration.

  Values are read once at import time. Tests override them by patching
  attributes on the class or on the module-level ``env`` instance.
  """

  # ==========================================================================
  # CORE APPLICATION SETTINGS
  # ==========================================================================

  ENVIRONMENT = get_str_env("ENVIRONMENT", "dev")
  LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO")

  # ==========================================================================
  # CURRENCY DISPLAY
  # ==========================================================================

  # Lowercase ISO 4217 code, matching what Stripe returns on line items
  CASHIER_CURRENCY = get_str_env("CASHIER_CURRENCY", "usd")
  CASHIER_CURRENCY_LOCALE = get_str_env("CASHIER_CURRENCY_LOCALE", "en_US")

  @classmethod
  def get_environment_key(cls, environment: Optional[str] = None) -> str:
    """
    Get normalized environment key for configuration lookups.

    Args:
        environment: Environment name to normalize; defaults to ENVIRONMENT

    Returns:
        Normalized environment name: 'production', 'staging', 'test',
        or 'development'
    """
    env_lower = (environment or cls.ENVIRONMENT).lower()
    if env_lower in ["prod", "production"]:
      return "production"
    elif env_lower in ["staging", "stage"]:
      return "staging"
    elif env_lower in ["test", "testing"]:
      return "test"
    else:
      return "development"

  @classmethod
  def is_development(cls) -> bool:
    """Check if running in development environment."""
    return cls.get_environment_key() == "development"


env = EnvConfig()
