"""
Centralized configuration package for Cashier.
"""

from .env import EnvConfig, env

__all__ = [
  "EnvConfig",
  "env",
]
