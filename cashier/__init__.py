"""Cashier: Stripe invoice line item presentation."""

from .exceptions import (
  CashierError,
  ConfigurationError,
  CurrencyError,
  InvalidCurrencyError,
  InvalidLocaleError,
)
from .models.api.billing import InvoiceLineItemDisplay
from .operations.billing import InvoiceLineItem, format_amount, format_currency_using

__all__ = [
  "CashierError",
  "ConfigurationError",
  "CurrencyError",
  "InvalidCurrencyError",
  "InvalidLocaleError",
  "InvoiceLineItem",
  "InvoiceLineItemDisplay",
  "format_amount",
  "format_currency_using",
]
