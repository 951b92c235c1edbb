"""Currency amount formatting for invoice display.

Stripe reports every amount as an integer in the currency's minor unit. This
module turns those integers into localized display strings with Babel, and
lets applications swap in their own formatter.
"""

from decimal import Decimal
from typing import Callable, Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency, get_currency_precision, is_currency

from ...config import env
from ...exceptions import (
  ConfigurationError,
  InvalidCurrencyError,
  InvalidLocaleError,
)
from ...logger import get_logger, log_app_error

logger = get_logger(__name__)

AmountFormatter = Callable[[int, str], str]

_custom_formatter: Optional[AmountFormatter] = None


def format_currency_using(callback: Optional[AmountFormatter]) -> None:
  """Register a custom amount formatter, or restore the default with ``None``.

  The callback receives the minor-unit amount and the currency code exactly as
  they were passed to :func:`format_amount`.
  """
  global _custom_formatter

  _custom_formatter = callback
  if callback is None:
    logger.debug("Restored default currency formatter")
  else:
    logger.debug(
      f"Registered custom currency formatter {getattr(callback, '__name__', callback)!r}"
    )


def format_amount(
  amount: int, currency: Optional[str] = None, locale: Optional[str] = None
) -> str:
  """Format a minor-unit amount into a displayable currency string.

  Args:
      amount: Amount in the currency's smallest unit (e.g. cents)
      currency: ISO 4217 code in any case; defaults to ``CASHIER_CURRENCY``
      locale: Babel locale identifier; defaults to ``CASHIER_CURRENCY_LOCALE``

  Returns:
      Localized currency string, e.g. ``"$10.99"`` for ``(1099, "usd")``

  Raises:
      ConfigurationError: No currency given and no default configured
      InvalidCurrencyError: Unknown currency code
      InvalidLocaleError: Unknown or malformed locale
  """
  currency = currency or env.CASHIER_CURRENCY
  if not currency:
    raise ConfigurationError("CASHIER_CURRENCY", "no default currency configured")

  if _custom_formatter is not None:
    return _custom_formatter(amount, currency)

  code = currency.upper()
  if not is_currency(code):
    raise InvalidCurrencyError(currency)

  locale = locale or env.CASHIER_CURRENCY_LOCALE
  try:
    parsed_locale = Locale.parse(locale)
  except (UnknownLocaleError, ValueError, TypeError) as e:
    log_app_error(
      e,
      component="currency",
      action="format_amount",
      error_category="formatting",
      metadata={"locale": locale},
      currency=code,
    )
    raise InvalidLocaleError(locale, str(e)) from e

  precision = get_currency_precision(code)
  major_units = Decimal(amount).scaleb(-precision)

  return format_currency(major_units, code, locale=parsed_locale)
