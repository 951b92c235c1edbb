"""Read-only view over a single Stripe invoice line item.

The view derives the values invoice templates need (formatted totals, tax
percentages, subscription period dates) and forwards every other attribute to
the wrapped Stripe object.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Optional

import stripe
from babel.dates import format_date

from ...logger import get_logger
from .currency import format_amount

logger = get_logger(__name__)

SUBSCRIPTION_TYPE = "subscription"


class InvoiceLineItem:
  """Invoice line item wrapper for an owner and a Stripe line item.

  Args:
      owner: The billable model the invoice belongs to. Held for callers and
          never dereferenced here.
      item: A ``stripe.InvoiceLineItem``. Plain mappings are converted with
          ``construct_from`` so nested values support attribute access.
      formatter: Callable turning ``(amount, currency)`` into a display
          string. Defaults to :func:`format_amount`.
  """

  def __init__(
    self,
    owner: Any,
    item: stripe.InvoiceLineItem | Mapping[str, Any],
    formatter: Optional[Callable[[int, str], str]] = None,
  ):
    if not isinstance(item, stripe.StripeObject):
      logger.debug(
        "Wrapping plain mapping as a Stripe invoice line item",
        extra={"line_item_id": item.get("id")},
      )
      item = stripe.InvoiceLineItem.construct_from(dict(item), None)

    self._owner = owner
    self._item = item
    self._formatter = formatter or format_amount

  @property
  def owner(self) -> Any:
    """The billable model the invoice belongs to."""
    return self._owner

  def total(self) -> str:
    """Get the formatted total for the invoice line item."""
    return self._formatter(self._item.amount, self._item.currency)

  def inclusive_tax_percentage(self) -> Optional[int]:
    """Get the total percentage of the inclusive tax for the line item."""
    return self._calculate_tax_percentage(inclusive=True)

  def exclusive_tax_percentage(self) -> Optional[int]:
    """Get the total percentage of the exclusive tax for the line item."""
    return self._calculate_tax_percentage(inclusive=False)

  def _calculate_tax_percentage(self, inclusive: bool) -> Optional[int]:
    tax_amounts = getattr(self._item, "tax_amounts", None)
    if tax_amounts is None:
      return None

    total = sum(
      (
        Decimal(str(tax_amount["tax_rate"]["percentage"]))
        for tax_amount in tax_amounts
        if tax_amount["inclusive"] is inclusive
      ),
      Decimal(0),
    )
    # int() truncates toward zero
    return int(total)

  def is_subscription(self) -> bool:
    """Determine if the invoice line item is for a subscription."""
    return getattr(self._item, "type", None) == SUBSCRIPTION_TYPE

  def start_date(self) -> Optional[str]:
    """Get a human readable date for the start date, e.g. ``Jan 1, 2024``."""
    return self._format_date(self.start_date_as_datetime())

  def end_date(self) -> Optional[str]:
    """Get a human readable date for the end date."""
    return self._format_date(self.end_date_as_datetime())

  def start_date_as_datetime(self) -> Optional[datetime]:
    """Get a UTC datetime for the start of the subscription period."""
    return self._period_boundary("start")

  def end_date_as_datetime(self) -> Optional[datetime]:
    """Get a UTC datetime for the end of the subscription period."""
    return self._period_boundary("end")

  def _period_boundary(self, key: str) -> Optional[datetime]:
    if not self.is_subscription():
      return None

    period = getattr(self._item, "period", None)
    timestamp = getattr(period, key, None) if period is not None else None
    if timestamp is None:
      return None

    return datetime.fromtimestamp(timestamp, tz=timezone.utc)

  @staticmethod
  def _format_date(value: Optional[datetime]) -> Optional[str]:
    if value is None:
      return None
    # Fixed English month names regardless of the process LC_TIME
    return format_date(value, "MMM d, y", locale="en")

  def as_stripe_invoice_line_item(self) -> stripe.InvoiceLineItem:
    """Get the underlying Stripe invoice line item."""
    return self._item

  def __getattr__(self, key: str) -> Any:
    # Only reached for names not defined on the view
    if key.startswith("_"):
      raise AttributeError(key)
    return getattr(self._item, key)

  def __repr__(self) -> str:
    item_id = getattr(self._item, "id", None)
    item_type = getattr(self._item, "type", None)
    return f"<InvoiceLineItem id={item_id!r} type={item_type!r}>"
