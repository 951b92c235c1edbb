from .currency import format_amount, format_currency_using
from .invoice_line_item import InvoiceLineItem

__all__ = [
  "InvoiceLineItem",
  "format_amount",
  "format_currency_using",
]
