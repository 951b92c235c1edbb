from .invoice import InvoiceLineItemDisplay

__all__ = ["InvoiceLineItemDisplay"]
