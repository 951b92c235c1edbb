"""Invoice line item display models."""

from pydantic import BaseModel, Field

from ....operations.billing.invoice_line_item import InvoiceLineItem


class InvoiceLineItemDisplay(BaseModel):
  """Rendered values of one invoice line item."""

  id: str | None = Field(None, description="Stripe line item ID")
  description: str | None = Field(None, description="Line item description")
  amount: int = Field(..., description="Amount in the currency's minor unit")
  currency: str = Field(..., description="Currency code (usd)")
  total: str = Field(..., description="Formatted amount, e.g. $10.99")
  quantity: int | None = Field(None, description="Quantity")
  is_subscription: bool = Field(
    ..., description="Whether the line item bills a subscription period"
  )
  start_date: str | None = Field(None, description="Period start, e.g. Jan 1, 2024")
  end_date: str | None = Field(None, description="Period end, e.g. Feb 1, 2024")
  period_start: str | None = Field(None, description="Period start (ISO format)")
  period_end: str | None = Field(None, description="Period end (ISO format)")
  inclusive_tax_percentage: int | None = Field(
    None, description="Summed inclusive tax rate percentage"
  )
  exclusive_tax_percentage: int | None = Field(
    None, description="Summed exclusive tax rate percentage"
  )

  @classmethod
  def from_line_item(cls, line_item: InvoiceLineItem) -> "InvoiceLineItemDisplay":
    """Build the display model from an invoice line item view."""
    item = line_item.as_stripe_invoice_line_item()
    period_start = line_item.start_date_as_datetime()
    period_end = line_item.end_date_as_datetime()

    return cls(
      id=getattr(item, "id", None),
      description=getattr(item, "description", None),
      amount=line_item.amount,
      currency=line_item.currency,
      total=line_item.total(),
      quantity=getattr(item, "quantity", None),
      is_subscription=line_item.is_subscription(),
      start_date=line_item.start_date(),
      end_date=line_item.end_date(),
      period_start=period_start.isoformat() if period_start else None,
      period_end=period_end.isoformat() if period_end else None,
      inclusive_tax_percentage=line_item.inclusive_tax_percentage(),
      exclusive_tax_percentage=line_item.exclusive_tax_percentage(),
    )
