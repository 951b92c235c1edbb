"""Tests for the invoice line item display model."""

from unittest.mock import Mock, patch

import stripe

from cashier.models.api.billing import InvoiceLineItemDisplay
from cashier.operations.billing import InvoiceLineItem


class TestInvoiceLineItemDisplay:
  """Tests for building display models from line item views."""

  def test_subscription_line_item(self, owner, make_stripe_line_item):
    """Test that every display field is read through the view."""
    item = make_stripe_line_item(
      tax_amounts=[
        {
          "amount": 82,
          "inclusive": False,
          "tax_rate": {"object": "tax_rate", "percentage": 7.5},
        }
      ]
    )
    display = InvoiceLineItemDisplay.from_line_item(
      InvoiceLineItem(owner, item, formatter=Mock(return_value="$10.99"))
    )

    assert display.id == "il_test123"
    assert display.description == "1 x Standard (at $10.99 / month)"
    assert display.amount == 1099
    assert display.currency == "usd"
    assert display.total == "$10.99"
    assert display.quantity == 1
    assert display.is_subscription is True
    assert display.start_date == "Jan 1, 2024"
    assert display.end_date == "Feb 1, 2024"
    assert display.period_start == "2024-01-01T00:00:00+00:00"
    assert display.period_end == "2024-02-01T00:00:00+00:00"
    assert display.inclusive_tax_percentage == 0
    assert display.exclusive_tax_percentage == 7

  def test_one_off_line_item(self, owner, make_stripe_line_item):
    """Test that inapplicable values are None in the display model."""
    item = make_stripe_line_item(
      type="invoiceitem", period=None, tax_amounts=None, quantity=None
    )
    display = InvoiceLineItemDisplay.from_line_item(InvoiceLineItem(owner, item))

    assert display.total == "$10.99"
    assert display.is_subscription is False
    assert display.start_date is None
    assert display.period_end is None
    assert display.quantity is None
    assert display.inclusive_tax_percentage is None
    assert display.exclusive_tax_percentage is None

  def test_serializes_to_json(self, owner, make_stripe_line_item):
    """Test that the model dumps cleanly for API responses."""
    display = InvoiceLineItemDisplay.from_line_item(
      InvoiceLineItem(owner, make_stripe_line_item())
    )

    payload = display.model_dump()

    assert payload["total"] == "$10.99"
    assert payload["start_date"] == "Jan 1, 2024"

  def test_builds_without_dict_methods(self, owner, make_stripe_line_item):
    """Test that the model reads Stripe fields by attribute, not dict.get."""
    item = make_stripe_line_item()

    with patch.object(
      stripe.StripeObject, "get", side_effect=AttributeError("get"), create=True
    ):
      display = InvoiceLineItemDisplay.from_line_item(
        InvoiceLineItem(owner, item, formatter=Mock(return_value="$10.99"))
      )

    assert display.id == "il_test123"
    assert display.description == "1 x Standard (at $10.99 / month)"
    assert display.quantity == 1
    assert display.start_date == "Jan 1, 2024"
