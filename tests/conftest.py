import os

# Quiet structured logging before the package configures it on import
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
import stripe

from cashier.operations.billing import currency as currency_module

# 2024-01-01T00:00:00Z and 2024-02-01T00:00:00Z
PERIOD_START = 1704067200
PERIOD_END = 1706745600


@pytest.fixture(autouse=True)
def reset_currency_formatter():
  """Ensure a custom formatter registered by one test never leaks into another."""
  currency_module.format_currency_using(None)
  yield
  currency_module.format_currency_using(None)


@pytest.fixture
def make_stripe_line_item():
  """Build Stripe invoice line items the way the Stripe client deserializes them."""

  def _make(**overrides):
    values = {
      "id": "il_test123",
      "object": "line_item",
      "amount": 1099,
      "currency": "usd",
      "description": "1 x Standard (at $10.99 / month)",
      "quantity": 1,
      "type": "subscription",
      "period": {"start": PERIOD_START, "end": PERIOD_END},
      "tax_amounts": [],
    }
    values.update(overrides)
    return stripe.InvoiceLineItem.construct_from(values, "sk_test_123")

  return _make


@pytest.fixture
def owner():
  """Stand-in for the billable model owning the invoice."""

  class Owner:
    id = "org_test123"
    stripe_customer_id = "cus_test123"

  return Owner()
