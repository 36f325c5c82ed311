"""Billing anchor computation and projection."""

from .calculator import (
    BillingAnchorCalculator,
    compute_billing_anchor,
)
from .schedule import next_billing_date

__all__ = [
    'BillingAnchorCalculator',
    'compute_billing_anchor',
    'next_billing_date',
]
