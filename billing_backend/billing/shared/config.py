"""
Billing Configuration

Typed constants derived from settings for the subscription core.

Usage:
    from billing_backend.billing.shared.config import CURRENCY_MISMATCH_CODE, get_week_start
    
    get_week_start()  # Weekday.MONDAY
"""

from billing_backend.core.conf import settings
from billing_backend.billing.domain.calendar import Weekday


# =============================================================================
# ERROR CLASSIFICATION
# =============================================================================
# Remote code for "customer currency differs from plan currency"
CURRENCY_MISMATCH_CODE: str = settings.BILLING_CURRENCY_MISMATCH_CODE

# Failure message when neither the remote error nor the transport says more
TRANSPORT_FAILURE_MESSAGE: str = settings.BILLING_TRANSPORT_FAILURE_MESSAGE


# =============================================================================
# PLAN CATALOG
# =============================================================================
PLAN_PAGE_SIZE: int = settings.BILLING_PLAN_PAGE_SIZE
PLAN_MAX_PAGES: int = settings.BILLING_PLAN_MAX_PAGES


# =============================================================================
# BILLING ANCHORS
# =============================================================================
# Anniversary days up to this value exist in every month
SAFE_MONTH_DAY: int = 28


def get_week_start() -> Weekday:
    """Weekday on which calendar-billed weekly plans renew."""
    return Weekday.from_name(settings.BILLING_WEEK_START)
