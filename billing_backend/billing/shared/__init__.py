"""Shared configuration and exceptions for the billing module."""

from .config import (
    CURRENCY_MISMATCH_CODE,
    TRANSPORT_FAILURE_MESSAGE,
    PLAN_PAGE_SIZE,
    PLAN_MAX_PAGES,
    SAFE_MONTH_DAY,
    get_week_start,
)
from .exceptions import (
    BillingError,
    PlanNotFoundError,
    CatalogError,
    SubscriptionError,
    SubmissionInProgressError,
    FormDisposedError,
)

__all__ = [
    'CURRENCY_MISMATCH_CODE',
    'TRANSPORT_FAILURE_MESSAGE',
    'PLAN_PAGE_SIZE',
    'PLAN_MAX_PAGES',
    'SAFE_MONTH_DAY',
    'get_week_start',
    'BillingError',
    'PlanNotFoundError',
    'CatalogError',
    'SubscriptionError',
    'SubmissionInProgressError',
    'FormDisposedError',
]
