"""Domain entities for the subscription core."""

from .calendar import Weekday, days_in_month, clamp_day, is_leap_day
from .plan import Plan, PlanInterval
from .subscription import (
    BillingTime,
    ExistingSubscription,
    SubmissionRequest,
    build_submission_request,
)
from .anchor import AnchorKind, BillingAnchor
from .outcome import OutcomeKind, Outcome, Success, CurrencyMismatch, Failure

__all__ = [
    'Weekday',
    'days_in_month',
    'clamp_day',
    'is_leap_day',
    'Plan',
    'PlanInterval',
    'BillingTime',
    'ExistingSubscription',
    'SubmissionRequest',
    'build_submission_request',
    'AnchorKind',
    'BillingAnchor',
    'OutcomeKind',
    'Outcome',
    'Success',
    'CurrencyMismatch',
    'Failure',
]
