"""
Billing Schedule

Projects a billing anchor onto concrete dates. Anniversary days missing
from a month bill on that month's last day; a February 29th yearly
anniversary bills on February 28th in non-leap years.
"""

from datetime import date, timedelta

from billing_backend.billing.domain.anchor import AnchorKind, BillingAnchor
from billing_backend.billing.domain.calendar import clamp_day


def _add_month(year: int, month: int) -> tuple:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def next_billing_date(anchor: BillingAnchor, after: date) -> date:
    """
    First billing date strictly after ``after``.
    
    Args:
        anchor: Anchor computed for the subscription
        after: Reference date (usually today or the last billing date)
        
    Returns:
        The next date on which a billing period starts
    """
    kind = anchor.kind
    
    if kind == AnchorKind.CALENDAR_MONTH_START:
        year, month = _add_month(after.year, after.month)
        return date(year, month, 1)
    
    if kind in (AnchorKind.ANNIVERSARY_DAY_OF_MONTH, AnchorKind.ANNIVERSARY_MONTH_END):
        candidate = clamp_day(after.year, after.month, anchor.day_of_month)
        if candidate > after:
            return candidate
        year, month = _add_month(after.year, after.month)
        return clamp_day(year, month, anchor.day_of_month)
    
    if kind == AnchorKind.CALENDAR_YEAR_START:
        return date(after.year + 1, 1, 1)
    
    if kind == AnchorKind.ANNIVERSARY_DAY_OF_YEAR:
        candidate = clamp_day(after.year, anchor.month, anchor.day_of_month)
        if candidate > after:
            return candidate
        return clamp_day(after.year + 1, anchor.month, anchor.day_of_month)
    
    if kind in (AnchorKind.CALENDAR_WEEK_START, AnchorKind.ANNIVERSARY_WEEKDAY):
        days_ahead = (int(anchor.weekday) - after.isoweekday()) % 7 or 7
        return after + timedelta(days=days_ahead)
    
    raise ValueError(f"Unsupported anchor kind: {kind}")
