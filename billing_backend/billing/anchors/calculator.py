"""
Billing Anchor Calculator

Derives when the next billing period of a subscription starts from the
plan interval, the billing-time mode and the current date.

Covers every {interval x billing time} pair:
- Monthly: first of next month (calendar) or the creation day of month
  (anniversary), clamped to month-end for days 29 to 31
- Yearly: January 1st (calendar) or the creation month/day (anniversary),
  with February 29th flagged as the leap-day case
- Weekly, and any other interval: start of next week (calendar) or the
  creation weekday (anniversary)

The computation is pure: the date is always passed in or read from the
injected clock.
"""

import logging
from datetime import date
from typing import Callable, Optional, Union

from billing_backend.billing.domain.anchor import AnchorKind, BillingAnchor
from billing_backend.billing.domain.calendar import Weekday, is_leap_day
from billing_backend.billing.domain.plan import Plan, PlanInterval
from billing_backend.billing.domain.subscription import BillingTime
from billing_backend.billing.shared.config import SAFE_MONTH_DAY, get_week_start

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


def compute_billing_anchor(
    plan: Optional[Plan],
    billing_time: Optional[Union[BillingTime, str]],
    today: date,
    week_start: Optional[Weekday] = None
) -> Optional[BillingAnchor]:
    """
    Compute the billing anchor for a plan.
    
    Args:
        plan: Selected plan; None when nothing is selected
        billing_time: Calendar or anniversary billing; None when not chosen yet
        today: Current date (creation date of the subscription)
        week_start: Weekday starting a calendar week (default from settings)
        
    Returns:
        BillingAnchor, or None when no plan or billing time is selected
        
    Raises:
        ValueError: If billing_time is not a known mode
    """
    if plan is None or billing_time is None:
        return None
    
    billing_time = BillingTime(billing_time)
    
    if plan.interval == PlanInterval.MONTHLY:
        anchor = _monthly_anchor(plan.interval, billing_time, today)
    elif plan.interval == PlanInterval.YEARLY:
        anchor = _yearly_anchor(plan.interval, billing_time, today)
    else:
        anchor = _weekly_anchor(plan.interval, billing_time, today, week_start or get_week_start())
    
    logger.debug(f"[ANCHOR] Plan {plan.id} ({plan.interval.value}, {billing_time.value}) on {today}: {anchor.kind.value}")
    return anchor


def _monthly_anchor(interval: PlanInterval, billing_time: BillingTime, today: date) -> BillingAnchor:
    if billing_time == BillingTime.CALENDAR:
        return BillingAnchor(
            kind=AnchorKind.CALENDAR_MONTH_START,
            interval=interval,
            billing_time=billing_time,
            day_of_month=1,
        )
    
    day = today.day
    if day <= SAFE_MONTH_DAY:
        return BillingAnchor(
            kind=AnchorKind.ANNIVERSARY_DAY_OF_MONTH,
            interval=interval,
            billing_time=billing_time,
            day_of_month=day,
        )
    
    # 29th and 30th exist in most months; the 31st means "last day"
    kind = AnchorKind.ANNIVERSARY_DAY_OF_MONTH if day < 31 else AnchorKind.ANNIVERSARY_MONTH_END
    return BillingAnchor(
        kind=kind,
        interval=interval,
        billing_time=billing_time,
        day_of_month=day,
        is_clamped=True,
    )


def _yearly_anchor(interval: PlanInterval, billing_time: BillingTime, today: date) -> BillingAnchor:
    if billing_time == BillingTime.CALENDAR:
        return BillingAnchor(
            kind=AnchorKind.CALENDAR_YEAR_START,
            interval=interval,
            billing_time=billing_time,
            day_of_month=1,
            month=1,
        )
    
    leap_day = is_leap_day(today)
    return BillingAnchor(
        kind=AnchorKind.ANNIVERSARY_DAY_OF_YEAR,
        interval=interval,
        billing_time=billing_time,
        day_of_month=today.day,
        month=today.month,
        is_clamped=leap_day,
        is_leap_day_case=leap_day,
    )


def _weekly_anchor(
    interval: PlanInterval,
    billing_time: BillingTime,
    today: date,
    week_start: Weekday
) -> BillingAnchor:
    if billing_time == BillingTime.CALENDAR:
        return BillingAnchor(
            kind=AnchorKind.CALENDAR_WEEK_START,
            interval=interval,
            billing_time=billing_time,
            weekday=week_start,
        )
    
    return BillingAnchor(
        kind=AnchorKind.ANNIVERSARY_WEEKDAY,
        interval=interval,
        billing_time=billing_time,
        weekday=Weekday.from_date(today),
    )


class BillingAnchorCalculator:
    """
    Billing anchor calculator bound to a clock.
    
    Usage:
        calculator = BillingAnchorCalculator(clock=lambda: date(2021, 1, 31))
        anchor = calculator.compute(plan, BillingTime.ANNIVERSARY)
    """
    
    def __init__(self, clock: Clock = date.today, week_start: Optional[Weekday] = None):
        self.clock = clock
        self.week_start = week_start
    
    def compute(
        self,
        plan: Optional[Plan],
        billing_time: Optional[Union[BillingTime, str]],
        today: Optional[date] = None
    ) -> Optional[BillingAnchor]:
        return compute_billing_anchor(
            plan,
            billing_time,
            today or self.clock(),
            week_start=self.week_start,
        )
