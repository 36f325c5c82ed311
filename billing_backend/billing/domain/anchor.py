"""
Billing Anchor Descriptor

Pure description of which anchor rule applies to a subscription, and
which edge-case flags are set. Formatting it for display belongs to the
presentation layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .calendar import Weekday
from .plan import PlanInterval
from .subscription import BillingTime


class AnchorKind(Enum):
    """Anchor rules, one per {interval x billing time} outcome."""
    CALENDAR_MONTH_START = "calendar_month_start"
    ANNIVERSARY_DAY_OF_MONTH = "anniversary_day_of_month"
    ANNIVERSARY_MONTH_END = "anniversary_month_end"
    CALENDAR_YEAR_START = "calendar_year_start"
    ANNIVERSARY_DAY_OF_YEAR = "anniversary_day_of_year"
    CALENDAR_WEEK_START = "calendar_week_start"
    ANNIVERSARY_WEEKDAY = "anniversary_weekday"


@dataclass(frozen=True)
class BillingAnchor:
    """
    When the next billing period starts.
    
    Attributes:
        kind: Anchor rule
        interval: Plan interval the anchor was computed for
        billing_time: Billing-time mode the anchor was computed for
        day_of_month: Anniversary day (monthly and yearly anniversaries)
        month: Anniversary month (yearly anniversaries)
        weekday: Renewal weekday (weekly anchors)
        is_clamped: Some months lack day_of_month and bill on their last day
        is_leap_day_case: Yearly anniversary on February 29th
    """
    kind: AnchorKind
    interval: PlanInterval
    billing_time: BillingTime
    day_of_month: Optional[int] = None
    month: Optional[int] = None
    weekday: Optional[Weekday] = None
    is_clamped: bool = False
    is_leap_day_case: bool = False
    
    @property
    def month_day(self) -> Optional[str]:
        """``MM-DD`` for yearly anniversaries, otherwise None."""
        if self.month is None or self.day_of_month is None:
            return None
        return f"{self.month:02d}-{self.day_of_month:02d}"
    
    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'kind': self.kind.value,
            'interval': self.interval.value,
            'billing_time': self.billing_time.value,
            'day_of_month': self.day_of_month,
            'month': self.month,
            'month_day': self.month_day,
            'weekday': self.weekday.name.lower() if self.weekday else None,
            'is_clamped': self.is_clamped,
            'is_leap_day_case': self.is_leap_day_case,
        }
