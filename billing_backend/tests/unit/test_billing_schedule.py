"""Tests for projecting billing anchors onto dates."""

from datetime import date

import pytest


def _anchor(plan, billing_time, today):
    from billing_backend.billing.anchors import compute_billing_anchor

    return compute_billing_anchor(plan, billing_time, today)


class TestMonthlySchedule:
    """Tests for monthly anchors."""

    def test_calendar_next_month(self, monthly_plan):
        """Test calendar billing rolls to the 1st, across year end."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(monthly_plan, "calendar", date(2021, 12, 15))

        assert next_billing_date(anchor, date(2021, 12, 15)) == date(2022, 1, 1)
        assert next_billing_date(anchor, date(2022, 1, 1)) == date(2022, 2, 1)

    def test_anniversary_later_this_month(self, monthly_plan):
        """Test an anniversary day still ahead this month is used."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(monthly_plan, "anniversary", date(2021, 1, 12))

        assert next_billing_date(anchor, date(2021, 3, 2)) == date(2021, 3, 12)
        assert next_billing_date(anchor, date(2021, 3, 12)) == date(2021, 4, 12)

    @pytest.mark.parametrize(
        "created, after, expected",
        [
            (date(2021, 1, 30), date(2021, 2, 10), date(2021, 2, 28)),
            (date(2021, 1, 30), date(2021, 2, 28), date(2021, 3, 30)),
            (date(2024, 1, 30), date(2024, 2, 1), date(2024, 2, 29)),
            (date(2021, 1, 29), date(2021, 2, 1), date(2021, 2, 28)),
            (date(2021, 1, 31), date(2021, 4, 5), date(2021, 4, 30)),
            (date(2021, 1, 31), date(2021, 4, 30), date(2021, 5, 31)),
        ],
    )
    def test_clamped_days_bill_on_month_end(self, monthly_plan, created, after, expected):
        """Test missing anniversary days bill on the month's last day."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(monthly_plan, "anniversary", created)

        assert next_billing_date(anchor, after) == expected


class TestYearlySchedule:
    """Tests for yearly anchors."""

    def test_calendar_next_january(self, yearly_plan):
        """Test calendar billing renews on the next January 1st."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(yearly_plan, "calendar", date(2021, 6, 1))

        assert next_billing_date(anchor, date(2021, 6, 1)) == date(2022, 1, 1)

    def test_anniversary_same_day_next_year(self, yearly_plan):
        """Test an anniversary already passed this year renews next year."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(yearly_plan, "anniversary", date(2021, 3, 17))

        assert next_billing_date(anchor, date(2021, 3, 17)) == date(2022, 3, 17)
        assert next_billing_date(anchor, date(2022, 1, 1)) == date(2022, 3, 17)

    def test_leap_day_bills_february_28_in_common_years(self, yearly_plan):
        """Test a February 29th anniversary bills Feb 28 outside leap years."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(yearly_plan, "anniversary", date(2020, 2, 29))

        assert next_billing_date(anchor, date(2020, 2, 29)) == date(2021, 2, 28)
        assert next_billing_date(anchor, date(2023, 3, 1)) == date(2024, 2, 29)


class TestWeeklySchedule:
    """Tests for weekly anchors."""

    def test_anniversary_one_week_later(self, weekly_plan):
        """Test the same weekday a week later when today is the anchor day."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(weekly_plan, "anniversary", date(2021, 1, 31))

        assert next_billing_date(anchor, date(2021, 1, 31)) == date(2021, 2, 7)
        assert next_billing_date(anchor, date(2021, 2, 3)) == date(2021, 2, 7)

    def test_calendar_next_monday(self, weekly_plan):
        """Test calendar billing renews at the start of next week."""
        from billing_backend.billing.anchors import next_billing_date

        anchor = _anchor(weekly_plan, "calendar", date(2024, 1, 15))

        assert next_billing_date(anchor, date(2024, 1, 15)) == date(2024, 1, 22)
        assert next_billing_date(anchor, date(2021, 1, 31)) == date(2021, 2, 1)
