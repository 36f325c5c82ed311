"""
Pytest configuration and shared fixtures for the subscription core tests.
"""

from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from billing_backend.billing.domain.plan import Plan, PlanInterval
from billing_backend.billing.external.gateway import Pagination, PlanPage, UpsertResponse


def pytest_collection_modifyitems(items):
    """Add asyncio marker to all async test functions."""
    import inspect

    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "obj", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Mock Data
# =============================================================================

@pytest.fixture
def weekly_plan() -> Plan:
    return Plan(id="plan_weekly", name="Starter", code="starter_weekly", interval=PlanInterval.WEEKLY)


@pytest.fixture
def monthly_plan() -> Plan:
    return Plan(id="plan_monthly", name="Team", code="team_monthly", interval=PlanInterval.MONTHLY)


@pytest.fixture
def yearly_plan() -> Plan:
    return Plan(id="plan_yearly", name="Enterprise", code="enterprise_yearly", interval=PlanInterval.YEARLY)


@pytest.fixture
def plans(weekly_plan, monthly_plan, yearly_plan) -> List[Plan]:
    return [weekly_plan, monthly_plan, yearly_plan]


# =============================================================================
# Gateway Mocks
# =============================================================================

@pytest.fixture
def make_page():
    """Factory for one catalog page."""
    def _make_page(plans: List[Plan], current_page: int = 1, total_pages: int = 1) -> PlanPage:
        return PlanPage(
            collection=plans,
            pagination=Pagination(current_page=current_page, total_pages=total_pages, total_count=len(plans)),
        )

    return _make_page


@pytest.fixture
def make_gateway(plans, make_page):
    """Factory for a gateway mock serving one catalog page and a fixed upsert response."""
    def _make_gateway(
        catalog: Optional[List[Plan]] = None,
        upsert_response: Optional[UpsertResponse] = None
    ) -> MagicMock:
        gateway = MagicMock()
        gateway.fetch_plans = AsyncMock(return_value=make_page(plans if catalog is None else catalog))
        gateway.upsert_subscription = AsyncMock(
            return_value=upsert_response if upsert_response is not None else UpsertResponse(subscription_id="sub_new")
        )
        return gateway

    return _make_gateway


@pytest.fixture
def gateway(make_gateway) -> MagicMock:
    return make_gateway()
