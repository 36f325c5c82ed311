"""
Plan Catalog

Resolves the selected plan from the fetched catalog and keeps the
catalog loaded from the remote service.

Supports:
- Exact-identifier plan lookup (no selection is not an error)
- Paging through fetch_plans until the last page
- Plan choices for the selector, with the current plan disabled on update
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from billing_backend.billing.domain.plan import Plan
from billing_backend.billing.domain.subscription import ExistingSubscription
from billing_backend.billing.external.gateway import SubscriptionGateway
from billing_backend.billing.shared.config import PLAN_MAX_PAGES, PLAN_PAGE_SIZE
from billing_backend.billing.shared.exceptions import CatalogError, PlanNotFoundError

logger = logging.getLogger(__name__)


def resolve_plan(plan_id: Optional[str], catalog: Iterable[Plan]) -> Optional[Plan]:
    """
    Find the plan with exactly ``plan_id``.
    
    Args:
        plan_id: Selected plan identifier; empty means nothing selected yet
        catalog: Fetched plans, in any order
        
    Returns:
        The matching Plan, or None when absent or nothing is selected
    """
    if not plan_id:
        return None
    
    for plan in catalog:
        if plan.id == plan_id:
            return plan
    
    logger.debug(f"[CATALOG] Plan {plan_id} not in catalog")
    return None


@dataclass(frozen=True)
class PlanChoice:
    """One selectable entry of the plan selector."""
    value: str
    label: str
    disabled: bool = False


def plan_choices(
    catalog: Iterable[Plan],
    existing: Optional[ExistingSubscription] = None
) -> List[PlanChoice]:
    """
    Build selector entries for the catalog.
    
    The plan already attached to ``existing`` is disabled: updating a
    subscription to its own plan is not a change.
    """
    current_plan_id = existing.existing_plan_id if existing else None
    return [
        PlanChoice(
            value=plan.id,
            label=f"{plan.name} - ({plan.code})",
            disabled=bool(current_plan_id) and plan.id == current_plan_id,
        )
        for plan in catalog
    ]


class PlanCatalog:
    """
    Plans fetched from the remote catalog.
    
    Usage:
        catalog = PlanCatalog(gateway)
        await catalog.load()
        plan = catalog.resolve(plan_id)
    """
    
    def __init__(
        self,
        gateway: SubscriptionGateway,
        page_size: int = PLAN_PAGE_SIZE,
        max_pages: int = PLAN_MAX_PAGES
    ):
        self.gateway = gateway
        self.page_size = page_size
        self.max_pages = max_pages
        self.loading = False
        self.loaded = False
        self._plans: List[Plan] = []
    
    @property
    def plans(self) -> List[Plan]:
        return list(self._plans)
    
    async def load(self) -> List[Plan]:
        """
        Fetch every page of the catalog.
        
        A call made while a load is running returns the current plans
        without fetching again.
        
        Raises:
            CatalogError: If a page fails or paging exceeds max_pages
        """
        if self.loading:
            logger.debug("[CATALOG] Load already running, skipping")
            return self.plans
        
        self.loading = True
        try:
            plans: List[Plan] = []
            page = 1
            while True:
                if page > self.max_pages:
                    raise CatalogError(
                        message=f"Plan catalog exceeded {self.max_pages} pages",
                        page=page
                    )
                
                try:
                    result = await self.gateway.fetch_plans(page=page, limit=self.page_size)
                except CatalogError:
                    raise
                except Exception as e:
                    logger.error(f"[CATALOG] Failed to fetch plans page {page}: {e}")
                    raise CatalogError(message=f"Failed to fetch plans: {e}", page=page) from e
                
                plans.extend(result.collection)
                if not result.collection or page >= result.pagination.total_pages:
                    break
                page += 1
            
            self._plans = plans
            self.loaded = True
            logger.info(f"[CATALOG] Loaded {len(plans)} plans over {page} page(s)")
            return self.plans
        finally:
            self.loading = False
    
    def resolve(self, plan_id: Optional[str]) -> Optional[Plan]:
        return resolve_plan(plan_id, self._plans)
    
    def require(self, plan_id: Optional[str]) -> Plan:
        """Resolve ``plan_id`` or raise PlanNotFoundError."""
        plan = self.resolve(plan_id)
        if plan is None:
            raise PlanNotFoundError(plan_id)
        return plan
    
    def choices(self, existing: Optional[ExistingSubscription] = None) -> List[PlanChoice]:
        return plan_choices(self._plans, existing)
