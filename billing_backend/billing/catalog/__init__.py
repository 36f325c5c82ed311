"""Plan catalog lookup and loading."""

from .resolver import (
    PlanCatalog,
    PlanChoice,
    plan_choices,
    resolve_plan,
)

__all__ = [
    'PlanCatalog',
    'PlanChoice',
    'plan_choices',
    'resolve_plan',
]
