"""
External Integrations

Contract for the remote billing service consumed by the subscription core.
"""

from .gateway import (
    SubscriptionGateway,
    PlanPage,
    Pagination,
    ErrorEntry,
    UpsertResponse,
)

__all__ = [
    'SubscriptionGateway',
    'PlanPage',
    'Pagination',
    'ErrorEntry',
    'UpsertResponse',
]
