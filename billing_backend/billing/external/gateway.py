"""
Subscription Gateway Interface

Contract for the remote billing service: a paged plan catalog and the
subscription upsert mutation. Transports implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from billing_backend.billing.domain.plan import Plan
from billing_backend.billing.domain.subscription import SubmissionRequest


class Pagination(BaseModel):
    """Pagination metadata returned with a catalog page."""
    current_page: int = 1
    total_pages: int = 1
    total_count: Optional[int] = None


class PlanPage(BaseModel):
    """One page of the plan catalog."""
    collection: List[Plan] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)
    
    @field_validator('collection', mode='before')
    @classmethod
    def parse_plans(cls, value: Any) -> Any:
        if value is None:
            return []
        return [item if isinstance(item, Plan) else Plan.from_dict(item) for item in value]


class ErrorEntry(BaseModel):
    """
    One structured error from the remote mutation.
    
    Attributes:
        code: Semantic error code (e.g. 'currencies_does_not_match')
        message: Human-readable detail, when the remote provides one
        details: Extra payload attached by the remote
    """
    code: Optional[str] = None
    message: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class UpsertResponse(BaseModel):
    """Result of upsert_subscription: an identifier or a list of errors."""
    subscription_id: Optional[str] = None
    errors: List[ErrorEntry] = Field(default_factory=list)
    
    @property
    def is_success(self) -> bool:
        return not self.errors and self.subscription_id is not None


class SubscriptionGateway(ABC):
    """Interface for the remote subscription service."""
    
    @abstractmethod
    async def fetch_plans(self, page: int, limit: int) -> PlanPage:
        """Fetch one page of the plan catalog."""
        pass
    
    @abstractmethod
    async def upsert_subscription(self, request: SubmissionRequest) -> UpsertResponse:
        """
        Create or update a subscription.
        
        Business errors are returned in UpsertResponse.errors. Transport
        failures are raised.
        """
        pass
