"""
Subscription Domain Types

Billing-time mode, the caller's reference to an existing subscription
and the request submitted to the remote upsert.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class BillingTime(Enum):
    """How a subscription's billing cycle is anchored."""
    CALENDAR = "calendar"  # Fixed calendar boundaries
    ANNIVERSARY = "anniversary"  # Subscription creation date


@dataclass(frozen=True)
class ExistingSubscription:
    """
    Reference to a subscription being updated.
    
    Owned by the caller. Its presence turns a submission into an update.
    """
    subscription_id: str
    existing_plan_id: Optional[str] = None


class SubmissionRequest(BaseModel):
    """
    Payload for one create-or-update submission.
    
    Raw form fields (name, external_id, subscription_at, ...) are kept
    as extra attributes and forwarded untouched.
    """
    model_config = ConfigDict(extra='allow', frozen=True)
    
    customer_id: str
    plan_id: str
    billing_time: BillingTime
    subscription_id: Optional[str] = None
    
    @property
    def is_update(self) -> bool:
        return self.subscription_id is not None
    
    @property
    def raw_fields(self) -> Dict[str, Any]:
        """Extra form fields that are not part of the typed request."""
        return dict(self.model_extra or {})


def build_submission_request(
    customer_id: str,
    values: Dict[str, Any],
    existing: Optional[ExistingSubscription] = None
) -> SubmissionRequest:
    """
    Build the request for a submit action.
    
    Args:
        customer_id: Customer the subscription belongs to
        values: Form values; must contain plan_id and billing_time
        existing: Subscription being updated, if any
        
    Returns:
        SubmissionRequest targeting the existing subscription when given
    """
    payload = dict(values)
    payload['customer_id'] = customer_id
    if existing is not None:
        payload['subscription_id'] = existing.subscription_id
    else:
        payload.pop('subscription_id', None)
    return SubmissionRequest.model_validate(payload)
