"""
Subscription Upsert Coordinator

Submits a create-or-update request to the remote service and turns the
response into an outcome. One call is one remote mutation: nothing is
retried and no caller cache is touched.
"""

import logging

from billing_backend.billing.domain.outcome import Failure, Outcome, Success
from billing_backend.billing.domain.subscription import SubmissionRequest
from billing_backend.billing.external.gateway import SubscriptionGateway
from billing_backend.billing.shared.config import TRANSPORT_FAILURE_MESSAGE
from .classifier import classify, classify_transport_failure

logger = logging.getLogger(__name__)


class SubscriptionUpsertCoordinator:
    """
    Creates or updates subscriptions through a gateway.
    
    Not reentrant: callers allow one submission at a time per form
    (see SubscriptionForm).
    
    Usage:
        coordinator = SubscriptionUpsertCoordinator(gateway)
        outcome = await coordinator.submit(request)
    """
    
    def __init__(self, gateway: SubscriptionGateway):
        self.gateway = gateway
    
    async def submit(self, request: SubmissionRequest) -> Outcome:
        """
        Submit one subscription upsert.
        
        Args:
            request: Request built for this submit action
            
        Returns:
            Success, CurrencyMismatch or Failure
        """
        action = "update" if request.is_update else "create"
        logger.info(
            f"[UPSERT] Submitting {action} for customer {request.customer_id}, plan {request.plan_id}"
        )
        
        try:
            response = await self.gateway.upsert_subscription(request)
        except Exception as e:
            logger.error(f"[UPSERT] Transport failure for customer {request.customer_id}: {e}")
            return classify_transport_failure(e)
        
        if response.errors:
            return classify(response.errors)
        
        if not response.is_success:
            logger.error(f"[UPSERT] Empty response for customer {request.customer_id}")
            return Failure(message=TRANSPORT_FAILURE_MESSAGE, code="EMPTY_RESPONSE")
        
        if request.is_update and response.subscription_id != request.subscription_id:
            logger.error(
                f"[UPSERT] Update of {request.subscription_id} answered with {response.subscription_id}"
            )
            return Failure(
                message="Billing service returned a different subscription",
                code="SUBSCRIPTION_ID_MISMATCH",
            )
        
        logger.info(f"[UPSERT] Subscription {response.subscription_id} {action}d")
        return Success(subscription_id=response.subscription_id, is_update=request.is_update)


async def submit_subscription(gateway: SubscriptionGateway, request: SubmissionRequest) -> Outcome:
    """Submit ``request`` through ``gateway``."""
    return await SubscriptionUpsertCoordinator(gateway).submit(request)
