"""
Subscription Form

Caller-owned guard around one add/edit subscription form. It keeps the
plan catalog, computes the billing anchor for the current selection and
allows a single submission in flight.

States:
- IDLE: Nothing submitted yet
- SUBMITTING: A submission is pending; further submits are rejected
- SUCCEEDED / CURRENCY_MISMATCH / FAILED: Last submission settled
- DISPOSED: The form was closed; late results are discarded
"""

import inspect
import logging
from datetime import date
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from billing_backend.billing.anchors.calculator import BillingAnchorCalculator, Clock
from billing_backend.billing.catalog.resolver import PlanCatalog, PlanChoice
from billing_backend.billing.domain.anchor import BillingAnchor
from billing_backend.billing.domain.outcome import Outcome, OutcomeKind, Success
from billing_backend.billing.domain.subscription import (
    BillingTime,
    ExistingSubscription,
    build_submission_request,
)
from billing_backend.billing.external.gateway import SubscriptionGateway
from billing_backend.billing.shared.exceptions import FormDisposedError, SubmissionInProgressError
from .coordinator import SubscriptionUpsertCoordinator

logger = logging.getLogger(__name__)

SuccessHook = Callable[[Success], Union[None, Awaitable[None]]]


class FormState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    CURRENCY_MISMATCH = "currency_mismatch"
    FAILED = "failed"
    DISPOSED = "disposed"


class FormErrorCode(Enum):
    """Field-level error the form displays instead of a global error."""
    CURRENCY_ERROR = "currencyError"


_SETTLED_STATES = {
    OutcomeKind.SUCCESS: FormState.SUCCEEDED,
    OutcomeKind.CURRENCY_MISMATCH: FormState.CURRENCY_MISMATCH,
    OutcomeKind.FAILURE: FormState.FAILED,
}


class SubscriptionForm:
    """
    State of one add/edit subscription form.
    
    Usage:
        form = SubscriptionForm(gateway, existing=ExistingSubscription("sub_1", "plan_a"))
        await form.open()
        anchor = form.billing_anchor("plan_b", BillingTime.ANNIVERSARY)
        outcome = await form.submit(customer_id, {"plan_id": "plan_b", "billing_time": "anniversary"})
    """
    
    def __init__(
        self,
        gateway: SubscriptionGateway,
        existing: Optional[ExistingSubscription] = None,
        clock: Clock = date.today,
        on_success: Optional[SuccessHook] = None,
        catalog: Optional[PlanCatalog] = None,
        coordinator: Optional[SubscriptionUpsertCoordinator] = None
    ):
        """
        Initialize the form.
        
        Args:
            gateway: Remote subscription service
            existing: Subscription being edited; None creates a new one
            clock: Source of the current date for anchor computation
            on_success: Called after a successful submission, e.g. to refresh
                the customer's subscription list
            catalog: Plan catalog (default: a new catalog on the gateway)
            coordinator: Upsert coordinator (default: one on the gateway)
        """
        self.existing = existing
        self.catalog = catalog or PlanCatalog(gateway)
        self.coordinator = coordinator or SubscriptionUpsertCoordinator(gateway)
        self.calculator = BillingAnchorCalculator(clock=clock)
        self.on_success = on_success
        self.state = FormState.IDLE
        self.last_outcome: Optional[Outcome] = None
    
    @property
    def is_update(self) -> bool:
        return self.existing is not None
    
    @property
    def is_submitting(self) -> bool:
        return self.state == FormState.SUBMITTING
    
    @property
    def is_disposed(self) -> bool:
        return self.state == FormState.DISPOSED
    
    @property
    def error_code(self) -> Optional[FormErrorCode]:
        if self.state == FormState.CURRENCY_MISMATCH:
            return FormErrorCode.CURRENCY_ERROR
        return None
    
    async def open(self) -> List[PlanChoice]:
        """Load the plan catalog unless a load is already running."""
        if not self.catalog.loading:
            await self.catalog.load()
        return self.choices()
    
    def choices(self) -> List[PlanChoice]:
        return self.catalog.choices(self.existing)
    
    def billing_anchor(
        self,
        plan_id: Optional[str],
        billing_time: Optional[Union[BillingTime, str]]
    ) -> Optional[BillingAnchor]:
        """Anchor for the selected plan, or None while no plan resolves or no mode is chosen."""
        plan = self.catalog.resolve(plan_id)
        return self.calculator.compute(plan, billing_time)
    
    async def submit(self, customer_id: str, values: Dict[str, Any]) -> Optional[Outcome]:
        """
        Submit the form.
        
        Args:
            customer_id: Customer the subscription belongs to
            values: Form values (plan_id, billing_time and raw fields)
            
        Returns:
            The outcome, or None if the form was disposed before it settled
            
        Raises:
            SubmissionInProgressError: If a submission is already pending
            FormDisposedError: If the form was disposed
        """
        if self.is_disposed:
            raise FormDisposedError()
        if self.is_submitting:
            raise SubmissionInProgressError()
        
        request = build_submission_request(customer_id, values, self.existing)
        
        previous_state = self.state
        self.state = FormState.SUBMITTING
        try:
            outcome = await self.coordinator.submit(request)
        except BaseException:
            if not self.is_disposed:
                self.state = previous_state
            raise
        
        if self.is_disposed:
            logger.warning(f"[FORM] Discarding {outcome.kind.value} outcome for disposed form")
            return None
        
        self.state = _SETTLED_STATES[outcome.kind]
        self.last_outcome = outcome
        
        if isinstance(outcome, Success) and self.on_success is not None:
            # The subscription exists remotely; a failing refresh must not hide it
            try:
                result = self.on_success(outcome)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"[FORM] Success hook failed for {outcome.subscription_id}: {e}")

        return outcome
    
    def dispose(self) -> None:
        """Close the form. A pending submission settles without effect."""
        if self.is_submitting:
            logger.debug("[FORM] Disposed with a submission in flight")
        self.state = FormState.DISPOSED
