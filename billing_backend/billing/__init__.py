"""
Billing Module

Subscription core for the billing dashboard: resolves the selected plan,
derives the billing anchor shown to the user and submits the
create-or-update of a subscription.

Submodules:
- shared: Configuration and exceptions
- domain: Plans, billing anchors, submission requests and outcomes
- external: Contract of the remote billing service
- catalog: Plan lookup and catalog loading
- anchors: Billing anchor calculator and date projection
- subscriptions: Upsert coordinator, error classifier, form guard

Usage:
    from billing_backend.billing import (
        resolve_plan,
        compute_billing_anchor,
        submit_subscription,
    )
    
    plan = resolve_plan(plan_id, catalog)
    anchor = compute_billing_anchor(plan, BillingTime.ANNIVERSARY, date.today())
    outcome = await submit_subscription(gateway, request)
"""

# Shared configuration and exceptions
from .shared import (
    CURRENCY_MISMATCH_CODE,
    TRANSPORT_FAILURE_MESSAGE,
    get_week_start,
    BillingError,
    PlanNotFoundError,
    CatalogError,
    SubscriptionError,
    SubmissionInProgressError,
    FormDisposedError,
)

# Domain entities
from .domain import (
    Weekday,
    Plan,
    PlanInterval,
    BillingTime,
    ExistingSubscription,
    SubmissionRequest,
    build_submission_request,
    AnchorKind,
    BillingAnchor,
    OutcomeKind,
    Outcome,
    Success,
    CurrencyMismatch,
    Failure,
)

# Remote service contract
from .external import (
    SubscriptionGateway,
    PlanPage,
    Pagination,
    ErrorEntry,
    UpsertResponse,
)

# Plan catalog
from .catalog import (
    PlanCatalog,
    PlanChoice,
    plan_choices,
    resolve_plan,
)

# Billing anchors
from .anchors import (
    BillingAnchorCalculator,
    compute_billing_anchor,
    next_billing_date,
)

# Subscriptions
from .subscriptions import (
    classify,
    classify_transport_failure,
    SubscriptionUpsertCoordinator,
    submit_subscription,
    FormErrorCode,
    FormState,
    SubscriptionForm,
)

__all__ = [
    # Configuration
    'CURRENCY_MISMATCH_CODE',
    'TRANSPORT_FAILURE_MESSAGE',
    'get_week_start',
    # Exceptions
    'BillingError',
    'PlanNotFoundError',
    'CatalogError',
    'SubscriptionError',
    'SubmissionInProgressError',
    'FormDisposedError',
    # Domain
    'Weekday',
    'Plan',
    'PlanInterval',
    'BillingTime',
    'ExistingSubscription',
    'SubmissionRequest',
    'build_submission_request',
    'AnchorKind',
    'BillingAnchor',
    'OutcomeKind',
    'Outcome',
    'Success',
    'CurrencyMismatch',
    'Failure',
    # External
    'SubscriptionGateway',
    'PlanPage',
    'Pagination',
    'ErrorEntry',
    'UpsertResponse',
    # Catalog
    'PlanCatalog',
    'PlanChoice',
    'plan_choices',
    'resolve_plan',
    # Anchors
    'BillingAnchorCalculator',
    'compute_billing_anchor',
    'next_billing_date',
    # Subscriptions
    'classify',
    'classify_transport_failure',
    'SubscriptionUpsertCoordinator',
    'submit_subscription',
    'FormErrorCode',
    'FormState',
    'SubscriptionForm',
]
