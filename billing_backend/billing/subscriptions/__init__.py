"""
Subscriptions Module

Create-or-update submission of subscriptions.

Components:
- SubscriptionUpsertCoordinator: Submits one request and returns an outcome
- classify: Maps remote errors to CurrencyMismatch or Failure
- SubscriptionForm: Caller-owned single-submission guard

Usage:
    from billing_backend.billing.subscriptions import SubscriptionForm
    
    form = SubscriptionForm(gateway)
    await form.open()
    outcome = await form.submit(customer_id, values)
"""

from .classifier import classify, classify_transport_failure
from .coordinator import SubscriptionUpsertCoordinator, submit_subscription
from .form import FormErrorCode, FormState, SubscriptionForm

__all__ = [
    'classify',
    'classify_transport_failure',
    'SubscriptionUpsertCoordinator',
    'submit_subscription',
    'FormErrorCode',
    'FormState',
    'SubscriptionForm',
]
