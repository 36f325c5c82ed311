"""
Error Classifier

Maps the errors of a subscription upsert to an outcome. Only the first
error entry is meaningful; the currency mismatch code is a recoverable
business condition, everything else is a failure.
"""

import logging
from typing import Any, Dict, Optional, Sequence, Union

from billing_backend.billing.domain.outcome import CurrencyMismatch, Failure, Outcome
from billing_backend.billing.external.gateway import ErrorEntry
from billing_backend.billing.shared.config import CURRENCY_MISMATCH_CODE, TRANSPORT_FAILURE_MESSAGE
from billing_backend.billing.shared.exceptions import BillingError, SubscriptionError

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_CODE = "TRANSPORT_ERROR"


def classify(
    errors: Sequence[Union[ErrorEntry, Dict[str, Any]]],
    mismatch_code: Optional[str] = None
) -> Outcome:
    """
    Classify the remote errors of a submission.
    
    Args:
        errors: Error entries returned by the remote, first entry wins
        mismatch_code: Override for the currency mismatch code
        
    Returns:
        CurrencyMismatch or Failure
        
    Raises:
        SubscriptionError: If errors is empty (a success, not a failure)
    """
    if not errors:
        raise SubscriptionError(
            message="Cannot classify an empty error list",
            code="EMPTY_ERROR_LIST"
        )
    
    first = errors[0]
    if not isinstance(first, ErrorEntry):
        first = ErrorEntry.model_validate(first)
    
    if first.code == (mismatch_code or CURRENCY_MISMATCH_CODE):
        logger.warning("[CLASSIFY] Currency mismatch between customer and plan")
        return CurrencyMismatch(code=first.code, message=first.message)
    
    logger.debug(f"[CLASSIFY] Remote error {first.code}: {first.message}")
    return Failure(
        message=first.message or TRANSPORT_FAILURE_MESSAGE,
        code=first.code,
    )


def classify_transport_failure(error: Optional[BaseException] = None) -> Failure:
    """Failure for a call that never produced a structured response."""
    if isinstance(error, BillingError) and error.message:
        return Failure(message=error.message, code=error.code)
    return Failure(message=TRANSPORT_FAILURE_MESSAGE, code=TRANSPORT_ERROR_CODE)
