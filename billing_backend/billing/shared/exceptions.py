"""
Billing Exceptions

Custom exception classes for billing-related errors.
Business outcomes of a submission (success, currency mismatch, failure)
are returned as data; these exceptions cover misuse and lookup failures.
"""

from typing import Optional


class BillingError(Exception):
    """
    Base exception for all billing-related errors.
    
    All billing exceptions inherit from this class, allowing for
    broad exception handling when needed.
    """
    
    def __init__(self, message: str, code: str = "BILLING_ERROR", details: dict = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> dict:
        """Convert exception to dictionary for API responses."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class PlanNotFoundError(BillingError):
    """Raised when a plan is required but absent from the catalog."""
    
    def __init__(self, plan_id: Optional[str]):
        super().__init__(
            message=f"Plan '{plan_id}' not found",
            code="PLAN_NOT_FOUND",
            details={'plan_id': plan_id}
        )
        self.plan_id = plan_id


class CatalogError(BillingError):
    """
    Raised when the plan catalog cannot be loaded.
    
    Examples:
        - fetch_plans failed on a page
        - the catalog kept paging past the configured limit
    """
    
    def __init__(self, message: str = "Plan catalog error", page: int = None):
        super().__init__(
            message=message,
            code="CATALOG_ERROR",
            details={'page': page} if page is not None else {}
        )
        self.page = page


class SubscriptionError(BillingError):
    """
    Raised when the subscription upsert path is misused.
    
    Examples:
        - Classifying an empty error list
    """
    
    def __init__(
        self, 
        message: str = "Subscription error",
        code: str = "SUBSCRIPTION_ERROR",
        subscription_id: str = None
    ):
        super().__init__(
            message=message,
            code=code,
            details={'subscription_id': subscription_id} if subscription_id else {}
        )
        self.subscription_id = subscription_id


class SubmissionInProgressError(SubscriptionError):
    """Raised when a form receives a second submit while one is pending."""
    
    def __init__(self, message: str = "A submission is already in progress"):
        super().__init__(message=message, code="SUBMISSION_IN_PROGRESS")


class FormDisposedError(SubscriptionError):
    """Raised when a disposed form is asked to submit."""
    
    def __init__(self, message: str = "Subscription form has been disposed"):
        super().__init__(message=message, code="FORM_DISPOSED")
