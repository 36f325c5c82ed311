"""
Submission Outcomes

Tagged result of a subscription upsert. Outcomes are data: the caller
decides whether to confirm, keep the form open or surface an error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class OutcomeKind(Enum):
    SUCCESS = "success"
    CURRENCY_MISMATCH = "currency_mismatch"
    FAILURE = "failure"


@dataclass(frozen=True)
class Success:
    """The remote acknowledged the subscription."""
    subscription_id: str
    is_update: bool = False
    
    kind = OutcomeKind.SUCCESS
    
    @property
    def should_confirm(self) -> bool:
        return True
    
    @property
    def should_report(self) -> bool:
        return False


@dataclass(frozen=True)
class CurrencyMismatch:
    """
    Customer currency conflicts with the plan currency.
    
    Recoverable: the form stays open so the user can change plan or
    currency. Never reported through generic error channels.
    """
    code: str
    message: Optional[str] = None
    
    kind = OutcomeKind.CURRENCY_MISMATCH
    
    @property
    def should_confirm(self) -> bool:
        return False
    
    @property
    def should_report(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Any other failure: transport, validation or server error."""
    message: str
    code: Optional[str] = None
    
    kind = OutcomeKind.FAILURE
    
    @property
    def should_confirm(self) -> bool:
        return False
    
    @property
    def should_report(self) -> bool:
        return True


Outcome = Union[Success, CurrencyMismatch, Failure]
