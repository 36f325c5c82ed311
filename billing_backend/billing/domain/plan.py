"""
Plan Domain Entity

A plan as published by the remote catalog. Read-only to the subscription core.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class PlanInterval(Enum):
    """Billing interval of a plan."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Plan:
    """
    A catalog plan.
    
    Attributes:
        id: Remote plan identifier
        name: Display name
        code: Unique plan code
        interval: Billing interval
    """
    id: str
    name: str
    code: str
    interval: PlanInterval
    
    @classmethod
    def from_dict(cls, data: dict) -> 'Plan':
        """
        Create a Plan from a catalog payload.
        
        Unknown interval values fall back to weekly, which is also the
        calculator's fallback branch.
        """
        raw_interval = data.get('interval')
        if isinstance(raw_interval, PlanInterval):
            interval = raw_interval
        else:
            try:
                interval = PlanInterval(str(raw_interval).lower())
            except ValueError:
                logger.warning(
                    f"[CATALOG] Plan {data.get('id')} has unknown interval {raw_interval!r}, treating as weekly"
                )
                interval = PlanInterval.WEEKLY
        
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            code=data.get('code', ''),
            interval=interval,
        )
    
    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'code': self.code,
            'interval': self.interval.value,
        }
