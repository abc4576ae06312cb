"""DueEvaluation dataclass for calculated due status."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, TYPE_CHECKING

from .status import Status

if TYPE_CHECKING:
    from .rule import MaintenanceRule


@dataclass
class DueEvaluation:
    """Due information for one truck and one rule. Never persisted."""

    truck_id: str
    rule: "MaintenanceRule"
    status: Status
    last_performed: Optional[datetime] = None
    last_mileage: Optional[float] = None
    mileage_since_last_service: Optional[float] = None
    mileage_remaining: Optional[float] = None
    next_due_mileage: Optional[float] = None
    days_since_last_service: Optional[int] = None
    days_remaining: Optional[int] = None
    next_due_date: Optional[datetime] = None
    reason: Optional[str] = None

    @property
    def is_due(self) -> bool:
        return self.status in (Status.OVERDUE, Status.DUE_SOON)

    @property
    def sort_key(self):
        """Urgency first, then rule priority."""
        return (self.status.rank, self.rule.priority.rank)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for the API.

        Computed fields are only present when the rule's interval type
        produced them; reason only when one was set.
        """
        d: Dict[str, Any] = {
            "rule": self.rule.to_dict(),
            "status": self.status.value,
            "lastPerformed": (
                self.last_performed.isoformat() if self.last_performed else None
            ),
            "lastMileage": self.last_mileage or 0,
        }
        if self.mileage_remaining is not None:
            d["mileageSinceLastService"] = self.mileage_since_last_service
            d["mileageRemaining"] = self.mileage_remaining
            d["nextDueMileage"] = self.next_due_mileage
        if self.days_remaining is not None:
            d["daysSinceLastService"] = self.days_since_last_service
            d["daysRemaining"] = self.days_remaining
            d["nextDueDate"] = self.next_due_date.isoformat()
        if self.reason is not None:
            d["reason"] = self.reason
        return d
