"""MaintenanceRecord class for maintenance history."""
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from .calculations import parse_instant
from .category import Category


class RecordStatus(Enum):
    PENDING = "pending"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


class MaintenanceRecord:
    """A record of maintenance performed on a truck."""

    def __init__(
            self,
            id: str,
            truck_id: str,
            type: Union[Category, str],
            date: str,
            mileage: Optional[float] = None,
            status: Union[RecordStatus, str] = RecordStatus.COMPLETED,
            cost: Optional[float] = None,
            notes: Optional[str] = None,
    ):
        self.id = id
        self.truck_id = truck_id
        self.type = Category(type)
        self.date = date
        self.mileage = mileage
        self.status = RecordStatus(status or RecordStatus.COMPLETED)
        self.cost = cost
        self.notes = notes
        self.performed_at = parse_instant(date)

        if mileage is not None and mileage < 0:
            raise ValueError(f"Record {id!r}: mileage cannot be negative")

    def __repr__(self) -> str:
        return f"MaintenanceRecord({self.id!r}, {self.type.value!r}, {self.date!r})"

    def matches(self, category: Category) -> bool:
        """True if this record is of the given category."""
        return self.type.value == category.value
