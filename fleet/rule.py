"""MaintenanceRule class for maintenance interval definitions."""

from enum import Enum
from typing import Any, Dict, Optional, Union

from .category import Category
from .priority import Priority


class IntervalType(Enum):
    """Which thresholds a rule is measured against."""

    MILEAGE = "mileage"
    TIME = "time"
    BOTH = "both"

    @property
    def uses_mileage(self) -> bool:
        return self in (IntervalType.MILEAGE, IntervalType.BOTH)

    @property
    def uses_time(self) -> bool:
        return self in (IntervalType.TIME, IntervalType.BOTH)


class MaintenanceRule:
    """A fleet-wide rule defining when a category of service is due."""

    def __init__(
            self,
            id: str,
            name: str,
            category: Union[Category, str],
            interval_type: Union[IntervalType, str],
            interval_mileage: Optional[float] = None,
            interval_days: Optional[float] = None,
            priority: Union[Priority, str] = Priority.MEDIUM,
            is_active: bool = True,
            description: Optional[str] = None,
            estimated_cost: Optional[float] = None,
            estimated_duration: Optional[float] = None,
    ):
        self.id = id
        self.name = name
        self.category = Category(category)
        self.interval_type = IntervalType(interval_type)
        self.interval_mileage = interval_mileage
        self.interval_days = interval_days
        self.priority = Priority(priority or Priority.MEDIUM)
        self.is_active = True if is_active is None else bool(is_active)
        self.description = description
        self.estimated_cost = estimated_cost
        self.estimated_duration = estimated_duration

        if not self.category.is_rule_category:
            raise ValueError(
                f"Rule {id!r}: category {self.category.value!r} is a record-only type"
            )
        if self.interval_type.uses_mileage:
            _check_interval(id, "intervalMileage", interval_mileage)
        if self.interval_type.uses_time:
            _check_interval(id, "intervalDays", interval_days)
        for field, value in (
            ("estimatedCost", estimated_cost),
            ("estimatedDuration", estimated_duration),
        ):
            if value is not None and value < 0:
                raise ValueError(f"Rule {id!r}: {field} cannot be negative")

    def __repr__(self) -> str:
        return f"MaintenanceRule({self.id!r}, {self.category.value!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase form used by the API and fleet files."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "intervalType": self.interval_type.value,
            "intervalMileage": self.interval_mileage,
            "intervalDays": self.interval_days,
            "priority": self.priority.value,
            "isActive": self.is_active,
            "description": self.description,
            "estimatedCost": self.estimated_cost,
            "estimatedDuration": self.estimated_duration,
        }


def _check_interval(rule_id: str, field: str, value: Optional[float]) -> None:
    if value is None:
        raise ValueError(f"Rule {rule_id!r}: {field} is required")
    if value < 0:
        raise ValueError(f"Rule {rule_id!r}: {field} cannot be negative")
