"""Fleet class - in-memory snapshot of trucks, rules and maintenance records."""

from typing import List, Optional, Union

from .category import Category
from .record import MaintenanceRecord
from .rule import MaintenanceRule
from .truck import Truck


class Fleet:
    """
    Snapshot of fleet data with the read queries the due-status engine uses.

    A Fleet is loaded fresh for each request and never mutated by queries.
    """

    def __init__(
        self,
        trucks: List[Truck],
        rules: List[MaintenanceRule],
        records: Optional[List[MaintenanceRecord]] = None,
    ):
        self.trucks = trucks or []
        self.rules = rules or []
        self.records = records or []

    def find_truck_by_id(self, truck_id: str) -> Optional[Truck]:
        """Find a truck by id, or None."""
        for truck in self.trucks:
            if truck.id == truck_id:
                return truck
        return None

    def find_all_non_inactive_trucks(self) -> List[Truck]:
        """All trucks whose lifecycle status is not inactive, in file order."""
        return [t for t in self.trucks if not t.is_inactive]

    def find_active_rules(self) -> List[MaintenanceRule]:
        """Active rules in catalog order."""
        return [r for r in self.rules if r.is_active]

    def find_rule_by_id(self, rule_id: str) -> Optional[MaintenanceRule]:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None

    def find_rules(
        self,
        category: Optional[Union[Category, str]] = None,
        is_active: Optional[bool] = None,
    ) -> List[MaintenanceRule]:
        """
        Rules matching the optional filters, most important first.

        Args:
            category: Only rules of this category
            is_active: Only active (True) or inactive (False) rules
        """
        rules = self.rules
        if category is not None:
            category = Category(category)
            rules = [r for r in rules if r.category == category]
        if is_active is not None:
            rules = [r for r in rules if r.is_active == is_active]
        return sorted(rules, key=lambda r: (r.priority.rank, r.name))

    def find_maintenance_history(self, truck_id: str) -> List[MaintenanceRecord]:
        """Records for a truck, newest first. Same-instant records keep file order."""
        return sorted(
            (r for r in self.records if r.truck_id == truck_id),
            key=lambda r: r.performed_at,
            reverse=True,
        )
