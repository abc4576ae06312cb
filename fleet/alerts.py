"""Per-truck maintenance alerts: due and overdue rules ranked by urgency."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List

from .calculations import Clock, parse_instant, utc_now
from .due_evaluation import DueEvaluation
from .errors import NotFoundError
from .evaluator import evaluate_rule, last_record_for
from .fleet import Fleet
from .record import MaintenanceRecord
from .rule import MaintenanceRule
from .truck import Truck

logger = logging.getLogger(__name__)


@dataclass
class UpcomingMaintenance:
    """Alert list for one truck."""

    truck: Truck
    evaluations: List[DueEvaluation]

    @property
    def count(self) -> int:
        return len(self.evaluations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "truck": {
                "id": self.truck.id,
                "plateNumber": self.truck.plate_number,
                "currentMileage": self.truck.mileage,
            },
            "count": self.count,
            "data": [e.to_dict() for e in self.evaluations],
        }


def evaluate_truck(
    truck: Truck,
    rules: List[MaintenanceRule],
    history: List[MaintenanceRecord],
    now: datetime,
) -> List[DueEvaluation]:
    """
    Evaluate every active rule for a truck and keep only actionable results.

    Results are ordered OVERDUE before DUE_SOON, then by rule priority.
    The sort is stable so ties keep rule order.
    """
    results = []
    for rule in rules:
        if not rule.is_active:
            continue
        result = evaluate_rule(truck, rule, last_record_for(history, rule.category), now)
        if result.is_due:
            results.append(result)
    results.sort(key=lambda r: r.sort_key)
    return results


def get_upcoming_maintenance(
    fleet: Fleet, truck_id: str, clock: Clock = utc_now
) -> UpcomingMaintenance:
    """
    Build the alert list for a truck.

    Raises:
        NotFoundError: No truck with this id
    """
    truck = fleet.find_truck_by_id(truck_id)
    if truck is None:
        raise NotFoundError("Truck not found")

    rules = fleet.find_active_rules()
    history = fleet.find_maintenance_history(truck_id)
    evaluations = evaluate_truck(truck, rules, history, parse_instant(clock()))

    logger.debug(
        "Truck %s: %d of %d active rules need attention",
        truck.id,
        len(evaluations),
        len(rules),
    )
    return UpcomingMaintenance(truck=truck, evaluations=evaluations)
