"""Fleet-wide maintenance dashboard: overdue and due-soon tallies per truck."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from .calculations import Clock, parse_instant, utc_now
from .evaluator import evaluate_rule, last_record_for
from .fleet import Fleet
from .record import MaintenanceRecord
from .rule import MaintenanceRule
from .status import Status
from .truck import Truck

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4


@dataclass
class TruckTally:
    """Overdue and due-soon counts for one truck."""

    truck: Truck
    overdue: int = 0
    due_soon: int = 0

    @property
    def needs_attention(self) -> bool:
        return self.overdue > 0 or self.due_soon > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "truck": {
                "id": self.truck.id,
                "plateNumber": self.truck.plate_number,
                "brand": self.truck.brand,
                "model": self.truck.model,
            },
            "overdue": self.overdue,
            "dueSoon": self.due_soon,
        }


@dataclass
class FleetDashboard:
    """Fleet summary plus the trucks that need attention."""

    total_trucks: int = 0
    total_overdue: int = 0
    total_due_soon: int = 0
    flagged: List[TruckTally] = field(default_factory=list)

    @property
    def trucks_needing_attention(self) -> int:
        return len(self.flagged)

    def add(self, tally: TruckTally) -> None:
        """Merge one truck's tally into the fleet totals."""
        self.total_trucks += 1
        self.total_overdue += tally.overdue
        self.total_due_soon += tally.due_soon
        if tally.needs_attention:
            self.flagged.append(tally)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": {
                "totalTrucks": self.total_trucks,
                "totalOverdue": self.total_overdue,
                "totalDueSoon": self.total_due_soon,
                "trucksNeedingAttention": self.trucks_needing_attention,
            },
            "data": [t.to_dict() for t in self.flagged],
        }


def tally_truck(
    truck: Truck,
    rules: List[MaintenanceRule],
    history: List[MaintenanceRecord],
    now: datetime,
) -> TruckTally:
    """Count overdue and due-soon rules for a truck using summary evaluation."""
    tally = TruckTally(truck=truck)
    for rule in rules:
        if not rule.is_active:
            continue
        result = evaluate_rule(
            truck, rule, last_record_for(history, rule.category), now, summary=True
        )
        if result.status == Status.OVERDUE:
            tally.overdue += 1
        elif result.status == Status.DUE_SOON:
            tally.due_soon += 1
    return tally


def build_dashboard(
    fleet: Fleet, clock: Clock = utc_now, max_workers: int = DEFAULT_WORKERS
) -> FleetDashboard:
    """
    Tally every non-inactive truck against every active rule.

    Trucks are evaluated concurrently; tallies are merged afterwards in
    truck order. A failed history fetch aborts the whole dashboard.
    """
    trucks = fleet.find_all_non_inactive_trucks()
    rules = fleet.find_active_rules()
    now = parse_instant(clock())

    def _tally(truck: Truck) -> TruckTally:
        return tally_truck(truck, rules, fleet.find_maintenance_history(truck.id), now)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        tallies = list(pool.map(_tally, trucks))

    dashboard = FleetDashboard()
    for tally in tallies:
        logger.debug(
            "Truck %s: %d overdue, %d due soon",
            tally.truck.id,
            tally.overdue,
            tally.due_soon,
        )
        dashboard.add(tally)

    logger.info(
        "Dashboard: %d trucks, %d need attention",
        dashboard.total_trucks,
        dashboard.trucks_needing_attention,
    )
    return dashboard
