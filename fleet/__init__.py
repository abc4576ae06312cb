"""
Fleet maintenance due-status models.

This package provides the predictive-maintenance engine for a truck fleet:
- Status: Urgency levels (OVERDUE, DUE_SOON, UPCOMING)
- Category / Priority: Enumerations shared by rules and records
- MaintenanceRule: Mileage, time or combined interval definitions
- MaintenanceRecord: Service history entries
- Truck: Vehicle identity, mileage and lifecycle
- Fleet: Snapshot with the read queries used by the engine
- DueEvaluation: Calculated due status for one truck and rule
- get_upcoming_maintenance / build_dashboard: Per-truck and fleet queries
"""

from .status import Status
from .category import Category
from .priority import Priority
from .rule import IntervalType, MaintenanceRule
from .record import MaintenanceRecord, RecordStatus
from .truck import Truck, TruckStatus
from .fleet import Fleet
from .due_evaluation import DueEvaluation
from .errors import NotFoundError
from .calculations import (
    calc_due_date,
    check_status,
    days_between,
    format_number,
    parse_instant,
    utc_now,
)
from .evaluator import evaluate_rule, last_record_for
from .alerts import UpcomingMaintenance, evaluate_truck, get_upcoming_maintenance
from .dashboard import FleetDashboard, TruckTally, build_dashboard, tally_truck
from .loader import load_fleet
from .config import Settings

__all__ = [
    "Status",
    "Category",
    "Priority",
    "IntervalType",
    "MaintenanceRule",
    "MaintenanceRecord",
    "RecordStatus",
    "Truck",
    "TruckStatus",
    "Fleet",
    "DueEvaluation",
    "NotFoundError",
    "calc_due_date",
    "check_status",
    "days_between",
    "format_number",
    "parse_instant",
    "utc_now",
    "evaluate_rule",
    "last_record_for",
    "UpcomingMaintenance",
    "evaluate_truck",
    "get_upcoming_maintenance",
    "FleetDashboard",
    "TruckTally",
    "build_dashboard",
    "tally_truck",
    "load_fleet",
    "Settings",
]
