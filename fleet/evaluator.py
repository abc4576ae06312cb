"""Due-status evaluation of one rule against one truck."""

from datetime import datetime
from typing import Iterable, Optional

from .calculations import calc_due_date, check_status, days_between, format_number
from .category import Category
from .due_evaluation import DueEvaluation
from .record import MaintenanceRecord
from .rule import MaintenanceRule
from .status import Status
from .truck import Truck

NEVER_PERFORMED = "Never performed"


def last_record_for(
    history: Iterable[MaintenanceRecord], category: Category
) -> Optional[MaintenanceRecord]:
    """
    First record of the category in history.

    History comes from the reader sorted newest first, so this is the most
    recent service of that category.
    """
    for record in history:
        if record.matches(category):
            return record
    return None


def evaluate_rule(
    truck: Truck,
    rule: MaintenanceRule,
    last_record: Optional[MaintenanceRecord],
    now: datetime,
    summary: bool = False,
) -> DueEvaluation:
    """
    Calculate the due status of a rule for a truck.

    Logic:
    - No prior record: OVERDUE, "Never performed"
    - Mileage contribution (mileage/both rules): classified against the
      interval, sets the first reason
    - Time contribution (time/both rules): overdue always wins and extends
      the reason; due soon only upgrades a still-UPCOMING status

    Args:
        summary: Dashboard mode. Stops after the mileage contribution once it
            classified the rule as OVERDUE or DUE_SOON, without looking at time.
    """
    result = DueEvaluation(
        truck_id=truck.id,
        rule=rule,
        status=Status.UPCOMING,
        last_performed=last_record.performed_at if last_record else None,
        last_mileage=last_record.mileage if last_record else None,
    )

    if last_record is None:
        result.status = Status.OVERDUE
        result.reason = NEVER_PERFORMED
        return result

    last_mileage = last_record.mileage or 0

    if rule.interval_type.uses_mileage:
        since = truck.mileage - last_mileage
        remaining = rule.interval_mileage - since
        result.mileage_since_last_service = since
        result.mileage_remaining = remaining
        result.next_due_mileage = last_mileage + rule.interval_mileage

        mileage_status = check_status(since, rule.interval_mileage)
        if mileage_status == Status.OVERDUE:
            result.reason = (
                f"Exceeded mileage interval by {format_number(abs(remaining))} km"
            )
        elif mileage_status == Status.DUE_SOON:
            result.reason = f"Due in {format_number(remaining)} km"
        result.status = mileage_status

        if summary and mileage_status != Status.UPCOMING:
            return result

    if rule.interval_type.uses_time:
        days_since = days_between(last_record.performed_at, now)
        days_remaining = rule.interval_days - days_since
        result.days_since_last_service = days_since
        result.days_remaining = days_remaining
        result.next_due_date = calc_due_date(
            last_record.performed_at, rule.interval_days
        )

        time_status = check_status(days_since, rule.interval_days)
        if time_status == Status.OVERDUE:
            overdue_by = format_number(abs(days_remaining))
            if result.reason:
                result.reason = (
                    f"{result.reason} and exceeded time interval by {overdue_by} days"
                )
            else:
                result.reason = f"Exceeded time interval by {overdue_by} days"
            result.status = Status.OVERDUE
        elif time_status == Status.DUE_SOON and result.status == Status.UPCOMING:
            result.status = Status.DUE_SOON
            if not result.reason:
                result.reason = f"Due in {format_number(days_remaining)} days"

    return result
