#!/usr/bin/env python3
"""
Unified CLI for fleet maintenance tracking.

Commands:
  upcoming   - Show what maintenance is due or overdue for a truck
  dashboard  - Show overdue and due-soon counts across the fleet
  rules      - List maintenance rules
  history    - View a truck's service history
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from fleet import (
    DueEvaluation,
    MaintenanceRecord,
    MaintenanceRule,
    NotFoundError,
    Settings,
    build_dashboard,
    get_upcoming_maintenance,
    load_fleet,
    parse_instant,
    utc_now,
)
from fleet.category import RULE_CATEGORIES
from fleet.dashboard import TruckTally

# =============================================================================
# Formatting helpers
# =============================================================================


def format_km(km: Optional[float]) -> str:
    """Format mileage for display."""
    return f"{km:,.0f}" if km is not None else "-"


def format_cost(cost: Optional[float]) -> str:
    """Format cost for display."""
    return f"${cost:,.2f}" if cost is not None else "-"


def format_date(value: Optional[datetime]) -> str:
    return value.date().isoformat() if value is not None else "-"


def format_days(days: Optional[int]) -> str:
    """Format remaining days for display (e.g., '3mo 15d' or '-2mo 5d')."""
    if days is None:
        return "-"
    sign = "-" if days < 0 else ""
    days = abs(days)
    months = days // 30
    if months > 0:
        return f"{sign}{months}mo {days % 30}d"
    return f"{sign}{days}d"


def format_interval(rule: MaintenanceRule) -> str:
    parts = []
    if rule.interval_type.uses_mileage:
        parts.append(f"{rule.interval_mileage:,.0f} km")
    if rule.interval_type.uses_time:
        parts.append(f"{rule.interval_days:g} days")
    return " / ".join(parts)


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def fixed_clock(as_of: Optional[str]):
    """Clock for --as-of, or the real clock when not given."""
    if not as_of:
        return utc_now
    instant = parse_instant(as_of)
    return lambda: instant


# =============================================================================
# Table builders
# =============================================================================


def make_upcoming_table(evaluations: List[DueEvaluation]) -> List[List[str]]:
    """Convert due evaluations to table rows."""
    rows = []
    for ev in evaluations:
        rows.append(
            [
                ev.status.value.upper(),
                ev.rule.name,
                ev.rule.priority.value,
                format_date(ev.last_performed),
                format_km(ev.next_due_mileage),
                format_date(ev.next_due_date),
                format_km(ev.mileage_remaining),
                format_days(ev.days_remaining),
                ev.reason or "-",
            ]
        )
    return rows


def make_dashboard_table(tallies: List[TruckTally]) -> List[List[str]]:
    return [
        [
            t.truck.id,
            t.truck.plate_number,
            f"{t.truck.brand or '-'} {t.truck.model or ''}".strip(),
            str(t.overdue),
            str(t.due_soon),
        ]
        for t in tallies
    ]


def make_rules_table(rules: List[MaintenanceRule]) -> List[List[str]]:
    return [
        [
            r.id,
            r.name,
            r.category.value,
            format_interval(r),
            r.priority.value,
            "yes" if r.is_active else "no",
        ]
        for r in rules
    ]


def make_history_table(records: List[MaintenanceRecord]) -> List[List[str]]:
    """Convert maintenance records to table rows."""
    return [
        [
            format_date(r.performed_at),
            format_km(r.mileage),
            r.type.value,
            r.status.value,
            format_cost(r.cost),
            truncate(r.notes),
        ]
        for r in records
    ]


# =============================================================================
# Commands
# =============================================================================


def cmd_upcoming(args):
    """Show what maintenance is due or overdue for a truck."""
    fleet = load_fleet(args.fleet_file)
    try:
        report = get_upcoming_maintenance(
            fleet, args.truck_id, clock=fixed_clock(args.as_of)
        )
    except NotFoundError as e:
        print(f"Error: {e.message}: {args.truck_id}")
        return 1

    truck = report.truck
    print(f"Truck: {truck.plate_number} ({truck.name})")
    print(f"Current mileage: {truck.mileage:,.0f} km")
    print(f"Needing attention: {report.count}")
    print()

    if not report.evaluations:
        print("Nothing due.")
        return 0

    headers = [
        "Status",
        "Rule",
        "Priority",
        "Last Done",
        "Due (km)",
        "Due (date)",
        "Remaining (km)",
        "Remaining (time)",
        "Reason",
    ]
    print(tabulate(make_upcoming_table(report.evaluations), headers=headers))
    return 0


def cmd_dashboard(args):
    """Show overdue and due-soon counts across the fleet."""
    fleet = load_fleet(args.fleet_file)
    dashboard = build_dashboard(
        fleet, clock=fixed_clock(args.as_of), max_workers=args.workers
    )

    print(f"Trucks: {dashboard.total_trucks}")
    print(f"Overdue: {dashboard.total_overdue}")
    print(f"Due soon: {dashboard.total_due_soon}")
    print(f"Trucks needing attention: {dashboard.trucks_needing_attention}")
    print()

    if dashboard.flagged:
        headers = ["ID", "Plate", "Truck", "Overdue", "Due Soon"]
        print(tabulate(make_dashboard_table(dashboard.flagged), headers=headers))
    return 0


def cmd_rules(args):
    """List maintenance rules."""
    fleet = load_fleet(args.fleet_file)
    rules = fleet.find_rules(
        category=args.category, is_active=None if args.all else True
    )

    print(f"Rules: {len(rules)}")
    print()
    headers = ["ID", "Rule", "Category", "Interval", "Priority", "Active"]
    print(tabulate(make_rules_table(rules), headers=headers))
    return 0


def cmd_history(args):
    """View a truck's service history."""
    fleet = load_fleet(args.fleet_file)
    truck = fleet.find_truck_by_id(args.truck_id)
    if truck is None:
        print(f"Error: Truck not found: {args.truck_id}")
        return 1

    records = fleet.find_maintenance_history(truck.id)
    if args.type:
        records = [r for r in records if r.type.value == args.type]
    if args.since:
        since = parse_instant(args.since)
        records = [r for r in records if r.performed_at >= since]

    total_cost = sum(r.cost for r in records if r.cost is not None)

    print(f"Truck: {truck.plate_number} ({truck.name})")
    print(f"Records: {len(records)}")
    if total_cost > 0:
        print(f"Total cost: ${total_cost:,.2f}")
    print()

    if not records:
        print("No maintenance records found.")
        return 0

    headers = ["Date", "Mileage", "Type", "Status", "Cost", "Notes"]
    print(tabulate(make_history_table(records), headers=headers))
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fleet maintenance tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/fleet.yaml upcoming t1
  %(prog)s fleets/fleet.yaml upcoming t1 --as-of 2026-10-01
  %(prog)s fleets/fleet.yaml dashboard --workers 8
  %(prog)s fleets/fleet.yaml rules --category oil_change --all
  %(prog)s fleets/fleet.yaml history t1 --since 2026-01-01
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file (e.g., fleets/fleet.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    upcoming_parser = subparsers.add_parser(
        "upcoming", help="Show due and overdue maintenance for a truck"
    )
    upcoming_parser.add_argument("truck_id", type=str, help="Truck id")
    upcoming_parser.add_argument(
        "--as-of",
        type=str,
        help="Evaluate as of this date/time instead of now (ISO format)",
    )

    dashboard_parser = subparsers.add_parser(
        "dashboard", help="Show fleet-wide overdue and due-soon counts"
    )
    dashboard_parser.add_argument(
        "--as-of",
        type=str,
        help="Evaluate as of this date/time instead of now (ISO format)",
    )
    dashboard_parser.add_argument(
        "--workers",
        type=int,
        default=settings.dashboard_workers,
        help="Number of trucks evaluated concurrently",
    )

    rules_parser = subparsers.add_parser("rules", help="List maintenance rules")
    rules_parser.add_argument(
        "--category",
        choices=sorted(c.value for c in RULE_CATEGORIES),
        help="Only rules of this category",
    )
    rules_parser.add_argument(
        "--all",
        action="store_true",
        help="Include inactive rules",
    )

    history_parser = subparsers.add_parser("history", help="View service history")
    history_parser.add_argument("truck_id", type=str, help="Truck id")
    history_parser.add_argument(
        "--type",
        type=str,
        help="Only records of this type (e.g., 'oil_change')",
    )
    history_parser.add_argument(
        "--since",
        type=str,
        help="Show only records since date (YYYY-MM-DD)",
    )

    return parser


def main(argv=None):
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    args = build_parser(settings).parse_args(argv)

    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    if args.command == "upcoming":
        return cmd_upcoming(args)
    elif args.command == "dashboard":
        return cmd_dashboard(args)
    elif args.command == "rules":
        return cmd_rules(args)
    elif args.command == "history":
        return cmd_history(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
