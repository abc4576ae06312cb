#!/usr/bin/env python3
"""Tests for maint CLI formatting, table helpers and commands."""

from datetime import datetime

from fleet import DueEvaluation, MaintenanceRecord, MaintenanceRule, Status
from maint import (
    format_cost,
    format_date,
    format_days,
    format_interval,
    format_km,
    main,
    make_history_table,
    make_upcoming_table,
    truncate,
)


def oil_rule():
    return MaintenanceRule(
        "r1", "Engine oil change", "oil_change", "both",
        interval_mileage=15000, interval_days=180, priority="high",
    )


class TestFormatting:
    """Tests for formatting helpers."""

    def test_format_km(self):
        assert format_km(50000) == "50,000"
        assert format_km(None) == "-"

    def test_format_cost(self):
        assert format_cost(75.5) == "$75.50"
        assert format_cost(None) == "-"

    def test_format_date(self):
        assert format_date(datetime(2026, 7, 1, 8, 30)) == "2026-07-01"
        assert format_date(None) == "-"

    def test_format_days(self):
        assert format_days(None) == "-"
        assert format_days(105) == "3mo 15d"
        assert format_days(14) == "14d"
        assert format_days(-65) == "-2mo 5d"
        assert format_days(-10) == "-10d"

    def test_format_interval(self):
        assert format_interval(oil_rule()) == "15,000 km / 180 days"
        rule = MaintenanceRule("r2", "Brakes", "brake_inspection", "time", interval_days=90)
        assert format_interval(rule) == "90 days"

    def test_truncate(self):
        assert truncate(None) == "-"
        assert truncate("short") == "short"
        assert truncate("this is a very long note", max_len=15) == "this is a ve..."


class TestTables:
    """Tests for table builders."""

    def test_upcoming_row(self):
        ev = DueEvaluation(
            truck_id="t1",
            rule=oil_rule(),
            status=Status.DUE_SOON,
            last_performed=datetime(2026, 7, 1),
            last_mileage=40000,
            mileage_remaining=500,
            next_due_mileage=55000,
            days_remaining=71,
            next_due_date=datetime(2026, 12, 28),
            reason="Due in 500 km",
        )
        assert make_upcoming_table([ev]) == [
            [
                "DUE_SOON",
                "Engine oil change",
                "high",
                "2026-07-01",
                "55,000",
                "2026-12-28",
                "500",
                "2mo 11d",
                "Due in 500 km",
            ]
        ]

    def test_never_performed_row(self):
        ev = DueEvaluation(
            truck_id="t1", rule=oil_rule(), status=Status.OVERDUE, reason="Never performed"
        )
        row = make_upcoming_table([ev])[0]
        assert row[3:8] == ["-", "-", "-", "-", "-"]

    def test_history_row(self):
        record = MaintenanceRecord(
            "m1", "t1", "oil_change", "2026-07-01", mileage=40000, cost=45.0, notes="Motul"
        )
        assert make_history_table([record]) == [
            ["2026-07-01", "40,000", "oil_change", "completed", "$45.00", "Motul"]
        ]


class TestCommands:
    """End-to-end command runs against a fleet file."""

    def test_upcoming(self, fleet_file, capsys):
        code = main([str(fleet_file), "upcoming", "t1", "--as-of", "2026-10-18T12:00"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Truck: ABC-123 (2019 Volvo FH16)" in out
        assert "Needing attention: 2" in out
        assert "Never performed" in out
        assert out.index("Tire rotation") < out.index("Engine oil change")

    def test_upcoming_nothing_due(self, fleet_file, capsys):
        code = main([str(fleet_file), "upcoming", "t2", "--as-of", "2026-10-18"])
        assert code == 0
        assert "Nothing due." in capsys.readouterr().out

    def test_upcoming_unknown_truck(self, fleet_file, capsys):
        code = main([str(fleet_file), "upcoming", "nope"])
        assert code == 1
        assert "Truck not found" in capsys.readouterr().out

    def test_dashboard(self, fleet_file, capsys):
        code = main([str(fleet_file), "dashboard", "--as-of", "2026-10-18", "--workers", "2"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Trucks: 2" in out
        assert "Trucks needing attention: 1" in out
        assert "ABC-123" in out
        assert "XYZ-987" not in out

    def test_rules_active_only(self, fleet_file, capsys):
        main([str(fleet_file), "rules"])
        out = capsys.readouterr().out
        assert "Rules: 3" in out
        assert "Annual general service" not in out

    def test_rules_all_by_category(self, fleet_file, capsys):
        main([str(fleet_file), "rules", "--all", "--category", "general_service"])
        out = capsys.readouterr().out
        assert "Rules: 1" in out
        assert "Annual general service" in out

    def test_history(self, fleet_file, capsys):
        code = main([str(fleet_file), "history", "t1", "--since", "2026-09-01"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Records: 1" in out
        assert "brake_inspection" in out

    def test_history_total_cost(self, fleet_file, capsys):
        main([str(fleet_file), "history", "t1", "--type", "oil_change"])
        out = capsys.readouterr().out
        assert "Total cost: $240.00" in out

    def test_missing_file(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.yaml"), "rules"])
        assert code == 1
        assert "File not found" in capsys.readouterr().out
