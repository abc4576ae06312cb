"""Shared fixtures: a fixed clock and a small fleet file."""

from datetime import datetime

import pytest

NOW = datetime(2026, 10, 18, 12, 0)

FLEET_YAML = """
trucks:
  - id: t1
    plateNumber: abc-123
    brand: Volvo
    model: FH16
    year: 2019
    mileage: 49500
    status: in_use
  - id: t2
    plateNumber: XYZ-987
    brand: Scania
    model: R500
    mileage: 10000
  - id: t3
    plateNumber: OLD-001
    brand: MAN
    model: TGX
    status: inactive

rules:
  - id: r1
    name: Engine oil change
    category: oil_change
    intervalType: both
    intervalMileage: 10000
    intervalDays: 180
    priority: high
  - id: r2
    name: Tire rotation
    category: tire_rotation
    intervalType: mileage
    intervalMileage: 20000
    priority: medium
  - id: r3
    name: Brake inspection
    category: brake_inspection
    intervalType: time
    intervalDays: 90
    priority: critical
  - id: r4
    name: Annual general service
    category: general_service
    intervalType: time
    intervalDays: 365
    priority: low
    isActive: false

records:
  - id: m1
    truckId: t1
    type: oil_change
    date: 2026-07-01
    mileage: 40000
    cost: 240
    notes: Synthetic 10W-40
  - id: m2
    truckId: t1
    type: brake_inspection
    date: '2026-10-01'
    mileage: 49000
  - id: m3
    truckId: t2
    type: oil_change
    date: '2026-10-01'
    mileage: 9000
  - id: m4
    truckId: t2
    type: tire_rotation
    date: '2026-10-01'
    mileage: 9000
  - id: m5
    truckId: t2
    type: brake_inspection
    date: '2026-10-01T08:30:00Z'
    mileage: 9000
"""


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def fleet_file(tmp_path):
    path = tmp_path / "fleet.yaml"
    path.write_text(FLEET_YAML)
    return path
