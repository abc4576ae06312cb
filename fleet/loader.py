"""YAML loading utilities for fleet data."""

import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .fleet import Fleet
from .record import MaintenanceRecord
from .rule import MaintenanceRule
from .truck import Truck


def _json_default(obj: Any) -> str:
    """YAML dates come back as date/datetime objects; keep them as ISO strings."""
    if isinstance(obj, date):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _parse_object(
    dct: Dict[str, Any]
) -> Union[Truck, MaintenanceRule, MaintenanceRecord, Fleet, dict]:
    """Parse dictionary into appropriate object type."""
    # Truck
    if "plateNumber" in dct:
        return Truck(
            str(dct["id"]),
            dct["plateNumber"],
            dct.get("brand"),
            dct.get("model"),
            dct.get("year"),
            dct.get("mileage"),
            dct.get("status"),
        )
    # Rule
    elif "intervalType" in dct:
        return MaintenanceRule(
            str(dct["id"]),
            dct["name"],
            dct["category"],
            dct["intervalType"],
            dct.get("intervalMileage"),
            dct.get("intervalDays"),
            dct.get("priority"),
            dct.get("isActive", True),
            dct.get("description"),
            dct.get("estimatedCost"),
            dct.get("estimatedDuration"),
        )
    # Maintenance record
    elif "truckId" in dct:
        return MaintenanceRecord(
            str(dct["id"]),
            str(dct["truckId"]),
            dct["type"],
            dct["date"],
            dct.get("mileage"),
            dct.get("status"),
            dct.get("cost"),
            dct.get("notes"),
        )
    # Top-level fleet object
    elif "trucks" in dct and "rules" in dct:
        return Fleet(dct["trucks"], dct["rules"], dct.get("records"))
    else:
        return dct


def load_fleet(filename: Union[str, Path]) -> Fleet:
    """Load a fleet snapshot from a YAML file."""
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    if not isinstance(data, dict) or "trucks" not in data or "rules" not in data:
        raise ValueError(f"{filename}: expected top-level 'trucks' and 'rules'")
    json_data = json.dumps(data, default=_json_default)
    fleet = json.loads(json_data, object_hook=_parse_object)
    if not isinstance(fleet, Fleet):
        raise ValueError(f"{filename}: 'trucks' and 'rules' must be lists")

    # Entries missing their identifying key stay plain dicts
    for section, items, expected in (
        ("trucks", fleet.trucks, Truck),
        ("rules", fleet.rules, MaintenanceRule),
        ("records", fleet.records, MaintenanceRecord),
    ):
        if not isinstance(items, list):
            raise ValueError(f"{filename}: '{section}' must be a list")
        for index, item in enumerate(items):
            if not isinstance(item, expected):
                raise ValueError(
                    f"{filename}: {section}[{index}] is not a valid "
                    f"{expected.__name__} entry"
                )
    return fleet
