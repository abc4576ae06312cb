#!/usr/bin/env python3
"""Validate fleet YAML files against the schema."""
import sys
from pathlib import Path
from typing import List

import yaml
from jsonschema import validate, ValidationError

FLEETS_DIR = Path(__file__).parent / "fleets"


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def _stringify_dates(data):
    """Unquoted YAML dates load as date objects; the schema expects strings."""
    if isinstance(data, dict):
        return {k: _stringify_dates(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_stringify_dates(v) for v in data]
    if hasattr(data, "isoformat"):
        return data.isoformat()
    return data


def check_references(data: dict) -> List[str]:
    """Check that record truck ids and all ids are consistent."""
    errors = []
    truck_ids = [str(t["id"]) for t in data.get("trucks") or []]
    rule_ids = [str(r["id"]) for r in data.get("rules") or []]
    for kind, ids in (("truck", truck_ids), ("rule", rule_ids)):
        seen = set()
        for i in ids:
            if i in seen:
                errors.append(f"Duplicate {kind} id: {i}")
            seen.add(i)
    known = set(truck_ids)
    for record in data.get("records") or []:
        if str(record["truckId"]) not in known:
            errors.append(
                f"Record {record['id']} references unknown truck {record['truckId']}"
            )
    return errors


def validate_fleet_file(filepath: Path, schema: dict) -> List[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = _stringify_dates(yaml.safe_load(f))
        validate(instance=data, schema=schema)
        errors.extend(check_references(data))
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate the given fleet files, or every YAML file in fleets/."""
    schema = load_schema()
    args = sys.argv[1:] if argv is None else argv

    if args:
        yaml_files = [Path(a) for a in args]
    else:
        if not FLEETS_DIR.exists():
            print(f"Error: fleets directory not found: {FLEETS_DIR}")
            return 1
        yaml_files = sorted(
            list(FLEETS_DIR.glob("*.yaml")) + list(FLEETS_DIR.glob("*.yml"))
        )

    if not yaml_files:
        print(f"Warning: No YAML files found in {FLEETS_DIR}")
        return 0

    all_valid = True
    for filepath in yaml_files:
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
