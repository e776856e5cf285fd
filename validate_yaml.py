#!/usr/bin/env python3
"""
Check equipment seed files before the CLI or dashboard loads them.

A file is first checked against schema.yaml. When the shape is right it is
loaded into a registry the same way the CLI does, which catches duplicate
ids and unparseable dates, and every maintenanceInterval is checked against
the offered interval choices (unknown labels would silently count as 30
days).
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml
from jsonschema import Draft7Validator

from models import INTERVAL_LABELS, is_known_interval, load_registry

SCHEMA_FILE = Path(__file__).parent / "schema.yaml"
SEED_DIR = Path(__file__).parent / "equipment"


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    with open(SCHEMA_FILE) as f:
        return yaml.safe_load(f)


def read_seed(filepath: Path) -> Any:
    """Seed data with unquoted YAML dates turned into strings, as the loader sees them."""
    with open(filepath) as f:
        return json.loads(json.dumps(yaml.safe_load(f), default=str))


def schema_errors(data: Any, schema: dict) -> List[str]:
    """Every schema violation in the file, in document order."""
    errors = []
    found = Draft7Validator(schema).iter_errors(data)
    for error in sorted(found, key=lambda e: [str(p) for p in e.path]):
        errors.append(f"Schema validation error: {error.message}")
        if error.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in error.path)}")
    return errors


def registry_errors(filepath: Path) -> List[str]:
    """Problems that only show up once the records are built."""
    try:
        registry = load_registry(filepath)
    except (ValueError, OverflowError) as e:
        return [f"Load error: {e}"]

    errors = []
    for item in registry:
        if not is_known_interval(item.maintenance_interval):
            errors.append(
                f"Equipment {item.id}: unknown maintenanceInterval {item.maintenance_interval!r}"
                f" (expected one of: {', '.join(INTERVAL_LABELS)})"
            )
    return errors


def validate_equipment_file(filepath: Path, schema: dict) -> List[str]:
    """Validate a single equipment YAML file. Returns list of errors."""
    try:
        data = read_seed(filepath)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    errors = schema_errors(data, schema)
    if errors:
        return errors
    return registry_errors(filepath)


def seed_files(directory: Path) -> List[Path]:
    return sorted(list(directory.glob("*.yaml")) + list(directory.glob("*.yml")))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate equipment seed YAML files")
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Seed files to check (default: every file in equipment/)",
    )
    args = parser.parse_args(argv)

    if args.files:
        yaml_files = args.files
    else:
        if not SEED_DIR.exists():
            print(f"Error: equipment directory not found: {SEED_DIR}")
            return 1
        yaml_files = seed_files(SEED_DIR)
        if not yaml_files:
            print(f"Warning: No YAML files found in {SEED_DIR}")
            return 0

    schema = load_schema()
    all_valid = True
    for filepath in yaml_files:
        errors = validate_equipment_file(filepath, schema)
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
