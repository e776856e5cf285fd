"""YAML loading utilities for equipment seed data."""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dateutil import parser as date_parser

from .calculations import calc_next_maintenance
from .equipment import Equipment
from .registry import EquipmentRegistry


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Parse a calendar date.

    Accepts ISO dates ('2024-03-15') and US locale dates ('3/15/2024').
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(str(value)).date()


def _parse_object(dct: Dict[str, Any]) -> Union[Equipment, EquipmentRegistry, dict]:
    """Parse dictionary into appropriate object type."""
    # Equipment record
    if "machineName" in dct and "partNumber" in dct:
        # No recorded maintenance means it was done today
        last = parse_date(dct.get("lastMaintenance")) or date.today()
        interval = dct.get("maintenanceInterval")
        next_date = parse_date(dct.get("nextMaintenance"))
        if next_date is None:
            next_date = calc_next_maintenance(last, interval)
        # A stored "status" is a stale copy; it is recomputed on read
        return Equipment(
            str(dct["id"]),
            dct["machineName"],
            dct["partNumber"],
            dct["location"],
            interval,
            last,
            next_date,
            dct.get("sparePartsNeeded"),
            dct.get("sparePartsApproved"),
        )
    # Top-level seed file
    elif "equipment" in dct:
        return EquipmentRegistry(dct["equipment"] or [])
    else:
        return dct


def load_registry(filename: Union[str, Path]) -> EquipmentRegistry:
    """Load an equipment registry from a YAML seed file."""
    with open(filename, "rb") as fp:
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), indent=4, default=str)
    registry = json.loads(json_data, object_hook=_parse_object)
    if not isinstance(registry, EquipmentRegistry):
        raise ValueError(f"{filename}: expected a top-level 'equipment' list")
    return registry


def equipment_to_dict(equipment: Equipment, now: Optional[date] = None) -> Dict[str, Any]:
    """Serialize equipment to the camelCase dict format with its current status."""
    now = now or date.today()
    return {
        "id": equipment.id,
        "machineName": equipment.machine_name,
        "partNumber": equipment.part_number,
        "location": equipment.location,
        "maintenanceInterval": equipment.maintenance_interval,
        "lastMaintenance": equipment.last_maintenance.isoformat(),
        "nextMaintenance": equipment.next_maintenance.isoformat(),
        "sparePartsNeeded": equipment.spare_parts_needed,
        "sparePartsApproved": equipment.spare_parts_approved,
        "status": equipment.status_at(now).token,
        "daysUntil": equipment.days_until_maintenance(now),
    }
