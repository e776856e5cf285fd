"""
Facility equipment maintenance tracking models.

This package provides data models for tracking equipment maintenance:
- Status: Urgency levels (OVERDUE, DUE, GOOD)
- Equipment: A tracked asset with its maintenance dates
- EquipmentRegistry: The in-memory equipment list and its actions
- MaintenanceAlerts: Overdue / due-soon summary
- SparePartRequestList: Spare-part requests awaiting approval
"""

from .status import Status
from .errors import MaintenanceError, ValidationError, EquipmentNotFound
from .interval import INTERVAL_DAYS, INTERVAL_LABELS, is_known_interval, resolve_interval_days
from .calculations import DUE_SOON_DAYS, calc_next_maintenance, classify_status, days_until
from .equipment import Equipment
from .alerts import MaintenanceAlerts, build_alerts
from .registry import EquipmentRegistry
from .spare_parts import SparePartRequest, SparePartRequestList, URGENCY_LEVELS
from .messages import MessageKey, translate, status_label, interval_label
from .loader import load_registry, equipment_to_dict, parse_date

__all__ = [
    "Status",
    "MaintenanceError",
    "ValidationError",
    "EquipmentNotFound",
    "INTERVAL_DAYS",
    "INTERVAL_LABELS",
    "is_known_interval",
    "resolve_interval_days",
    "DUE_SOON_DAYS",
    "calc_next_maintenance",
    "classify_status",
    "days_until",
    "Equipment",
    "MaintenanceAlerts",
    "build_alerts",
    "EquipmentRegistry",
    "SparePartRequest",
    "SparePartRequestList",
    "URGENCY_LEVELS",
    "MessageKey",
    "translate",
    "status_label",
    "interval_label",
    "load_registry",
    "equipment_to_dict",
    "parse_date",
]
