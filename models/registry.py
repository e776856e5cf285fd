"""EquipmentRegistry - the in-memory equipment list and its actions."""

import logging
import time
from datetime import date, datetime
from typing import Dict, Iterator, List, Optional, Union

from .alerts import MaintenanceAlerts, build_alerts
from .calculations import calc_next_maintenance
from .equipment import Equipment
from .errors import EquipmentNotFound, ValidationError
from .status import Status

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("machine_name", "part_number", "location", "maintenance_interval")

STATUS_FILTER_ALL = "all"


class EquipmentRegistry:
    """
    Application state for one session.

    Holds the equipment list in insertion order. All changes go through
    add_equipment() and approve_spare_parts(); status is never stored.
    """

    def __init__(self, equipment: Optional[List[Equipment]] = None):
        self._equipment: List[Equipment] = []
        for item in equipment or []:
            self._append(item)

    def __len__(self) -> int:
        return len(self._equipment)

    def __iter__(self) -> Iterator[Equipment]:
        return iter(list(self._equipment))

    @property
    def equipment(self) -> List[Equipment]:
        return list(self._equipment)

    def get(self, equipment_id: str) -> Equipment:
        """Find equipment by id, raising EquipmentNotFound."""
        for item in self._equipment:
            if item.id == equipment_id:
                return item
        raise EquipmentNotFound(equipment_id)

    def _append(self, item: Equipment) -> None:
        if any(e.id == item.id for e in self._equipment):
            raise ValueError(f"Duplicate equipment id: {item.id}")
        self._equipment.append(item)

    def _new_id(self) -> str:
        """Millisecond timestamp token, bumped past any id already in use."""
        token = int(time.time() * 1000)
        taken = {e.id for e in self._equipment}
        while str(token) in taken:
            token += 1
        return str(token)

    def add_equipment(
        self,
        machine_name: Optional[str],
        part_number: Optional[str],
        location: Optional[str],
        maintenance_interval: Optional[str],
        last_maintenance: Optional[date] = None,
        spare_parts_needed: bool = False,
        today: Optional[date] = None,
    ) -> Equipment:
        """
        Create a new equipment record and append it.

        Raises ValidationError, leaving the list unchanged, when any of
        machine_name, part_number, location or maintenance_interval is empty.
        A missing last_maintenance date means "today".
        """
        values = {
            "machine_name": machine_name,
            "part_number": part_number,
            "location": location,
            "maintenance_interval": maintenance_interval,
        }
        missing = [name for name in REQUIRED_FIELDS if not (values[name] or "").strip()]
        if missing:
            logger.info("Rejected new equipment, missing: %s", ", ".join(missing))
            raise ValidationError(missing)

        today = today or date.today()
        last = last_maintenance or today
        item = Equipment(
            id=self._new_id(),
            machine_name=machine_name.strip(),
            part_number=part_number.strip(),
            location=location.strip(),
            maintenance_interval=maintenance_interval.strip(),
            last_maintenance=last,
            next_maintenance=calc_next_maintenance(last, maintenance_interval.strip()),
            spare_parts_needed=spare_parts_needed,
        )
        self._append(item)
        logger.info(
            "Added equipment %s (%s), next maintenance %s",
            item.id, item.machine_name, item.next_maintenance.isoformat(),
        )
        return item

    def approve_spare_parts(self, equipment_id: str) -> Equipment:
        """Mark spare parts for an equipment record as approved."""
        item = self.get(equipment_id)
        item.approve_spare_parts()
        logger.info("Approved spare parts for %s (%s)", item.id, item.machine_name)
        return item

    def schedule_maintenance(self, equipment_id: str) -> Equipment:
        """Look up the record to schedule; the list itself is not changed."""
        item = self.get(equipment_id)
        logger.info("Maintenance scheduled for %s (%s)", item.id, item.machine_name)
        return item

    def search(
        self,
        term: Optional[str] = None,
        status_filter: Optional[str] = STATUS_FILTER_ALL,
        now: Optional[Union[date, datetime]] = None,
    ) -> List[Equipment]:
        """
        Filter equipment by search term and status.

        Args:
            term: Substring of machine name, part number or location
            status_filter: "all", "good", "due" or "overdue"
        """
        now = now or date.today()
        wanted = None
        if status_filter and status_filter != STATUS_FILTER_ALL:
            wanted = Status.from_token(status_filter)
        return [
            item for item in self._equipment
            if item.matches(term) and (wanted is None or item.status_at(now) == wanted)
        ]

    def alerts(self, now: Optional[Union[date, datetime]] = None) -> MaintenanceAlerts:
        return build_alerts(self._equipment, now or date.today())

    def status_counts(self, now: Optional[Union[date, datetime]] = None) -> Dict[str, int]:
        """Count of equipment per status token."""
        now = now or date.today()
        counts = {s.token: 0 for s in Status}
        for item in self._equipment:
            counts[item.status_at(now).token] += 1
        return counts
