"""Equipment class for tracked facility assets."""

from datetime import date, datetime
from typing import Optional, Union

from .calculations import classify_status, days_until
from .status import Status


class Equipment:
    """A tracked physical asset with a maintenance schedule."""

    def __init__(
            self,
            id: str,
            machine_name: str,
            part_number: str,
            location: str,
            maintenance_interval: str,
            last_maintenance: date,
            next_maintenance: date,
            spare_parts_needed: bool = False,
            spare_parts_approved: bool = False,
    ):
        self.id = id
        self.machine_name = machine_name
        self.part_number = part_number
        self.location = location
        self.maintenance_interval = maintenance_interval
        self.last_maintenance = last_maintenance
        self.next_maintenance = next_maintenance
        self.spare_parts_needed = spare_parts_needed or False
        self.spare_parts_approved = spare_parts_approved or False

    def status_at(self, now: Union[date, datetime]) -> Status:
        """Status relative to the given moment."""
        return classify_status(self.next_maintenance, now)

    @property
    def status(self) -> Status:
        """Status as of today. Always derived, never stored."""
        return self.status_at(date.today())

    def days_until_maintenance(self, now: Optional[Union[date, datetime]] = None) -> int:
        """Days until next maintenance; negative when overdue."""
        return days_until(self.next_maintenance, now or date.today())

    @property
    def spare_parts_pending(self) -> bool:
        return self.spare_parts_needed and not self.spare_parts_approved

    def approve_spare_parts(self) -> None:
        self.spare_parts_approved = True

    def matches(self, term: Optional[str]) -> bool:
        """Case-insensitive search over name, part number and location."""
        if not term:
            return True
        needle = term.lower()
        return (
            needle in self.machine_name.lower()
            or needle in self.part_number.lower()
            or needle in self.location.lower()
        )

    def __repr__(self) -> str:
        return f"Equipment(id={self.id!r}, machine_name={self.machine_name!r})"
