"""MaintenanceAlerts dataclass for the overdue / due-soon summary."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, List, TYPE_CHECKING, Union

from .status import Status

if TYPE_CHECKING:
    from .equipment import Equipment


@dataclass
class MaintenanceAlerts:
    """Equipment needing attention, split by urgency."""

    overdue: List["Equipment"] = field(default_factory=list)
    due_soon: List["Equipment"] = field(default_factory=list)

    @property
    def items(self) -> List["Equipment"]:
        """Overdue first, then due soon, each in source order."""
        return self.overdue + self.due_soon

    @property
    def overdue_count(self) -> int:
        return len(self.overdue)

    @property
    def due_soon_count(self) -> int:
        return len(self.due_soon)

    @property
    def all_current(self) -> bool:
        return not self.overdue and not self.due_soon


def build_alerts(equipment: Iterable["Equipment"], now: Union[date, datetime]) -> MaintenanceAlerts:
    """Stable partition of equipment into overdue and due-soon lists."""
    alerts = MaintenanceAlerts()
    for item in equipment:
        status = item.status_at(now)
        if status == Status.OVERDUE:
            alerts.overdue.append(item)
        elif status == Status.DUE:
            alerts.due_soon.append(item)
    return alerts
