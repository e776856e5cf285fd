"""Exceptions raised by equipment actions."""

from typing import Iterable, Optional


class MaintenanceError(Exception):
    """Base class for recoverable equipment tracking errors."""


class ValidationError(MaintenanceError, ValueError):
    """Required input was missing or invalid; nothing was changed."""

    def __init__(
        self,
        missing_fields: Iterable[str],
        message_key: str = "toast.fillRequired",
        message: Optional[str] = None,
    ):
        self.missing_fields = list(missing_fields)
        self.message_key = message_key
        super().__init__(message or f"Missing required fields: {', '.join(self.missing_fields)}")


class EquipmentNotFound(MaintenanceError, KeyError):
    """No equipment record with the given id."""

    def __init__(self, equipment_id: str):
        self.equipment_id = equipment_id
        super().__init__(equipment_id)

    def __str__(self) -> str:
        return f"Equipment '{self.equipment_id}' not found"
