"""Spare-part requests filed against an equipment record."""

import logging
import time
from typing import List, Optional

from .errors import ValidationError

logger = logging.getLogger(__name__)

URGENCY_LEVELS = ("low", "medium", "high", "urgent")
DEFAULT_URGENCY = "medium"


class SparePartRequest:
    """A single procurement item awaiting approval."""

    def __init__(
            self,
            id: str,
            part_name: str,
            quantity: int,
            part_number: Optional[str] = None,
            description: Optional[str] = None,
            estimated_price: Optional[float] = None,
            supplier: Optional[str] = None,
            urgency: Optional[str] = None,
    ):
        self.id = id
        self.part_name = part_name
        self.quantity = quantity
        self.part_number = part_number or ""
        self.description = description or ""
        self.estimated_price = estimated_price or 0.0
        self.supplier = supplier or ""
        self.urgency = urgency or DEFAULT_URGENCY

    @property
    def line_total(self) -> float:
        return self.estimated_price * self.quantity


class SparePartRequestList:
    """
    Draft list of spare-part requests for one equipment record.

    Requests are collected with add(), then sent together by submit(),
    which empties the list.
    """

    def __init__(self, equipment_id: str, equipment_name: str):
        self.equipment_id = equipment_id
        self.equipment_name = equipment_name
        self.requests: List[SparePartRequest] = []

    def __len__(self) -> int:
        return len(self.requests)

    def _new_id(self) -> str:
        token = int(time.time() * 1000)
        taken = {r.id for r in self.requests}
        while str(token) in taken:
            token += 1
        return str(token)

    def add(
        self,
        part_name: Optional[str],
        quantity: Optional[int],
        part_number: Optional[str] = None,
        description: Optional[str] = None,
        estimated_price: Optional[float] = None,
        supplier: Optional[str] = None,
        urgency: Optional[str] = None,
    ) -> SparePartRequest:
        """Add a request. Part name and a positive quantity are required."""
        missing = []
        if not (part_name or "").strip():
            missing.append("part_name")
        if not quantity or quantity < 1:
            missing.append("quantity")
        if missing:
            raise ValidationError(missing, message_key="spareParts.fillRequired")
        if urgency and urgency not in URGENCY_LEVELS:
            raise ValidationError(
                ["urgency"], message_key="spareParts.unknownUrgency", message=f"Unknown urgency: {urgency!r}"
            )

        request = SparePartRequest(
            id=self._new_id(),
            part_name=part_name.strip(),
            quantity=int(quantity),
            part_number=part_number,
            description=description,
            estimated_price=estimated_price,
            supplier=supplier,
            urgency=urgency,
        )
        self.requests.append(request)
        return request

    def remove(self, request_id: str) -> None:
        """Drop a request from the draft; unknown ids are ignored."""
        self.requests = [r for r in self.requests if r.id != request_id]

    @property
    def total_estimated_cost(self) -> float:
        return sum(r.line_total for r in self.requests)

    def submit(self) -> List[SparePartRequest]:
        """Send all requests for approval and clear the draft."""
        if not self.requests:
            raise ValidationError(
                [], message_key="spareParts.noRequests", message="No spare part requests to submit"
            )
        submitted = self.requests
        self.requests = []
        logger.info(
            "Submitted %d spare part request(s) for %s (%s)",
            len(submitted), self.equipment_id, self.equipment_name,
        )
        return submitted
