"""Status enum for equipment maintenance urgency levels."""

from enum import Enum


class Status(Enum):
    """Maintenance status categories. Lower value = more urgent."""

    OVERDUE = 1
    DUE = 2  # Within the due-soon window (0..7 days)
    GOOD = 3

    @property
    def token(self) -> str:
        """Serialized form: 'overdue', 'due' or 'good'."""
        return self.name.lower()

    @classmethod
    def from_token(cls, token: str) -> "Status":
        """Parse a status token, case-insensitive."""
        try:
            return cls[token.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown status token: {token!r}") from None
