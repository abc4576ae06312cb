"""Priority enum for maintenance rules."""

from enum import Enum


class Priority(Enum):
    """Rule priority. Used as the secondary sort key for alerts."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, lower = more important."""
        return _RANKS[self]


_RANKS = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}
