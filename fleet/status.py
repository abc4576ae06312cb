"""Status enum for maintenance urgency levels."""

from enum import Enum


class Status(Enum):
    """Due classification of a rule for a truck."""

    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    UPCOMING = "upcoming"

    @property
    def rank(self) -> int:
        """Sort rank, lower = more urgent."""
        return _RANKS[self]


_RANKS = {
    Status.OVERDUE: 0,
    Status.DUE_SOON: 1,
    Status.UPCOMING: 2,
}
