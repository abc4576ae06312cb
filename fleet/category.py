"""Maintenance categories shared by rules and records."""

from enum import Enum


class Category(Enum):
    """
    Kind of maintenance work.

    Rules use the first six values. Records may also carry the legacy
    record types (tire_change, service, repair), which no rule matches.
    """

    OIL_CHANGE = "oil_change"
    TIRE_ROTATION = "tire_rotation"
    BRAKE_INSPECTION = "brake_inspection"
    FILTER_REPLACEMENT = "filter_replacement"
    GENERAL_SERVICE = "general_service"
    OTHER = "other"
    TIRE_CHANGE = "tire_change"
    SERVICE = "service"
    REPAIR = "repair"

    @property
    def is_rule_category(self) -> bool:
        return self in RULE_CATEGORIES


RULE_CATEGORIES = frozenset(
    {
        Category.OIL_CHANGE,
        Category.TIRE_ROTATION,
        Category.BRAKE_INSPECTION,
        Category.FILTER_REPLACEMENT,
        Category.GENERAL_SERVICE,
        Category.OTHER,
    }
)
