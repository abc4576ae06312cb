"""Truck class for vehicle identification and state."""

from enum import Enum
from typing import Optional, Union


class TruckStatus(Enum):
    AVAILABLE = "available"
    IN_USE = "in_use"
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"


class Truck:
    """A fleet truck. Only mileage, identity and lifecycle are evaluated."""

    def __init__(
        self,
        id: str,
        plate_number: str,
        brand: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        mileage: Optional[float] = 0,
        status: Union[TruckStatus, str] = TruckStatus.AVAILABLE,
    ):
        self.id = id
        self.plate_number = plate_number.strip().upper()
        self.brand = brand
        self.model = model
        self.year = year
        self.mileage = mileage or 0
        self.status = TruckStatus(status or TruckStatus.AVAILABLE)

        if self.mileage < 0:
            raise ValueError(f"Truck {id!r}: mileage cannot be negative")

    def __repr__(self) -> str:
        return f"Truck({self.id!r}, {self.plate_number!r})"

    @property
    def name(self) -> str:
        """Human-readable truck name."""
        parts = [str(p) for p in (self.year, self.brand, self.model) if p]
        return " ".join(parts) if parts else self.plate_number

    @property
    def is_inactive(self) -> bool:
        return self.status == TruckStatus.INACTIVE
