"""
Domain Models for the Parking Spot Allocator

This module contains:
1. Enums: Vehicle categories that partition spots and vehicles
2. Value Objects: Immutable vehicles
3. Entities: Parking spots with occupancy state
4. Exceptions: Errors raised when strict allocation rules are enabled

Spots and vehicles only ever interact within the same category.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from enum import Enum


# ============================================================================
# ENUMS
# ============================================================================

class VehicleCategory(Enum):
    """
    Enumeration of vehicle categories
    Each category has its own spots, manager and price
    """
    TWO = "two"      # Bikes, scooters, motorcycles
    FOUR = "four"    # Cars and vans

    @property
    def wheels(self) -> int:
        """Number of wheels for this category"""
        return 2 if self is VehicleCategory.TWO else 4

    def __str__(self) -> str:
        names = {
            VehicleCategory.TWO: "Two-Wheeler",
            VehicleCategory.FOUR: "Four-Wheeler",
        }
        return names[self]


# Flat fee per spot, by category
DEFAULT_SPOT_PRICES: Dict[VehicleCategory, int] = {
    VehicleCategory.TWO: 50,
    VehicleCategory.FOUR: 100,
}


# ============================================================================
# EXCEPTIONS
# ============================================================================

class ParkingAllocationError(Exception):
    """Base exception for allocation errors"""
    pass


class SpotCategoryMismatchError(ParkingAllocationError):
    """Exception when a spot is added to a manager of another category"""
    pass


class SpotNotFoundError(ParkingAllocationError):
    """Exception when removing a spot the manager does not hold"""
    pass


class VehicleNotParkedError(ParkingAllocationError):
    """Exception when a vehicle exits without being parked"""
    pass


class SpotOccupiedError(ParkingAllocationError):
    """Exception when occupying a spot that already holds a vehicle"""
    pass


# ============================================================================
# VALUE OBJECTS
# ============================================================================

@dataclass(frozen=True)  # Vehicles never change once constructed
class Vehicle:
    """
    Value Object: A vehicle requesting a spot
    Identified by its number; the category decides which manager serves it
    """
    number: int
    category: VehicleCategory

    def __post_init__(self):
        if not isinstance(self.category, VehicleCategory):
            object.__setattr__(self, 'category', VehicleCategory(self.category))

    def __str__(self) -> str:
        return f"Vehicle {self.number} ({self.category})"


# ============================================================================
# ENTITIES
# ============================================================================

@dataclass(eq=False)  # Spots compare by identity
class ParkingSpot:
    """
    Entity: A single parking space
    Occupancy is derived from the occupant, so a spot is occupied
    exactly when it holds a vehicle.
    """
    id: int
    category: VehicleCategory
    occupant: Optional[Vehicle] = field(default=None)

    @property
    def occupied(self) -> bool:
        return self.occupant is not None

    def price(self, price_table: Optional[Dict[VehicleCategory, int]] = None) -> int:
        """Flat fee for this spot, looked up by category"""
        table = price_table if price_table is not None else DEFAULT_SPOT_PRICES
        return table[self.category]

    def occupy(self, vehicle: Vehicle, strict: bool = False) -> None:
        """
        Park a vehicle in this spot

        An occupied spot is overwritten unless strict is set.
        Raises: SpotOccupiedError if strict and the spot is taken
        """
        if strict and self.occupied:
            raise SpotOccupiedError(
                f"Spot {self.id} is already occupied by vehicle {self.occupant.number}"
            )
        self.occupant = vehicle

    def vacate(self) -> None:
        self.occupant = None

    def is_available(self) -> bool:
        return not self.occupied

    def __str__(self) -> str:
        state = f"occupied by {self.occupant.number}" if self.occupant else "free"
        return f"Spot {self.id} [{self.category}] - {state}"
