"""
Category Managers for the Parking Spot Allocator

A category manager owns every spot of one vehicle category and
orchestrates assignment and release:
1. Spot bookkeeping - only spots of the manager's category are accepted
2. Vehicle entry - the selection strategy picks a free spot to occupy
3. Vehicle exit - the spot holding the vehicle's number is vacated

Invalid operations are silent no-ops unless the manager is strict,
in which case they raise ParkingAllocationError subclasses.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import logging

from .models import (
    ParkingSpot, Vehicle, VehicleCategory,
    SpotCategoryMismatchError, SpotNotFoundError, VehicleNotParkedError
)
from .strategies import SpotSelectionStrategy


class CategoryManager(ABC):
    """
    Base manager for the spots of a single category
    Subclasses fix the category they accept.
    """

    def __init__(self, strategy: SpotSelectionStrategy, strict: bool = False):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.strategy = strategy
        self.strict = strict
        self._spots: List[ParkingSpot] = []

    @property
    @abstractmethod
    def category(self) -> VehicleCategory:
        """Category of spots and vehicles this manager serves"""
        pass

    @property
    def spots(self) -> Tuple[ParkingSpot, ...]:
        return tuple(self._spots)

    def __len__(self) -> int:
        return len(self._spots)

    # ------------------------------------------------------------------
    # Spot bookkeeping
    # ------------------------------------------------------------------

    def add_spot(self, spot: ParkingSpot) -> bool:
        """
        Append a spot if it belongs to this manager's category
        Returns: True if added, False if ignored
        Raises: SpotCategoryMismatchError if strict and the category differs
        """
        if spot.category != self.category:
            message = f"Spot {spot.id} is {spot.category}, manager accepts {self.category}"
            if self.strict:
                raise SpotCategoryMismatchError(message)
            self.logger.warning(f"Ignoring spot: {message}")
            return False

        self._spots.append(spot)
        self.logger.debug(f"Added spot {spot.id} ({len(self._spots)} total)")
        return True

    def remove_spot(self, spot: ParkingSpot) -> bool:
        """
        Remove the given spot object
        Returns: True if removed, False if the manager does not hold it
        Raises: SpotNotFoundError if strict and the spot is absent
        """
        for index, held in enumerate(self._spots):
            if held is spot:
                del self._spots[index]
                self.logger.debug(f"Removed spot {spot.id}")
                return True

        if self.strict:
            raise SpotNotFoundError(f"Spot {spot.id} is not managed by {self.__class__.__name__}")
        self.logger.debug(f"Spot {spot.id} not managed here, nothing removed")
        return False

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def find(self, vehicle: Vehicle) -> Optional[ParkingSpot]:
        return self.strategy.find(self.spots, vehicle)

    def add_vehicle(self, vehicle: Vehicle) -> bool:
        """
        Park a vehicle in the spot chosen by the strategy
        Returns: True if parked, False if no spot is free
        """
        spot = self.find(vehicle)
        if spot is None:
            self.logger.info(f"No free {self.category} spot for vehicle {vehicle.number}")
            return False

        spot.occupy(vehicle, strict=self.strict)
        self.logger.info(f"Vehicle {vehicle.number} parked in spot {spot.id}")
        return True

    def remove_vehicle(self, vehicle: Vehicle) -> Optional[ParkingSpot]:
        """
        Vacate the first spot held by a vehicle with the same number
        Returns: The vacated spot, or None if the vehicle was not parked
        Raises: VehicleNotParkedError if strict and the vehicle was not parked
        """
        spot = self.locate(vehicle)
        if spot is None:
            if self.strict:
                raise VehicleNotParkedError(f"Vehicle {vehicle.number} is not parked")
            self.logger.warning(f"Vehicle {vehicle.number} is not parked, exit ignored")
            return None

        spot.vacate()
        self.logger.info(f"Vehicle {vehicle.number} left spot {spot.id}")
        return spot

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def locate(self, vehicle: Vehicle) -> Optional[ParkingSpot]:
        """Spot currently holding a vehicle with this number"""
        for spot in self._spots:
            if spot.occupied and spot.occupant.number == vehicle.number:
                return spot
        return None

    def available_spots(self) -> List[ParkingSpot]:
        return [spot for spot in self._spots if spot.is_available()]

    def occupied_spots(self) -> List[ParkingSpot]:
        return [spot for spot in self._spots if spot.occupied]

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({len(self.available_spots())}/{len(self._spots)} free, "
            f"{self.strategy})"
        )


class TwoWheelerManager(CategoryManager):
    """Manager for two-wheeler spots"""

    category = VehicleCategory.TWO


class FourWheelerManager(CategoryManager):
    """Manager for four-wheeler spots"""

    category = VehicleCategory.FOUR
