"""
Strategy Pattern Implementation for Spot Selection

This module encapsulates the algorithms a category manager uses to pick
a free spot for an arriving vehicle. Strategies are stateless and can be
swapped at runtime.

Key Strategies:
1. FirstAvailableStrategy - First free spot in the manager's order
2. NearestToGateStrategy - Free spot with the lowest id (closest to the gate)
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
import logging
from enum import Enum

from .models import ParkingSpot, Vehicle


class SpotSelectionStrategyType(Enum):
    """Names of the built-in selection strategies"""
    FIRST_AVAILABLE = "first_available"
    NEAREST_TO_GATE = "nearest_to_gate"


# ============================================================================
# STRATEGY INTERFACE
# ============================================================================

class SpotSelectionStrategy(ABC):
    """
    Abstract base class for spot selection strategies
    Implementations must not mutate the spots they are given
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def find(
        self,
        spots: Sequence[ParkingSpot],
        vehicle: Vehicle
    ) -> Optional[ParkingSpot]:
        """
        Choose a free spot for the vehicle
        Returns: ParkingSpot if one is available, None otherwise
        """
        pass

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("Strategy", "")

    def __str__(self) -> str:
        return f"{self.get_strategy_name()} Strategy"


# ============================================================================
# SELECTION STRATEGIES
# ============================================================================

class FirstAvailableStrategy(SpotSelectionStrategy):
    """
    Strategy: First available spot
    - Scans spots in the order the manager holds them
    """

    def find(
        self,
        spots: Sequence[ParkingSpot],
        vehicle: Vehicle
    ) -> Optional[ParkingSpot]:
        for spot in spots:
            if spot.is_available():
                self.logger.debug(f"Selected spot {spot.id} for vehicle {vehicle.number}")
                return spot

        self.logger.debug(f"No free spot among {len(spots)} for vehicle {vehicle.number}")
        return None


class NearestToGateStrategy(SpotSelectionStrategy):
    """
    Strategy: Nearest spot to the gate
    - Spot ids grow with distance from the gate, so the lowest free id wins
    - Equal ids resolve to the earliest spot in sequence
    """

    def find(
        self,
        spots: Sequence[ParkingSpot],
        vehicle: Vehicle
    ) -> Optional[ParkingSpot]:
        available_spots = [spot for spot in spots if spot.is_available()]

        if not available_spots:
            self.logger.debug(f"No free spot among {len(spots)} for vehicle {vehicle.number}")
            return None

        nearest = min(available_spots, key=lambda spot: spot.id)
        self.logger.debug(f"Selected spot {nearest.id} for vehicle {vehicle.number}")
        return nearest
