"""
Parking Lot Application Service

This module wires the domain together for callers that deal with a whole
lot rather than a single category:
1. One category manager per vehicle category, built from settings
2. An entry and exit gate per category
3. Routing of spots and vehicles to the manager of their category
4. Status snapshots for display
"""

from typing import Any, Dict, Iterable, List, Optional
import logging

from ..config import AllocatorSettings
from ..domain.managers import CategoryManager
from ..domain.models import ParkingSpot, Vehicle, VehicleCategory
from ..infrastructure.factories import (
    ParkingManagerFactory, SpotSelectionStrategyFactory, ParkingSpotFactory
)
from .dtos import CategoryStatusDTO, LotStatusDTO, SpotStatusDTO
from .gates import EntryGate, ExitGate


# ============================================================================
# PARKING LOT SERVICE
# ============================================================================

class ParkingLotService:
    """
    Application service for a lot with spots of every category

    Each category gets its own manager, sharing the configured
    selection strategy and strictness.
    """

    def __init__(self, settings: Optional[AllocatorSettings] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.settings = settings or AllocatorSettings()

        self.strategy = SpotSelectionStrategyFactory.create_by_type(self.settings.default_strategy)
        self._managers: Dict[VehicleCategory, CategoryManager] = {}
        self._entry_gates: Dict[VehicleCategory, EntryGate] = {}
        self._exit_gates: Dict[VehicleCategory, ExitGate] = {}

        for category in VehicleCategory:
            manager = ParkingManagerFactory.get_manager(
                category, self.strategy, strict=self.settings.strict
            )
            self._managers[category] = manager
            self._entry_gates[category] = EntryGate(manager)
            self._exit_gates[category] = ExitGate(manager)

        self.logger.info(f"ParkingLotService initialized with {self.strategy}")

    def manager_for(self, category: VehicleCategory) -> CategoryManager:
        return self._managers[category]

    def entry_gate(self, category: VehicleCategory) -> EntryGate:
        return self._entry_gates[category]

    def exit_gate(self, category: VehicleCategory) -> ExitGate:
        return self._exit_gates[category]

    # ------------------------------------------------------------------
    # Spots
    # ------------------------------------------------------------------

    def add_spot(self, spot: ParkingSpot) -> bool:
        """Add a spot to the manager of its category"""
        return self._managers[spot.category].add_spot(spot)

    def add_spots(self, category: VehicleCategory, spot_ids: Iterable[int]) -> List[ParkingSpot]:
        """
        Create and add spots for a category
        Returns: The created spots, in id order given
        """
        spots = ParkingSpotFactory.create_many(category, spot_ids)
        for spot in spots:
            self.add_spot(spot)
        return spots

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    def park(self, vehicle: Vehicle) -> bool:
        """Send a vehicle through the entry gate of its category"""
        return self._entry_gates[vehicle.category].allow_entry(vehicle)

    def release(self, vehicle: Vehicle) -> None:
        """Send a vehicle through the exit gate of its category"""
        self._exit_gates[vehicle.category].allow_exit(vehicle)

    def locate(self, vehicle: Vehicle) -> Optional[ParkingSpot]:
        return self._managers[vehicle.category].locate(vehicle)

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def spot_status(self, spot: ParkingSpot) -> SpotStatusDTO:
        return SpotStatusDTO(
            id=spot.id,
            category=spot.category,
            occupied=spot.occupied,
            vehicle_number=spot.occupant.number if spot.occupant else None,
            price=spot.price(self.settings.spot_prices),
        )

    def status(self) -> LotStatusDTO:
        """Snapshot of every category and spot"""
        categories = []
        for category, manager in self._managers.items():
            categories.append(CategoryStatusDTO(
                category=category,
                strategy=manager.strategy.get_strategy_name(),
                total_spots=len(manager),
                available_spots=len(manager.available_spots()),
                spots=[self.spot_status(spot) for spot in manager.spots],
            ))
        return LotStatusDTO(categories=categories)


# ============================================================================
# SERVICE FACTORY
# ============================================================================

class ParkingServiceFactory:
    """Factory for creating parking lot service instances"""

    @staticmethod
    def create_default_service() -> ParkingLotService:
        return ParkingLotService()

    @staticmethod
    def create_service_with_config(config: Dict[str, Any]) -> ParkingLotService:
        """Create a service from a settings dictionary"""
        return ParkingLotService(AllocatorSettings.from_dict(config))
