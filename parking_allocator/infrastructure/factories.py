"""
Factory Pattern Implementation for the Parking Spot Allocator

This module centralises object creation:
1. ParkingManagerFactory - Category manager for a vehicle category
2. SpotSelectionStrategyFactory - Selection strategy by type name
3. ParkingSpotFactory - Spots of a given category
"""

from typing import Dict, Iterable, List, Type, Union
import logging

from ..domain.models import ParkingSpot, VehicleCategory
from ..domain.strategies import (
    SpotSelectionStrategy, SpotSelectionStrategyType,
    FirstAvailableStrategy, NearestToGateStrategy
)
from ..domain.managers import CategoryManager, TwoWheelerManager, FourWheelerManager


logger = logging.getLogger(__name__)


class ParkingManagerFactory:
    """Factory for creating category managers"""

    _manager_map: Dict[VehicleCategory, Type[CategoryManager]] = {
        VehicleCategory.TWO: TwoWheelerManager,
        VehicleCategory.FOUR: FourWheelerManager,
    }

    @classmethod
    def get_manager(
        cls,
        category: VehicleCategory,
        strategy: SpotSelectionStrategy,
        strict: bool = False
    ) -> CategoryManager:
        """
        Create an empty manager for the category

        Args:
            category: Vehicle category the manager serves
            strategy: Spot selection strategy
            strict: Raise on invalid operations instead of ignoring them
        """
        if not isinstance(category, VehicleCategory):
            category = VehicleCategory(category)

        manager_class = cls._manager_map[category]
        logger.debug(f"Creating {manager_class.__name__} with {strategy}")
        return manager_class(strategy, strict=strict)


class SpotSelectionStrategyFactory:
    """Factory for creating SpotSelectionStrategy instances"""

    _strategy_map: Dict[SpotSelectionStrategyType, Type[SpotSelectionStrategy]] = {
        SpotSelectionStrategyType.FIRST_AVAILABLE: FirstAvailableStrategy,
        SpotSelectionStrategyType.NEAREST_TO_GATE: NearestToGateStrategy,
    }

    @classmethod
    def create(cls) -> SpotSelectionStrategy:
        """Create the default strategy"""
        return NearestToGateStrategy()

    @classmethod
    def create_by_type(
        cls,
        strategy_type: Union[str, SpotSelectionStrategyType]
    ) -> SpotSelectionStrategy:
        """
        Create strategy by type
        Raises: ValueError for unknown strategy names
        """
        # Convert string to enum if needed
        if not isinstance(strategy_type, SpotSelectionStrategyType):
            try:
                strategy_type = SpotSelectionStrategyType(strategy_type)
            except ValueError:
                raise ValueError(f"Unknown spot selection strategy type: {strategy_type}") from None

        return cls._strategy_map[strategy_type]()

    @classmethod
    def available_types(cls) -> List[str]:
        return [strategy_type.value for strategy_type in cls._strategy_map]


class ParkingSpotFactory:
    """Factory for creating ParkingSpot entities"""

    @staticmethod
    def create(spot_id: int, category: VehicleCategory) -> ParkingSpot:
        if not isinstance(category, VehicleCategory):
            category = VehicleCategory(category)
        return ParkingSpot(id=spot_id, category=category)

    @staticmethod
    def create_many(category: VehicleCategory, spot_ids: Iterable[int]) -> List[ParkingSpot]:
        """Create one spot per id, in the given order"""
        return [ParkingSpotFactory.create(spot_id, category) for spot_id in spot_ids]
