"""Domain layer: spots, vehicles, selection strategies and category managers."""

from .models import (
    VehicleCategory, Vehicle, ParkingSpot, DEFAULT_SPOT_PRICES,
    ParkingAllocationError, SpotCategoryMismatchError, SpotNotFoundError,
    VehicleNotParkedError, SpotOccupiedError
)
from .strategies import (
    SpotSelectionStrategy, SpotSelectionStrategyType,
    FirstAvailableStrategy, NearestToGateStrategy
)
from .managers import CategoryManager, TwoWheelerManager, FourWheelerManager
