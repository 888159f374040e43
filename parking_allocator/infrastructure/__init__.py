from .factories import ParkingManagerFactory, SpotSelectionStrategyFactory, ParkingSpotFactory
