"""
Demonstration entry point for the Parking Spot Allocator

Builds a two-wheeler manager with two spots, admits one vehicle and lets
it leave again.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .application.gates import EntryGate, ExitGate
from .config import AllocatorSettings, load_settings
from .domain.models import ParkingSpot, Vehicle, VehicleCategory
from .infrastructure.factories import ParkingManagerFactory, SpotSelectionStrategyFactory


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Setup application logging configuration"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True
    )
    return logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parking spot allocation demo")
    parser.add_argument("--config", help="Path to a JSON settings file")
    parser.add_argument("--log-level", help="Logging level (overrides the settings file)")
    return parser.parse_args(argv)


def run_demo(settings: AllocatorSettings) -> None:
    """Park vehicle 101 in a two-spot two-wheeler lot, then let it out"""
    strategy = SpotSelectionStrategyFactory.create_by_type(settings.default_strategy)
    two_manager = ParkingManagerFactory.get_manager(
        VehicleCategory.TWO, strategy, strict=settings.strict
    )

    two_manager.add_spot(ParkingSpot(1, VehicleCategory.TWO))
    two_manager.add_spot(ParkingSpot(2, VehicleCategory.TWO))

    entry = EntryGate(two_manager)
    exit_gate = ExitGate(two_manager)

    vehicle = Vehicle(101, VehicleCategory.TWO)

    print(f"Vehicle entering: {entry.allow_entry(vehicle)}")
    exit_gate.allow_exit(vehicle)
    print("Vehicle exited!")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.config) if args.config else AllocatorSettings()
        logger = setup_logging(args.log_level.upper() if args.log_level else settings.log_level)
        logger.info(f"Starting demo with {settings.default_strategy.value} strategy")
        run_demo(settings)
    except Exception as e:
        print(f"Fatal error: {str(e)}", file=sys.stderr)
        logging.error(f"Fatal error in main: {str(e)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
