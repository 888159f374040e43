"""
Entry and Exit Gates

Gates are the interaction points used by callers. They hold no state of
their own and forward every request to a category manager.
"""

import logging

from ..domain.managers import CategoryManager
from ..domain.models import Vehicle


class EntryGate:
    """Admits vehicles by asking the manager for a spot"""

    def __init__(self, manager: CategoryManager):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.manager = manager

    def allow_entry(self, vehicle: Vehicle) -> bool:
        """
        Request a spot for the vehicle
        Returns: True if the vehicle was parked, False if it was turned away
        """
        self.logger.debug(f"Entry requested for {vehicle}")
        return self.manager.add_vehicle(vehicle)


class ExitGate:
    """Releases the spot held by a leaving vehicle"""

    def __init__(self, manager: CategoryManager):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.manager = manager

    def allow_exit(self, vehicle: Vehicle) -> None:
        self.logger.debug(f"Exit requested for {vehicle}")
        self.manager.remove_vehicle(vehicle)
