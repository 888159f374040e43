from .gates import EntryGate, ExitGate
from .parking_service import ParkingLotService, ParkingServiceFactory
