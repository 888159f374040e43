"""
Data Transfer Objects (DTOs) for the Parking Spot Allocator

Output DTOs that expose a read-only snapshot of the lot to callers.
DTOs carry data only; they are built from domain objects and never
mutate them.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import VehicleCategory


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_dict(self, exclude_none: bool = False, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        data = self.model_dump(**kwargs)
        if exclude_none:
            data = {k: v for k, v in data.items() if v is not None}
        return data

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_json(cls, json_str: str) -> 'BaseDTO':
        """Create DTO from JSON string"""
        data = json.loads(json_str)
        return cls(**data)


# ============================================================================
# STATUS DTOs
# ============================================================================

class SpotStatusDTO(BaseDTO):
    """Snapshot of a single spot"""
    id: int
    category: VehicleCategory
    occupied: bool
    vehicle_number: Optional[int] = Field(default=None, description="Number of the parked vehicle")
    price: int = Field(gt=0)


class CategoryStatusDTO(BaseDTO):
    """Snapshot of one category manager"""
    category: VehicleCategory
    strategy: str
    total_spots: int = Field(ge=0)
    available_spots: int = Field(ge=0)
    spots: List[SpotStatusDTO] = Field(default_factory=list)

    @property
    def occupied_spots(self) -> int:
        return self.total_spots - self.available_spots


class LotStatusDTO(BaseDTO):
    """Snapshot of the whole lot"""
    categories: List[CategoryStatusDTO] = Field(default_factory=list)

    @property
    def total_spots(self) -> int:
        return sum(category.total_spots for category in self.categories)

    @property
    def available_spots(self) -> int:
        return sum(category.available_spots for category in self.categories)
