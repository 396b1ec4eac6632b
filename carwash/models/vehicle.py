from enum import Enum
from pydantic import BaseModel, Field, field_validator

# Largest id the store's INTEGER column can hold
MAX_ID = 2**63 - 1


class VehicleType(str, Enum):
    SEDAN = "Sedan"
    HATCHBACK = "Hatchback"
    SUV = "SUV"
    MPV = "MPV"
    PICKUP = "Pickup"


class VehicleCreate(BaseModel):

    user_id: int = Field(..., gt=0, le=MAX_ID)
    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    plate_number: str = Field(..., min_length=1, max_length=20)
    vehicle_type: VehicleType

    @field_validator("plate_number", mode="before")
    @classmethod
    def normalise_plate(cls, value):
        # plates are stored upper-case with surrounding spaces removed
        if isinstance(value, str):
            return value.upper().strip()
        return value
