from datetime import date, timedelta
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from carwash.models.vehicle import MAX_ID

# ----------------------------------------------------
# 1. BOOKING STATUS
# New bookings always start as PENDING.
# ----------------------------------------------------
class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Slots offered by the booking form, on the hour
TIME_SLOTS = [f"{hour:02d}:00" for hour in range(9, 18)]


def min_booking_date(today: Optional[date] = None) -> date:
    """Earliest selectable date: tomorrow."""
    return (today or date.today()) + timedelta(days=1)


# ----------------------------------------------------
# 2. INSERT PAYLOAD for the bookings table
# ----------------------------------------------------
class BookingCreate(BaseModel):
    """
    One row to insert into 'bookings'.
    Ownership of the vehicle is checked by the caller, not here.
    """
    user_id: int = Field(..., gt=0, le=MAX_ID, description="Owner of the booking.")
    vehicle_id: int = Field(..., gt=0, le=MAX_ID, description="Vehicle to be washed.")
    service_id: int = Field(..., gt=0, le=MAX_ID, description="Service from the catalogue.")

    booking_date: date = Field(..., description="Day of the appointment (YYYY-MM-DD).")
    booking_time: str = Field(..., description="Start time, one of TIME_SLOTS.")

    status: BookingStatus = Field(BookingStatus.PENDING, description="Always pending on creation.")

    @field_validator("booking_time")
    @classmethod
    def check_time_slot(cls, value: str) -> str:
        if value not in TIME_SLOTS:
            raise ValueError(f"Unavailable time slot: {value}")
        return value

    @field_validator("booking_date")
    @classmethod
    def check_not_before_tomorrow(cls, value: date) -> date:
        if value < min_booking_date():
            raise ValueError("Bookings can only be made from tomorrow onwards")
        return value
