"""Shared Jinja2 environment and display filters."""

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

from carwash.models.booking import BookingStatus

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def format_rupiah(amount) -> str:
    """Format a price as 'Rp 50.000'."""
    if amount is None:
        return "-"
    return "Rp " + f"{amount:,.0f}".replace(",", ".")


def format_booking_date(value: Optional[date]) -> str:
    """Format a booking date as M/D/YYYY."""
    if value is None:
        return "-"
    return f"{value.month}/{value.day}/{value.year}"


def status_label(status: str) -> str:
    """Capitalise a booking status for display."""
    if not status:
        return ""
    return status[0].upper() + status[1:]


def status_badge_color(status: str) -> str:
    """Get Tailwind color classes for a booking status badge."""
    colors = {
        BookingStatus.COMPLETED.value: "bg-green-100 text-green-800",
        BookingStatus.PENDING.value: "bg-yellow-100 text-yellow-800",
    }
    return colors.get(status, "bg-gray-100 text-gray-800")


templates.env.filters["rupiah"] = format_rupiah
templates.env.filters["booking_date"] = format_booking_date
templates.env.filters["status_label"] = status_label
templates.env.filters["status_badge_color"] = status_badge_color
