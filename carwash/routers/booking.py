import logging
from datetime import date
from typing import Dict, Optional, Tuple, List
from fastapi import APIRouter, Request, Form
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import RedirectResponse
from starlette import status

from carwash.database import SessionLocal
from carwash.database_models import Vehicle, Service, Booking
from carwash.auth_utils import get_current_user
from carwash.models.booking import BookingCreate, TIME_SLOTS, min_booking_date
from carwash.models.user import SessionUser
from carwash.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/booking", tags=["booking"])

MISSING_FIELDS_MESSAGE = "Please fill in all fields"
FAILURE_MESSAGE = "Failed to create booking. Please try again."
VEHICLE_MESSAGE = "Please choose one of your vehicles."
SERVICE_MESSAGE = "Please choose an available service."

# Messages for fields rejected by BookingCreate
FIELD_MESSAGES = {
    "booking_date": "Please choose a date from tomorrow onwards.",
    "booking_time": "Please choose one of the available time slots.",
    "vehicle_id": VEHICLE_MESSAGE,
    "service_id": SERVICE_MESSAGE,
}


def load_form_data(user_id: int) -> Tuple[List[Vehicle], List[Service]]:
    """Fetch the user's vehicles and the service catalogue."""
    vehicles: List[Vehicle] = []
    services: List[Service] = []
    db = SessionLocal()
    try:
        vehicles = db.query(Vehicle).filter(Vehicle.user_id == user_id).all()
        services = db.query(Service).order_by(Service.price).all()
    except SQLAlchemyError:
        logger.exception("Error fetching booking form data for user %s", user_id)
    finally:
        db.close()
    return vehicles, services


def render_form(
    request: Request,
    user: SessionUser,
    selected: Dict[str, str],
    error: Optional[str] = None,
    form_data: Optional[Tuple[List[Vehicle], List[Service]]] = None,
):
    vehicles, services = form_data if form_data is not None else load_form_data(user.id)
    return templates.TemplateResponse(
        request,
        "booking.html",
        {
            "title": "Book a Service",
            "user": user,
            "vehicles": vehicles,
            "services": services,
            "time_slots": TIME_SLOTS,
            "min_date": min_booking_date().isoformat(),
            "selected": selected,
            "error": error,
        }
    )


@router.get("", name="booking_form")
def booking_form(request: Request):
    user = get_current_user(request)
    return render_form(request, user, selected={})


@router.post("", name="create_booking")
def create_booking(
    request: Request,
    vehicle_id: Optional[str] = Form(None),
    service_id: Optional[str] = Form(None),
    booking_date: Optional[str] = Form(None),
    booking_time: Optional[str] = Form(None),
):
    user = get_current_user(request)

    selected = {
        "vehicle_id": (vehicle_id or "").strip(),
        "service_id": (service_id or "").strip(),
        "booking_date": (booking_date or "").strip(),
        "booking_time": (booking_time or "").strip(),
    }
    # reused by every re-render below
    form_data = load_form_data(user.id)

    # --- REQUIRED FIELDS ---
    if not all(selected.values()):
        return render_form(request, user, selected, error=MISSING_FIELDS_MESSAGE, form_data=form_data)

    try:
        day = date.fromisoformat(selected["booking_date"])
    except ValueError:
        return render_form(request, user, selected, error=FIELD_MESSAGES["booking_date"], form_data=form_data)

    try:
        payload = BookingCreate(
            user_id=user.id,
            vehicle_id=selected["vehicle_id"],
            service_id=selected["service_id"],
            booking_date=day,
            booking_time=selected["booking_time"],
        )
    except ValidationError as e:
        field = e.errors()[0]["loc"][0]
        logger.warning("Rejected booking form from user %s: invalid %s", user.id, field)
        return render_form(request, user, selected, error=FIELD_MESSAGES.get(field, FAILURE_MESSAGE), form_data=form_data)

    db = SessionLocal()
    try:
        # --- OWNERSHIP / EXISTENCE ---
        vehicle = db.query(Vehicle).filter(
            Vehicle.id == payload.vehicle_id,
            Vehicle.user_id == user.id
        ).first()
        if not vehicle:
            return render_form(request, user, selected, error=VEHICLE_MESSAGE, form_data=form_data)

        service = db.query(Service).filter(Service.id == payload.service_id).first()
        if not service:
            return render_form(request, user, selected, error=SERVICE_MESSAGE, form_data=form_data)

        new_booking = Booking(**payload.model_dump(exclude={"status"}), status=payload.status.value)
        db.add(new_booking)
        db.commit()
        logger.info(
            "Booking created for user %s: %s on %s at %s",
            user.id, service.name, payload.booking_date, payload.booking_time
        )
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating booking for user %s", user.id)
        return render_form(request, user, selected, error=FAILURE_MESSAGE, form_data=form_data)
    finally:
        db.close()

    return RedirectResponse(
        url=request.url_for("dashboard"),
        status_code=status.HTTP_303_SEE_OTHER
    )
