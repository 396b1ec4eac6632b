import logging
from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from carwash.database import SessionLocal
from carwash.database_models import Vehicle, Booking
from carwash.auth_utils import get_current_user
from carwash.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", name="dashboard")
def dashboard(request: Request):
    user = get_current_user(request)

    vehicles = []
    bookings = []
    db = SessionLocal()
    try:
        vehicles = db.query(Vehicle).filter(Vehicle.user_id == user.id).all()

        # bookings come with their service and vehicle rows already joined
        bookings = db.query(Booking).options(
            joinedload(Booking.service),
            joinedload(Booking.vehicle)
        ).filter(
            Booking.user_id == user.id
        ).order_by(Booking.booking_date.desc()).all()
    except SQLAlchemyError:
        logger.exception("Error fetching dashboard data for user %s", user.id)
    finally:
        db.close()

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "title": "Dashboard",
            "user": user,
            "vehicles": vehicles,
            "bookings": bookings,
        }
    )
