import logging
from typing import Optional
from fastapi import APIRouter, Request, Form
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import RedirectResponse
from starlette import status

from carwash.database import SessionLocal
from carwash.database_models import Vehicle
from carwash.auth_utils import get_current_user
from carwash.models.vehicle import VehicleCreate, VehicleType
from carwash.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def render_vehicle_form(request: Request, user, vehicle: dict, error: Optional[str] = None):
    return templates.TemplateResponse(
        request,
        "vehicles/new.html",
        {
            "title": "Add New Vehicle",
            "user": user,
            "vehicle": vehicle,
            "vehicle_types": [t.value for t in VehicleType],
            "error": error,
        }
    )


@router.get("/new", name="new_vehicle_form")
def new_vehicle_form(request: Request):
    user = get_current_user(request)

    empty_vehicle = {"brand": "", "model": "", "plate_number": "", "vehicle_type": ""}
    return render_vehicle_form(request, user, empty_vehicle)


@router.post("", name="create_vehicle")
def create_vehicle(
    request: Request,
    brand: str = Form(""),
    model: str = Form(""),
    plate_number: str = Form(""),
    vehicle_type: str = Form(""),
):
    user = get_current_user(request)

    # Echoed back to the form when something goes wrong
    form_data = {
        "brand": brand, "model": model,
        "plate_number": plate_number, "vehicle_type": vehicle_type
    }

    try:
        payload = VehicleCreate(
            user_id=user.id,
            brand=brand.strip(),
            model=model.strip(),
            plate_number=plate_number,
            vehicle_type=vehicle_type,
        )
    except ValidationError:
        return render_vehicle_form(request, user, form_data, error="Please fill in all fields")

    db = SessionLocal()
    try:
        # --- DUPLICATE PLATE CHECK ---
        existing_vehicle = db.query(Vehicle).filter(Vehicle.plate_number == payload.plate_number).first()
        if existing_vehicle:
            return render_vehicle_form(
                request, user, form_data,
                error=f"Plate '{payload.plate_number}' is already registered."
            )

        new_vehicle = Vehicle(**payload.model_dump(exclude={"vehicle_type"}), vehicle_type=payload.vehicle_type.value)
        db.add(new_vehicle)
        db.commit()
        logger.info("Vehicle %s added for user %s", payload.plate_number, user.id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding vehicle for user %s", user.id)
        return render_vehicle_form(request, user, form_data, error="Failed to add vehicle. Please try again.")
    finally:
        db.close()

    return RedirectResponse(
        url=request.url_for("dashboard"),
        status_code=status.HTTP_303_SEE_OTHER
    )
