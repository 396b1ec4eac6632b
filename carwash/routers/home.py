from fastapi import APIRouter, Request

from carwash.auth_utils import get_optional_user
from carwash.models.service import DEFAULT_SERVICES
from carwash.templating import templates

router = APIRouter(tags=["home"])

FEATURES = [
    ("Quality Guarantee", "We ensure the highest quality service for your vehicle"),
    ("Quick Service", "Fast and efficient service without compromising quality"),
    ("All Car Types", "We service all types of vehicles"),
    ("Premium Products", "Using only the best car care products"),
]


@router.get("/", name="home")
def home(request: Request):
    """Landing page. Reads nothing from the data store."""
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "title": "Home",
            "user": get_optional_user(request),
            "features": FEATURES,
            "packages": DEFAULT_SERVICES,
        }
    )
