from typing import List
from pydantic import BaseModel, Field


class ServiceCatalogItem(BaseModel):
    """
    A car-wash offering as shown on the landing page and seeded into 'services'.
    """
    name: str = Field(..., description="Display name of the service.")
    description: str = Field(..., description="What the wash includes.")
    price: int = Field(..., ge=0, description="Price in rupiah.")
    duration_minutes: int = Field(..., gt=0, description="Expected duration.")
    featured: bool = Field(False, description="Highlighted on the pricing section.")


DEFAULT_SERVICES: List[ServiceCatalogItem] = [
    ServiceCatalogItem(
        name="Basic Wash",
        description="Exterior wash with hand dry",
        price=50000,
        duration_minutes=30,
    ),
    ServiceCatalogItem(
        name="Premium Wash",
        description="Exterior wash, interior vacuum, and dashboard cleaning",
        price=100000,
        duration_minutes=60,
        featured=True,
    ),
    ServiceCatalogItem(
        name="Deluxe Package",
        description="Complete interior and exterior detailing",
        price=200000,
        duration_minutes=120,
    ),
]
