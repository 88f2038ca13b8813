"""All SQLAlchemy models – re-exported for Alembic and app use."""

from app.models.image import Image
from app.models.plant_group import PlantGroup
from app.models.plant import Plant, PlantImage, Issue

__all__ = [
    "Image",
    "PlantGroup",
    "Plant", "PlantImage", "Issue",
]
