"""Admin endpoints that seed or reset the catalog from the bundled fixture."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.errors import CatalogError
from app.schemas import MessageResponse
from app.services import seed_service

logger = logging.getLogger(__name__)

admin_router = APIRouter(prefix="/api/admin", tags=["admin"])


def _failure(prefix: str, exc: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": f"{prefix}: {exc}"})


@admin_router.post("/seed", response_model=MessageResponse)
def seed_catalog(db: Session = Depends(get_db)):
    """Populate the catalog from the seed fixture."""
    try:
        seed_service.seed_database(db, get_settings().seed_data_dir)
    except CatalogError as e:
        logger.error(f"Seeding failed: {e}")
        return _failure("Failed to seed database", e, e.status_code)
    except Exception as e:
        logger.exception("Seeding failed unexpectedly")
        return _failure("Unexpected error", e)
    return MessageResponse(message="Database seeded successfully")


@admin_router.post("/reset", response_model=MessageResponse)
def reset_catalog(db: Session = Depends(get_db)):
    """Delete every plant, group and image, then seed again."""
    try:
        seed_service.reset_database(db, get_settings().seed_data_dir)
    except CatalogError as e:
        logger.error(f"Reset failed: {e}")
        return _failure("Failed to reset database", e, e.status_code)
    except Exception as e:
        logger.exception("Reset failed unexpectedly")
        return _failure("Unexpected error", e)
    return MessageResponse(message="Database reset and seeded successfully")
