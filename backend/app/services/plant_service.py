"""Plant CRUD with referential checks and explicit owned-collection replacement.

A plant owns two child collections: its ordered gallery (``plant_images``)
and its issues (``plant_issues``). Both are replaced wholesale on update and
removed together with the plant, always in the same transaction as the plant
row itself.
"""
import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from app.errors import DuplicateResourceError, InvalidRequestError, ResourceNotFoundError
from app.models import Issue, Plant, PlantImage
from app.models.plant import CARE_FIELDS
from app.schemas import (
    CareGuideOut, IssueOut, PlantCreate, PlantResponse, PlantSummaryResponse, PlantUpdate,
)
from app.services.image_service import image_exists
from app.services.plant_group_service import group_exists

logger = logging.getLogger(__name__)


# === Conversion ===

def to_summary_response(plant: Plant) -> PlantSummaryResponse:
    return PlantSummaryResponse(
        id=plant.id,
        name=plant.name,
        scientific_name=plant.scientific_name,
        thumbnail_id=plant.thumbnail_id,
    )


def care_from_plant(plant: Plant) -> CareGuideOut:
    return CareGuideOut(**{field: getattr(plant, f"care_{field}") for field in CARE_FIELDS})


def apply_care(plant: Plant, care) -> None:
    """Copy the six care guide fields onto the plant's care_* columns."""
    for field in CARE_FIELDS:
        setattr(plant, f"care_{field}", getattr(care, field) if care is not None else None)


def load_image_ids(db: Session, plant_id: str) -> List[str]:
    rows = (
        db.query(PlantImage.image_id)
        .filter(PlantImage.plant_id == plant_id)
        .order_by(PlantImage.display_order)
        .all()
    )
    return [row.image_id for row in rows]


def load_issues(db: Session, plant_id: str) -> List[Issue]:
    return db.query(Issue).filter(Issue.plant_id == plant_id).order_by(Issue.id).all()


def to_plant_response(db: Session, plant: Plant) -> PlantResponse:
    """Detail view: plant row plus its image ids and issues, loaded eagerly."""
    return PlantResponse(
        id=plant.id,
        group_id=plant.group_id,
        name=plant.name,
        scientific_name=plant.scientific_name,
        thumbnail_id=plant.thumbnail_id,
        image_ids=load_image_ids(db, plant.id),
        description=plant.description,
        size=plant.size,
        toxicity=plant.toxicity,
        benefits=list(plant.benefits or []),
        care=care_from_plant(plant),
        common_issues=[IssueOut(issue=i.issue, solution=i.solution) for i in load_issues(db, plant.id)],
    )


# === Owned collections ===

def replace_images(db: Session, plant_id: str, image_ids: Iterable[str]) -> None:
    db.query(PlantImage).filter(PlantImage.plant_id == plant_id).delete()
    db.add_all(
        PlantImage(plant_id=plant_id, display_order=order, image_id=image_id)
        for order, image_id in enumerate(image_ids)
    )


def replace_issues(db: Session, plant_id: str, issues: Iterable) -> None:
    db.query(Issue).filter(Issue.plant_id == plant_id).delete()
    db.add_all(Issue(plant_id=plant_id, issue=i.issue, solution=i.solution) for i in issues)


def delete_children(db: Session, plant_ids=None) -> None:
    """Remove issues and gallery rows, for the given plants or for all plants."""
    for model in (Issue, PlantImage):
        query = db.query(model)
        if plant_ids is not None:
            query = query.filter(model.plant_id.in_(list(plant_ids)))
        query.delete()


# === Validation ===

def _check_references(db: Session, data: PlantUpdate) -> None:
    if not group_exists(db, data.group_id):
        raise InvalidRequestError(f"Plant group not found: {data.group_id}")
    if not image_exists(db, data.thumbnail_id):
        raise InvalidRequestError(f"Thumbnail image not found: {data.thumbnail_id}")
    for image_id in data.image_ids:
        if not image_exists(db, image_id):
            raise InvalidRequestError(f"Image not found: {image_id}")


def _apply_fields(plant: Plant, data: PlantUpdate) -> None:
    plant.group_id = data.group_id
    plant.name = data.name
    plant.scientific_name = data.scientific_name
    plant.thumbnail_id = data.thumbnail_id
    plant.description = data.description
    plant.size = data.size
    plant.toxicity = data.toxicity
    plant.benefits = list(data.benefits)
    apply_care(plant, data.care)


def _get_or_404(db: Session, plant_id: str) -> Plant:
    plant = db.query(Plant).filter(Plant.id == plant_id).first()
    if not plant:
        raise ResourceNotFoundError(f"Plant not found: {plant_id}")
    return plant


# === Operations ===

def list_plants(db: Session) -> List[PlantSummaryResponse]:
    return [to_summary_response(p) for p in db.query(Plant).order_by(Plant.id).all()]


def list_plants_by_group(db: Session, group_id: str) -> List[PlantSummaryResponse]:
    if not group_exists(db, group_id):
        raise ResourceNotFoundError(f"Plant group not found: {group_id}")
    plants = db.query(Plant).filter(Plant.group_id == group_id).order_by(Plant.id).all()
    return [to_summary_response(p) for p in plants]


def get_plant(db: Session, plant_id: str) -> PlantResponse:
    return to_plant_response(db, _get_or_404(db, plant_id))


def create_plant(db: Session, data: PlantCreate) -> PlantResponse:
    if db.query(Plant.id).filter(Plant.id == data.id).first() is not None:
        raise DuplicateResourceError(f"Plant with ID '{data.id}' already exists")
    _check_references(db, data)

    plant = Plant(id=data.id)
    _apply_fields(plant, data)
    try:
        db.add(plant)
        db.flush()
        replace_images(db, plant.id, data.image_ids)
        replace_issues(db, plant.id, data.common_issues)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Created plant {plant.id} in group {plant.group_id}")
    return to_plant_response(db, plant)


def update_plant(db: Session, plant_id: str, data: PlantUpdate) -> PlantResponse:
    plant = _get_or_404(db, plant_id)
    _check_references(db, data)

    _apply_fields(plant, data)
    try:
        db.flush()
        replace_images(db, plant.id, data.image_ids)
        replace_issues(db, plant.id, data.common_issues)
        db.commit()
    except Exception:
        db.rollback()
        raise

    return to_plant_response(db, plant)


def delete_plant(db: Session, plant_id: str) -> None:
    """Delete a plant with its issues and gallery rows; the images themselves stay."""
    plant = _get_or_404(db, plant_id)
    try:
        delete_children(db, [plant_id])
        db.delete(plant)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Deleted plant {plant_id}")
