"""Plant group CRUD with image reference checks."""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.errors import DuplicateResourceError, ResourceNotFoundError
from app.models import PlantGroup
from app.schemas import PlantGroupCreate, PlantGroupResponse, PlantGroupUpdate
from app.services.image_service import image_exists

logger = logging.getLogger(__name__)


def to_group_response(group: PlantGroup) -> PlantGroupResponse:
    return PlantGroupResponse(id=group.id, name=group.name, image_id=group.image_id)


def group_exists(db: Session, group_id: str) -> bool:
    return db.query(PlantGroup.id).filter(PlantGroup.id == group_id).first() is not None


def _resolve_image_id(db: Session, image_id: Optional[str]) -> Optional[str]:
    """Return the image id to store, None for a blank one."""
    if image_id is None or not image_id.strip():
        return None
    if not image_exists(db, image_id):
        raise ResourceNotFoundError(f"Image not found with id: {image_id}")
    return image_id


def _get_or_404(db: Session, group_id: str) -> PlantGroup:
    group = db.query(PlantGroup).filter(PlantGroup.id == group_id).first()
    if not group:
        raise ResourceNotFoundError(f"Plant group not found with id: {group_id}")
    return group


def list_groups(db: Session) -> List[PlantGroupResponse]:
    return [to_group_response(g) for g in db.query(PlantGroup).order_by(PlantGroup.id).all()]


def get_group(db: Session, group_id: str) -> PlantGroupResponse:
    return to_group_response(_get_or_404(db, group_id))


def create_group(db: Session, data: PlantGroupCreate) -> PlantGroupResponse:
    if group_exists(db, data.id):
        raise DuplicateResourceError(f"Plant group with id '{data.id}' already exists")

    group = PlantGroup(id=data.id, name=data.name, image_id=_resolve_image_id(db, data.image_id))
    try:
        db.add(group)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Created plant group {group.id}")
    return to_group_response(group)


def update_group(db: Session, group_id: str, data: PlantGroupUpdate) -> PlantGroupResponse:
    group = _get_or_404(db, group_id)
    image_id = _resolve_image_id(db, data.image_id)

    group.name = data.name
    group.image_id = image_id
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    return to_group_response(group)


def delete_group(db: Session, group_id: str) -> None:
    """Delete a group. Fails with an integrity error while plants still belong to it."""
    group = _get_or_404(db, group_id)
    try:
        db.delete(group)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Deleted plant group {group_id}")
