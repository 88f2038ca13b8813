"""Image upload, lookup and deletion."""
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, undefer

from app.errors import InvalidRequestError, ResourceNotFoundError
from app.models import Image
from app.schemas import ImageResponse

logger = logging.getLogger(__name__)


def to_image_response(image: Image) -> ImageResponse:
    return ImageResponse(
        id=image.id,
        filename=image.filename,
        content_type=image.content_type,
        created_date=image.created_date,
    )


def validate_image_file(payload: bytes, content_type: Optional[str]) -> None:
    if not payload:
        raise InvalidRequestError("Image file cannot be empty")
    if not content_type or not content_type.startswith("image/"):
        raise InvalidRequestError("File must be an image (content type: image/*)")


def new_image(filename: str, content_type: str, payload: bytes) -> Image:
    """Build an unsaved image row with a fresh id and the current timestamp."""
    return Image(
        id=str(uuid.uuid4()),
        filename=filename,
        content_type=content_type,
        bytes=payload,
        created_date=datetime.now(timezone.utc),
    )


def upload_image(db: Session, filename: Optional[str], content_type: Optional[str], payload: bytes) -> ImageResponse:
    validate_image_file(payload, content_type)

    image = new_image(filename or "upload", content_type, payload)
    try:
        db.add(image)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Stored image {image.id} ({image.filename}, {len(payload)} bytes)")
    return to_image_response(image)


def get_image(db: Session, image_id: str) -> Image:
    """Return the full image row, bytes included."""
    image = db.query(Image).options(undefer(Image.bytes)).filter(Image.id == image_id).first()
    if not image:
        raise ResourceNotFoundError(f"Image not found with id: {image_id}")
    return image


def list_images(db: Session) -> List[ImageResponse]:
    images = db.query(Image).order_by(Image.created_date, Image.id).all()
    return [to_image_response(image) for image in images]


def image_exists(db: Session, image_id: str) -> bool:
    return db.query(Image.id).filter(Image.id == image_id).first() is not None


def delete_image(db: Session, image_id: str) -> None:
    """Delete an image. Groups and plants that reference it are left as they are."""
    image = db.query(Image).filter(Image.id == image_id).first()
    if not image:
        raise ResourceNotFoundError(f"Image not found with id: {image_id}")

    try:
        db.delete(image)
        db.commit()
    except Exception:
        db.rollback()
        raise
