"""Image endpoints: raw bytes for the public site, upload and listing for admins."""
from typing import List

from fastapi import APIRouter, Depends, File, Response, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas import ImageResponse, UploadImageResponse
from app.services import image_service

router = APIRouter(prefix="/api/images", tags=["images"])

admin_router = APIRouter(prefix="/api/admin/images", tags=["admin"])


@router.get("/{image_id}", response_class=Response)
def get_image(image_id: str, db: Session = Depends(get_db)):
    """Return the stored bytes with the stored content type."""
    image = image_service.get_image(db, image_id)
    return Response(content=image.bytes, media_type=image.content_type)


# --- Admin ---

@admin_router.get("", response_model=List[ImageResponse])
def list_images(db: Session = Depends(get_db)):
    """Image metadata, without bytes."""
    return image_service.list_images(db)


@admin_router.post("", response_model=UploadImageResponse, status_code=201)
def upload_image(file: UploadFile = File(...), db: Session = Depends(get_db)):
    payload = file.file.read()
    image = image_service.upload_image(db, file.filename, file.content_type, payload)
    return UploadImageResponse(image_id=image.id)


@admin_router.delete("/{image_id}", status_code=204)
def delete_image(image_id: str, db: Session = Depends(get_db)):
    image_service.delete_image(db, image_id)
    return Response(status_code=204)
