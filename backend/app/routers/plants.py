"""Plant endpoints: public detail view and admin CRUD."""
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas import PlantCreate, PlantResponse, PlantSummaryResponse, PlantUpdate
from app.services import plant_service

router = APIRouter(prefix="/api/plants", tags=["plants"])

admin_router = APIRouter(prefix="/api/admin/plants", tags=["admin"])


@router.get("/{plant_id}", response_model=PlantResponse)
def get_plant(plant_id: str, db: Session = Depends(get_db)):
    """Full plant detail with image ids, care guide and issues."""
    return plant_service.get_plant(db, plant_id)


# --- Admin ---

@admin_router.get("", response_model=List[PlantSummaryResponse])
def admin_list_plants(db: Session = Depends(get_db)):
    return plant_service.list_plants(db)


@admin_router.get("/{plant_id}", response_model=PlantResponse)
def admin_get_plant(plant_id: str, db: Session = Depends(get_db)):
    return plant_service.get_plant(db, plant_id)


@admin_router.post("", response_model=PlantResponse, status_code=201)
def create_plant(data: PlantCreate, db: Session = Depends(get_db)):
    return plant_service.create_plant(db, data)


@admin_router.put("/{plant_id}", response_model=PlantResponse)
def update_plant(plant_id: str, data: PlantUpdate, db: Session = Depends(get_db)):
    return plant_service.update_plant(db, plant_id, data)


@admin_router.delete("/{plant_id}", status_code=204)
def delete_plant(plant_id: str, db: Session = Depends(get_db)):
    plant_service.delete_plant(db, plant_id)
    return Response(status_code=204)
