"""Plant group endpoints: public listing and admin CRUD."""
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas import PlantGroupCreate, PlantGroupResponse, PlantGroupUpdate, PlantSummaryResponse
from app.services import plant_group_service, plant_service

router = APIRouter(prefix="/api/plant-groups", tags=["plant-groups"])

admin_router = APIRouter(prefix="/api/admin/plant-groups", tags=["admin"])


@router.get("", response_model=List[PlantGroupResponse])
def list_plant_groups(db: Session = Depends(get_db)):
    """List all plant groups."""
    return plant_group_service.list_groups(db)


@router.get("/{group_id}/plants", response_model=List[PlantSummaryResponse])
def list_group_plants(group_id: str, db: Session = Depends(get_db)):
    """List plant summaries for one group; 404 if the group does not exist."""
    return plant_service.list_plants_by_group(db, group_id)


# --- Admin ---

@admin_router.get("", response_model=List[PlantGroupResponse])
def admin_list_plant_groups(db: Session = Depends(get_db)):
    return plant_group_service.list_groups(db)


@admin_router.get("/{group_id}", response_model=PlantGroupResponse)
def admin_get_plant_group(group_id: str, db: Session = Depends(get_db)):
    return plant_group_service.get_group(db, group_id)


@admin_router.post("", response_model=PlantGroupResponse, status_code=201)
def create_plant_group(data: PlantGroupCreate, db: Session = Depends(get_db)):
    return plant_group_service.create_group(db, data)


@admin_router.put("/{group_id}", response_model=PlantGroupResponse)
def update_plant_group(group_id: str, data: PlantGroupUpdate, db: Session = Depends(get_db)):
    return plant_group_service.update_group(db, group_id, data)


@admin_router.delete("/{group_id}", status_code=204)
def delete_plant_group(group_id: str, db: Session = Depends(get_db)):
    plant_group_service.delete_group(db, group_id)
    return Response(status_code=204)
