"""Schemas for the bundled seed fixture (plants-data.json).

Images are referenced by filename; the seed pipeline swaps them for
generated image ids.
"""
from typing import List, Optional

from pydantic import BaseModel

from app.schemas import CAMEL_CONFIG


class SeedCareGuide(BaseModel):
    watering: Optional[str] = None
    light: Optional[str] = None
    temperature: Optional[str] = None
    humidity: Optional[str] = None
    soil: Optional[str] = None
    fertilizing: Optional[str] = None

    model_config = CAMEL_CONFIG


class SeedIssue(BaseModel):
    issue: str
    solution: str

    model_config = CAMEL_CONFIG


class SeedPlantGroup(BaseModel):
    id: str
    name: str
    image_filename: Optional[str] = None

    model_config = CAMEL_CONFIG


class SeedPlant(BaseModel):
    id: str
    group_id: str
    name: str
    scientific_name: Optional[str] = None
    thumbnail_filename: Optional[str] = None
    image_filenames: Optional[List[str]] = None
    description: Optional[str] = None
    size: Optional[str] = None
    toxicity: Optional[str] = None
    benefits: Optional[List[str]] = None
    care: Optional[SeedCareGuide] = None
    common_issues: Optional[List[SeedIssue]] = None

    model_config = CAMEL_CONFIG


class SeedData(BaseModel):
    plant_groups: List[SeedPlantGroup] = []
    plants: List[SeedPlant] = []

    model_config = CAMEL_CONFIG


class SeedSummary(BaseModel):
    images: int = 0
    plant_groups: int = 0
    plants: int = 0
    issues: int = 0
