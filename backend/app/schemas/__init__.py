"""Pydantic schemas for API request/response validation.

JSON bodies use camelCase keys; attributes stay snake_case.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def require_text(value: Optional[str], label: str, max_length: int) -> str:
    """Reject blank strings and strings longer than ``max_length``."""
    if value is None or not value.strip():
        raise PydanticCustomError("blank", "{label} is required", {"label": label})
    if len(value) > max_length:
        raise PydanticCustomError(
            "too_long",
            "{label} must not exceed {max_length} characters",
            {"label": label, "max_length": max_length},
        )
    return value


def require_count(values: list, minimum: int, maximum: int, message: str) -> list:
    if values is None or not (minimum <= len(values) <= maximum):
        raise PydanticCustomError("count", message)
    return values


# === Care guide & issues ===
CARE_LABELS = {
    "watering": "Watering information",
    "light": "Light information",
    "temperature": "Temperature information",
    "humidity": "Humidity information",
    "soil": "Soil information",
    "fertilizing": "Fertilizing information",
}


class CareGuideOut(BaseModel):
    watering: Optional[str] = None
    light: Optional[str] = None
    temperature: Optional[str] = None
    humidity: Optional[str] = None
    soil: Optional[str] = None
    fertilizing: Optional[str] = None

    model_config = CAMEL_CONFIG


class CareGuide(BaseModel):
    watering: str
    light: str
    temperature: str
    humidity: str
    soil: str
    fertilizing: str

    model_config = CAMEL_CONFIG

    @field_validator(*CARE_LABELS)
    @classmethod
    def validate_text(cls, v, info):
        return require_text(v, CARE_LABELS[info.field_name], 5000)


class IssueOut(BaseModel):
    issue: str
    solution: str

    model_config = CAMEL_CONFIG


class IssueSchema(IssueOut):
    @field_validator("issue")
    @classmethod
    def validate_issue(cls, v):
        return require_text(v, "Issue description", 5000)

    @field_validator("solution")
    @classmethod
    def validate_solution(cls, v):
        return require_text(v, "Solution", 5000)


# === Image Schemas ===
class ImageResponse(BaseModel):
    id: str
    filename: str
    content_type: str
    created_date: datetime

    model_config = CAMEL_CONFIG


class UploadImageResponse(BaseModel):
    image_id: str

    model_config = CAMEL_CONFIG


# === Plant Group Schemas ===
class PlantGroupUpdate(BaseModel):
    """Schema for updating a plant group."""
    name: str
    image_id: Optional[str] = None

    model_config = CAMEL_CONFIG

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return require_text(v, "Name", 255)


class PlantGroupCreate(PlantGroupUpdate):
    """Schema for creating a new plant group."""
    id: str

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return require_text(v, "ID", 100)


class PlantGroupResponse(BaseModel):
    id: str
    name: str
    image_id: Optional[str] = None

    model_config = CAMEL_CONFIG


# === Plant Schemas ===
PLANT_TEXT_FIELDS = {
    "group_id": ("Group ID", 255),
    "name": ("Plant name", 255),
    "scientific_name": ("Scientific name", 255),
    "thumbnail_id": ("Thumbnail ID", 255),
    "description": ("Description", 10000),
    "size": ("Size information", 5000),
    "toxicity": ("Toxicity information", 5000),
}


class PlantUpdate(BaseModel):
    """Schema for updating a plant; every field is replaced."""
    group_id: str
    name: str
    scientific_name: str
    thumbnail_id: str
    image_ids: List[str]
    description: str
    size: str
    toxicity: str
    benefits: List[str]
    care: CareGuide
    common_issues: List[IssueSchema]

    model_config = CAMEL_CONFIG

    @field_validator(*PLANT_TEXT_FIELDS)
    @classmethod
    def validate_text(cls, v, info):
        label, max_length = PLANT_TEXT_FIELDS[info.field_name]
        return require_text(v, label, max_length)

    @field_validator("image_ids")
    @classmethod
    def validate_image_ids(cls, v):
        return require_count(v, 1, 3, "Must have between 1 and 3 images")

    @field_validator("benefits")
    @classmethod
    def validate_benefits(cls, v):
        return require_count(v, 4, 5, "Must have between 4 and 5 benefits")

    @field_validator("common_issues")
    @classmethod
    def validate_common_issues(cls, v):
        return require_count(v, 2, 4, "Must have between 2 and 4 common issues")


class PlantCreate(PlantUpdate):
    """Schema for creating a new plant."""
    id: str

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return require_text(v, "Plant ID", 255)


class PlantSummaryResponse(BaseModel):
    """Plant list entry without care details."""
    id: str
    name: str
    scientific_name: Optional[str] = None
    thumbnail_id: Optional[str] = None

    model_config = CAMEL_CONFIG


class PlantResponse(BaseModel):
    id: str
    group_id: str
    name: str
    scientific_name: Optional[str] = None
    thumbnail_id: Optional[str] = None
    image_ids: List[str] = []
    description: Optional[str] = None
    size: Optional[str] = None
    toxicity: Optional[str] = None
    benefits: List[str] = []
    care: Optional[CareGuideOut] = None
    common_issues: List[IssueOut] = []

    model_config = CAMEL_CONFIG


# === Admin ===
class MessageResponse(BaseModel):
    message: str
