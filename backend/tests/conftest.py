"""Test fixtures for the plant catalog API.

Every test runs against a fresh in-memory SQLite database; the app and the
``db`` fixture share it through a single static connection.
"""
from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENABLE_METRICS"] = "false"

from typing import Callable, Dict, List

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db(_fresh_schema):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(_fresh_schema) -> TestClient:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload_image(client: TestClient) -> Callable[..., str]:
    """Upload an image through the admin API and return its id."""
    def _upload(filename: str = "image.jpg", payload: bytes = b"test content",
                content_type: str = "image/jpeg") -> str:
        resp = client.post("/api/admin/images", files={"file": (filename, payload, content_type)})
        assert resp.status_code == 201, resp.text
        return resp.json()["imageId"]
    return _upload


@pytest.fixture
def catalog(client: TestClient, upload_image) -> Dict[str, str]:
    """One group with three images ready to be referenced by plants."""
    ids = {
        "thumbnail": upload_image("thumbnail.jpg"),
        "image1": upload_image("image1.jpg"),
        "image2": upload_image("image2.jpg"),
    }
    resp = client.post(
        "/api/admin/plant-groups",
        json={"id": "test-group", "name": "Test Group", "imageId": ids["thumbnail"]},
    )
    assert resp.status_code == 201, resp.text
    ids["group"] = "test-group"
    return ids


def plant_payload(plant_id: str, group_id: str, thumbnail_id: str, image_ids: List[str], **overrides) -> dict:
    payload = {
        "id": plant_id,
        "groupId": group_id,
        "name": "Test Plant",
        "scientificName": "Testus plantus",
        "thumbnailId": thumbnail_id,
        "imageIds": image_ids,
        "description": "A wonderful test plant with detailed description",
        "size": "Small to medium sized",
        "toxicity": "Non-toxic to pets",
        "benefits": ["Easy to care for", "Air purifying", "Low light tolerant", "Pet safe"],
        "care": {
            "watering": "Water weekly",
            "light": "Bright indirect light",
            "temperature": "18-24°C",
            "humidity": "50-60%",
            "soil": "Well-draining potting mix",
            "fertilizing": "Monthly during growing season",
        },
        "commonIssues": [
            {"issue": "Yellow leaves", "solution": "Reduce watering frequency"},
            {"issue": "Brown tips", "solution": "Increase humidity levels"},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_plant_payload(catalog) -> Callable[..., dict]:
    def _make(plant_id: str = "new-plant", **overrides) -> dict:
        return plant_payload(
            plant_id, catalog["group"], catalog["thumbnail"],
            [catalog["image1"], catalog["image2"]], **overrides,
        )
    return _make
