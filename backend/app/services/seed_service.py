"""
Seed pipeline for the plant catalog.

Populates an empty catalog from the bundled fixture: ``plants-data.json``
describes plant groups and plants, referencing images by filename; the image
files live in an ``images/`` directory next to it.

Stages:
1. Parse the fixture document
2. Collect every referenced image filename (deduplicated)
3. Store each image under a fresh id, recording filename -> id
4. Create plant groups, resolving their image through that mapping
5. Create plants with care guide, ordered gallery and issues

The whole run is one transaction. Each stage flushes before the next one
resolves references, and the commit happens only after the last stage, so a
failure anywhere leaves the catalog untouched.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Set

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.errors import DuplicateResourceError, SeedDataError
from app.models import Image, Issue, Plant, PlantGroup, PlantImage
from app.schemas.seed import SeedData, SeedPlant, SeedPlantGroup, SeedSummary
from app.services.image_service import new_image
from app.services.plant_service import apply_care, delete_children

logger = logging.getLogger(__name__)

DATA_FILENAME = "plants-data.json"
IMAGES_DIRNAME = "images"

CONTENT_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(filename: str) -> str:
    """Derive a content type from the filename extension."""
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def load_seed_data(seed_dir: Path) -> SeedData:
    path = Path(seed_dir) / DATA_FILENAME
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedDataError(f"Seed data file not readable: {path.name} ({e.strerror})") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed data file is not valid JSON: {e}") from e

    try:
        return SeedData.model_validate(raw)
    except ValidationError as e:
        raise SeedDataError(f"Seed data file has an invalid structure: {e.error_count()} error(s)") from e


def collect_image_filenames(seed_data: SeedData) -> Set[str]:
    """Every filename used as a group image, plant thumbnail or plant detail image."""
    filenames: Set[str] = set()
    for group in seed_data.plant_groups:
        if group.image_filename:
            filenames.add(group.image_filename)
    for plant in seed_data.plants:
        if plant.thumbnail_filename:
            filenames.add(plant.thumbnail_filename)
        filenames.update(plant.image_filenames or [])
    return filenames


def load_images(db: Session, seed_data: SeedData, images_dir: Path) -> Dict[str, str]:
    """Store every referenced image and return the filename -> image id mapping."""
    filename_to_id: Dict[str, str] = {}
    images_dir = Path(images_dir)

    for filename in sorted(collect_image_filenames(seed_data)):
        path = images_dir / filename
        if not path.is_file():
            raise SeedDataError(f"Image file not found: {filename}")
        try:
            payload = path.read_bytes()
        except OSError as e:
            raise SeedDataError(f"Image file not readable: {filename} ({e.strerror})") from e

        image = new_image(filename, content_type_for(filename), payload)
        db.add(image)
        filename_to_id[filename] = image.id

    db.flush()
    logger.info(f"Loaded {len(filename_to_id)} seed images")
    return filename_to_id


def _resolve(filename: Optional[str], filename_to_id: Dict[str, str]) -> Optional[str]:
    if filename is None:
        return None
    return filename_to_id.get(filename)


def create_plant_groups(db: Session, groups: List[SeedPlantGroup], filename_to_id: Dict[str, str]) -> int:
    for seed_group in groups:
        if db.get(PlantGroup, seed_group.id) is not None:
            raise DuplicateResourceError(f"Plant group with id '{seed_group.id}' already exists")
        db.add(PlantGroup(
            id=seed_group.id,
            name=seed_group.name,
            image_id=_resolve(seed_group.image_filename, filename_to_id),
        ))
        db.flush()

    logger.info(f"Created {len(groups)} seed plant groups")
    return len(groups)


def create_plants(db: Session, plants: List[SeedPlant], filename_to_id: Dict[str, str]) -> int:
    """Create plants; returns the number of issues written.

    Detail image filenames missing from the mapping are skipped rather than
    failing the whole seed.
    """
    issue_count = 0
    for seed_plant in plants:
        if db.get(Plant, seed_plant.id) is not None:
            raise DuplicateResourceError(f"Plant with ID '{seed_plant.id}' already exists")

        plant = Plant(
            id=seed_plant.id,
            group_id=seed_plant.group_id,
            name=seed_plant.name,
            scientific_name=seed_plant.scientific_name,
            thumbnail_id=_resolve(seed_plant.thumbnail_filename, filename_to_id),
            description=seed_plant.description,
            size=seed_plant.size,
            toxicity=seed_plant.toxicity,
            benefits=list(seed_plant.benefits or []),
        )
        apply_care(plant, seed_plant.care)
        db.add(plant)
        db.flush()

        image_ids = [
            filename_to_id[name]
            for name in (seed_plant.image_filenames or [])
            if name in filename_to_id
        ]
        db.add_all(
            PlantImage(plant_id=plant.id, display_order=order, image_id=image_id)
            for order, image_id in enumerate(image_ids)
        )
        issues = seed_plant.common_issues or []
        db.add_all(Issue(plant_id=plant.id, issue=i.issue, solution=i.solution) for i in issues)
        db.flush()
        issue_count += len(issues)

    logger.info(f"Created {len(plants)} seed plants with {issue_count} issues")
    return issue_count


def _run_pipeline(db: Session, seed_dir: Path) -> SeedSummary:
    seed_dir = Path(seed_dir)
    seed_data = load_seed_data(seed_dir)

    filename_to_id = load_images(db, seed_data, seed_dir / IMAGES_DIRNAME)
    group_count = create_plant_groups(db, seed_data.plant_groups, filename_to_id)
    issue_count = create_plants(db, seed_data.plants, filename_to_id)

    return SeedSummary(
        images=len(filename_to_id),
        plant_groups=group_count,
        plants=len(seed_data.plants),
        issues=issue_count,
    )


def seed_database(db: Session, seed_dir: Path) -> SeedSummary:
    """Seed the catalog from the fixture in ``seed_dir``.

    Running it again without a reset fails on the first plant group id that
    already exists; the images it stored before that point are rolled back
    with the rest of the run.
    """
    logger.info(f"Seeding catalog from {seed_dir}")
    try:
        summary = _run_pipeline(db, seed_dir)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Seeding complete: {summary.model_dump()}")
    return summary


def clear_catalog(db: Session) -> None:
    """Delete plants (with issues and gallery rows), then groups, then images."""
    delete_children(db)
    db.query(Plant).delete()
    db.query(PlantGroup).delete()
    db.query(Image).delete()
    db.flush()


def reset_database(db: Session, seed_dir: Path) -> SeedSummary:
    """Wipe the catalog and seed it again, as a single transaction."""
    logger.info("Resetting catalog")
    try:
        clear_catalog(db)
        summary = _run_pipeline(db, seed_dir)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Reset complete: {summary.model_dump()}")
    return summary
