"""
Seed script for the plant catalog database.
Loads plant groups, plants and their images from the bundled fixture.

Usage:
    python -m app.seed.seed_data            # seed unless groups already exist
    python -m app.seed.seed_data --reset    # wipe everything and seed again
"""
import argparse
import logging

from app.config import settings
from app.database import SessionLocal
from app.errors import CatalogError
from app.models import PlantGroup
from app.services.seed_service import reset_database, seed_database

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the plant catalog from the bundled fixture.")
    parser.add_argument("--reset", action="store_true", help="delete all catalog data before seeding")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    session = SessionLocal()
    try:
        if args.reset:
            summary = reset_database(session, settings.seed_data_dir)
        elif session.query(PlantGroup).first():
            logger.info("Database already seeded, skipping...")
            return 0
        else:
            summary = seed_database(session, settings.seed_data_dir)
    except CatalogError as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        session.close()

    logger.info(
        f"Seeded {summary.images} images, {summary.plant_groups} plant groups, "
        f"{summary.plants} plants and {summary.issues} issues"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
