from app.routers import images, plant_groups, plants, seed

__all__ = ["images", "plant_groups", "plants", "seed"]
