"""Plant species with its embedded care guide, ordered gallery and owned issues."""
from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB

from app.database import Base

CARE_FIELDS = ("watering", "light", "temperature", "humidity", "soil", "fertilizing")


class Plant(Base):
    __tablename__ = "plants"

    id = Column(String(255), primary_key=True)
    group_id = Column(String(100), ForeignKey("plant_groups.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    scientific_name = Column(String(255), nullable=True)
    thumbnail_id = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    size = Column(Text, nullable=True)
    toxicity = Column(Text, nullable=True)
    benefits = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    # Care guide, embedded as care_* columns
    care_watering = Column(Text, nullable=True)
    care_light = Column(Text, nullable=True)
    care_temperature = Column(Text, nullable=True)
    care_humidity = Column(Text, nullable=True)
    care_soil = Column(Text, nullable=True)
    care_fertilizing = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Plant(id='{self.id}', name='{self.name}')>"


class PlantImage(Base):
    """Ordered gallery entry linking a plant to an image."""

    __tablename__ = "plant_images"

    plant_id = Column(String(255), ForeignKey("plants.id", ondelete="CASCADE"), primary_key=True)
    display_order = Column(Integer, primary_key=True)
    image_id = Column(String(255), nullable=False, index=True)


class Issue(Base):
    __tablename__ = "plant_issues"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(String(255), ForeignKey("plants.id", ondelete="CASCADE"), nullable=False, index=True)
    issue = Column(Text, nullable=False)
    solution = Column(Text, nullable=False)
