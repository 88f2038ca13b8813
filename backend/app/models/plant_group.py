from sqlalchemy import Column, String

from app.database import Base


class PlantGroup(Base):
    """A named category of plants, optionally illustrated by one image."""

    __tablename__ = "plant_groups"

    id = Column(String(100), primary_key=True)
    name = Column(String(255), nullable=False)
    image_id = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<PlantGroup(id='{self.id}', name='{self.name}')>"
