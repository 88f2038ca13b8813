from sqlalchemy import Column, DateTime, LargeBinary, String
from sqlalchemy.orm import deferred

from app.database import Base


class Image(Base):
    """Binary image stored in the catalog.

    Groups and plants hold plain id references to images, so deleting an
    image can leave those references dangling.
    """

    __tablename__ = "images"

    id = Column(String(255), primary_key=True)
    filename = Column(String(500), nullable=False)
    content_type = Column(String(100), nullable=False)
    bytes = deferred(Column(LargeBinary, nullable=False))
    created_date = Column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<Image(id='{self.id}', filename='{self.filename}')>"
