"""
Location database models
"""
from sqlalchemy import Column, Float, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base


class Location(Base):
    """Location model, referenced by zero or more users"""
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    place = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    # Relationships
    users = relationship("User", back_populates="location", lazy="raise")

    def __repr__(self) -> str:
        return f"<Location id={self.id} place={self.place!r}>"
