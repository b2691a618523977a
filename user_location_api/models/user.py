"""
User database models
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class User(Base):
    """User model"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    # Plain text in the demo fixture only
    password = Column(String(255), nullable=False)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=True, index=True)

    # Relationships
    # Populated only by an explicit joinedload in UserRepository
    location = relationship("Location", back_populates="users", lazy="raise")

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
