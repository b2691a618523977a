"""User location schemas for response serialization."""

from pydantic import BaseModel, ConfigDict, Field


class UserLocationView(BaseModel):
    """Flattened view of a user and the location it references."""
    model_config = ConfigDict(frozen=True)

    userId: int = Field(..., description="User's unique identifier")
    email: str = Field(..., description="User's email address")
    place: str = Field(..., description="Name of the user's location")
    longitude: float = Field(..., description="Longitude of the user's location")
    latitude: float = Field(..., description="Latitude of the user's location")
