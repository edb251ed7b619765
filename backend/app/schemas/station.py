from pydantic import BaseModel, Field

from app.models.station import Station
from app.schemas.common import Envelope


class StationCreate(BaseModel):
    id: str | None = Field(None, min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$")
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1)
    image: str | None = None
    frequency: str | None = None
    city: str | None = None
    description: str | None = None


class StationUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    url: str | None = Field(None, min_length=1)
    image: str | None = None
    frequency: str | None = None
    city: str | None = None
    description: str | None = None


class StationResponse(Envelope):
    data: Station


class StationListResponse(Envelope):
    data: list[Station]
