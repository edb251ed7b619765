"""
Pydantic schemas for Program requests and the program / current-program responses.
"""
from pydantic import BaseModel, Field, field_validator

from app.models.program import DayList, Program, TimeOfDay
from app.schemas.common import Envelope


class ProgramCreate(BaseModel):
    station_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    host: str = Field(..., min_length=1, max_length=255)
    start_time: TimeOfDay
    end_time: TimeOfDay
    days: DayList
    image: str = ""


class ProgramUpdate(BaseModel):
    station_id: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1, max_length=255)
    host: str | None = Field(None, min_length=1, max_length=255)
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    days: DayList | None = None
    image: str | None = None

    @field_validator("image")
    @classmethod
    def clear_image(cls, v: str | None) -> str:
        # null clears the image, as for stations
        return v or ""


class ProgramResponse(Envelope):
    data: Program


class ProgramListResponse(Envelope):
    data: list[Program]


class CurrentProgramResponse(Envelope):
    # None when nothing is on air; still a successful response
    data: Program | None = None
