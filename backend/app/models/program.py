"""
Program model — a recurring weekly slot on one station.
A program has no calendar date: it airs on every listed weekday between
start_time and end_time (civil time, UTC-5), e.g.
  - "Lunes..Viernes 05:00-08:00: Exitosa Perú"
  - "Sábado 22:00-00:00: Noche Esotérica" (runs until midnight)
"""
import enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

TIME_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"

TimeOfDay = Annotated[str, Field(pattern=TIME_PATTERN)]


class Weekday(str, enum.Enum):
    # Declaration order is the week order, starting on Sunday
    DOMINGO = "Domingo"
    LUNES = "Lunes"
    MARTES = "Martes"
    MIERCOLES = "Miércoles"
    JUEVES = "Jueves"
    VIERNES = "Viernes"
    SABADO = "Sábado"


WEEKDAYS: list[Weekday] = list(Weekday)


def _unique_days(days: list[Weekday]) -> list[Weekday]:
    if len(set(days)) != len(days):
        raise ValueError("days must not repeat a weekday")
    return days


# Request-side day list: non-empty, no repeats
DayList = Annotated[list[Weekday], Field(min_length=1), AfterValidator(_unique_days)]


def to_minutes(value: str) -> int:
    """Minutes since midnight for an "HH:MM" string."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


class Program(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    station_id: str
    name: str
    host: str
    start_time: TimeOfDay
    end_time: TimeOfDay
    days: list[Weekday]
    image: str = ""
