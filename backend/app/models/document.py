from pydantic import BaseModel

from app.models.program import Program
from app.models.station import Station


class RadioDocument(BaseModel):
    """The whole persisted state. Always read and written as one unit."""

    stations: list[Station] = []
    programs: list[Program] = []

    def find_station(self, station_id: str) -> Station | None:
        return next((s for s in self.stations if s.id == station_id), None)

    def find_program(self, program_id: str) -> Program | None:
        return next((p for p in self.programs if p.id == program_id), None)

    def programs_for(self, station_id: str) -> list[Program]:
        return [p for p in self.programs if p.station_id == station_id]
