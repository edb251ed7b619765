# Schemas package
from app.schemas.common import ActionResponse, Envelope
from app.schemas.station import (
    StationCreate,
    StationListResponse,
    StationResponse,
    StationUpdate,
)
from app.schemas.program import (
    CurrentProgramResponse,
    ProgramCreate,
    ProgramListResponse,
    ProgramResponse,
    ProgramUpdate,
)
from app.schemas.cache import CacheStatsResponse
