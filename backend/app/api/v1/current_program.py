"""
Current-program endpoint — what is on air for a station right now.
Polled by every listener, so it answers with short browser caching and an
ETag that changes at most once per program or per civil hour.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, Request, Response

from app.core.dependencies import get_data_manager
from app.core.exceptions import BadRequestError
from app.models.program import Program
from app.schemas.program import CurrentProgramResponse
from app.services.data_manager import DataManager
from app.services.schedule_resolver import to_civil_time

router = APIRouter(prefix="/current-program", tags=["current-program"])

CACHE_CONTROL = "public, max-age=30, stale-while-revalidate=60"


def build_etag(program: Program | None, station_id: str, local_hour: int) -> str:
    if program:
        return f'"{program.id}-{program.start_time}-{local_hour}"'
    return f'"empty-{station_id}-{local_hour}"'


@router.get("", response_model=CurrentProgramResponse)
async def get_current_program(
    request: Request,
    response: Response,
    station_id: str | None = Query(None),
    manager: DataManager = Depends(get_data_manager),
):
    if not station_id:
        raise BadRequestError("Station ID required")

    program = await manager.get_current_program(station_id)
    local_now = to_civil_time(manager.now())
    etag = build_etag(program, station_id, local_now.hour)

    if request.headers.get("if-none-match") == etag:
        return Response(status_code=304, headers={"ETag": etag, "Cache-Control": CACHE_CONTROL})

    response.headers["ETag"] = etag
    response.headers["Cache-Control"] = CACHE_CONTROL
    response.headers["Vary"] = "Accept, If-None-Match"
    response.headers["X-Program-Found"] = "true" if program else "false"
    return CurrentProgramResponse(
        data=program,
        meta={
            "station_id": station_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "local_time": local_now.isoformat(),
        },
    )
