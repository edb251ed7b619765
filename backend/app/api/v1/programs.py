from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, Response

from app.core.dependencies import get_data_manager, require_admin
from app.schemas.common import ActionResponse
from app.schemas.program import (
    ProgramCreate,
    ProgramListResponse,
    ProgramResponse,
    ProgramUpdate,
)
from app.services.data_manager import DataManager
from app.services.program_service import create_program, delete_program, update_program

router = APIRouter(prefix="/programs", tags=["programs"])

LIST_CACHE_CONTROL = "public, max-age=180, stale-while-revalidate=360"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("", response_model=ProgramListResponse)
async def list_all(
    response: Response,
    station_id: str | None = Query(None, min_length=1),
    manager: DataManager = Depends(get_data_manager),
):
    if station_id:
        programs = await manager.get_programs_by_station(station_id)
    else:
        programs = await manager.get_programs()
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return ProgramListResponse(
        data=programs,
        meta={"count": len(programs), "station_id": station_id or "all", "timestamp": _timestamp()},
    )


@router.post("", response_model=ProgramResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create(body: ProgramCreate, manager: DataManager = Depends(get_data_manager)):
    program = await create_program(manager, body)
    return ProgramResponse(data=program, meta={"action": "created", "timestamp": _timestamp()})


@router.put("/{program_id}", response_model=ProgramResponse, dependencies=[Depends(require_admin)])
async def update(
    program_id: str,
    body: ProgramUpdate,
    manager: DataManager = Depends(get_data_manager),
):
    program = await update_program(manager, program_id, body)
    return ProgramResponse(data=program, meta={"action": "updated", "timestamp": _timestamp()})


@router.delete("/{program_id}", response_model=ActionResponse, dependencies=[Depends(require_admin)])
async def delete(program_id: str, manager: DataManager = Depends(get_data_manager)):
    await delete_program(manager, program_id)
    return ActionResponse(
        meta={"action": "deleted", "deleted_id": program_id, "timestamp": _timestamp()},
    )
