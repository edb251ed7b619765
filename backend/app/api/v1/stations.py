from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response

from app.core.dependencies import get_data_manager, require_admin
from app.schemas.common import ActionResponse
from app.schemas.station import StationCreate, StationListResponse, StationResponse, StationUpdate
from app.services.data_manager import DataManager
from app.services.station_service import create_station, delete_station, update_station

router = APIRouter(prefix="/stations", tags=["stations"])

LIST_CACHE_CONTROL = "public, max-age=300, stale-while-revalidate=600"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("", response_model=StationListResponse)
async def list_all(response: Response, manager: DataManager = Depends(get_data_manager)):
    stations = await manager.get_stations()
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return StationListResponse(
        data=stations,
        meta={"count": len(stations), "timestamp": _timestamp()},
    )


@router.get("/{station_id}", response_model=StationResponse)
async def get_one(station_id: str, manager: DataManager = Depends(get_data_manager)):
    station = await manager.get_station(station_id)
    return StationResponse(data=station, meta={"timestamp": _timestamp()})


@router.post("", response_model=StationResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create(body: StationCreate, manager: DataManager = Depends(get_data_manager)):
    station = await create_station(manager, body)
    return StationResponse(data=station, meta={"action": "created", "timestamp": _timestamp()})


@router.put("/{station_id}", response_model=StationResponse, dependencies=[Depends(require_admin)])
async def update(
    station_id: str,
    body: StationUpdate,
    manager: DataManager = Depends(get_data_manager),
):
    station = await update_station(manager, station_id, body)
    return StationResponse(data=station, meta={"action": "updated", "timestamp": _timestamp()})


@router.delete("/{station_id}", response_model=ActionResponse, dependencies=[Depends(require_admin)])
async def delete(station_id: str, manager: DataManager = Depends(get_data_manager)):
    await delete_station(manager, station_id)
    return ActionResponse(
        meta={"action": "deleted", "deleted_id": station_id, "timestamp": _timestamp()},
    )
