import logging
import uuid

from pydantic import ValidationError

from app.core.cache import EntityType
from app.core.exceptions import BadRequestError, ConflictError, NotFoundError
from app.models.station import Station
from app.schemas.station import StationCreate, StationUpdate
from app.services.data_manager import DataManager

logger = logging.getLogger(__name__)


async def create_station(manager: DataManager, data: StationCreate) -> Station:
    document = await manager.load_for_update()

    station_id = data.id or uuid.uuid4().hex
    if document.find_station(station_id):
        raise ConflictError(f"Station '{station_id}' already exists")

    station = Station(**data.model_dump(exclude={"id"}), id=station_id)
    document.stations.append(station)
    await manager.commit(document, (EntityType.STATION, [station.id]))

    logger.info("Created station %s (%s)", station.name, station.id)
    return station


async def update_station(manager: DataManager, station_id: str, data: StationUpdate) -> Station:
    document = await manager.load_for_update()

    for index, station in enumerate(document.stations):
        if station.id == station_id:
            break
    else:
        raise NotFoundError(f"Station {station_id} not found")

    update_data = data.model_dump(exclude_unset=True)
    try:
        updated = Station.model_validate({**station.model_dump(), **update_data})
    except ValidationError as e:
        raise BadRequestError(f"Invalid station update: {e.errors()[0]['msg']}") from e

    document.stations[index] = updated
    await manager.commit(document, (EntityType.STATION, [station_id]))

    logger.info("Updated station %s (fields: %s)", station_id, ", ".join(update_data) or "none")
    return updated


async def delete_station(manager: DataManager, station_id: str) -> None:
    """Delete a station together with every program that airs on it."""
    document = await manager.load_for_update()
    if not document.find_station(station_id):
        raise NotFoundError(f"Station {station_id} not found")

    before = len(document.programs)
    document.stations = [s for s in document.stations if s.id != station_id]
    document.programs = [p for p in document.programs if p.station_id != station_id]

    await manager.commit(
        document,
        (EntityType.STATION, [station_id]),
        (EntityType.PROGRAM, [station_id]),
    )
    logger.info(
        "Deleted station %s and %d of its programs", station_id, before - len(document.programs)
    )
