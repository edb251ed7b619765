import logging
import uuid

from pydantic import ValidationError

from app.core.cache import EntityType
from app.core.exceptions import BadRequestError, NotFoundError
from app.models.document import RadioDocument
from app.models.program import Program
from app.schemas.program import ProgramCreate, ProgramUpdate
from app.services.data_manager import DataManager

logger = logging.getLogger(__name__)


def _require_station(document: RadioDocument, station_id: str) -> None:
    if not document.find_station(station_id):
        raise BadRequestError(f"Station '{station_id}' does not exist")


async def create_program(manager: DataManager, data: ProgramCreate) -> Program:
    document = await manager.load_for_update()
    _require_station(document, data.station_id)

    program = Program(id=uuid.uuid4().hex, **data.model_dump())
    document.programs.append(program)
    await manager.commit(document, (EntityType.PROGRAM, [program.station_id]))

    logger.info("Created program %s on station %s", program.name, program.station_id)
    return program


async def update_program(manager: DataManager, program_id: str, data: ProgramUpdate) -> Program:
    document = await manager.load_for_update()

    for index, program in enumerate(document.programs):
        if program.id == program_id:
            break
    else:
        raise NotFoundError(f"Program {program_id} not found")

    update_data = data.model_dump(exclude_unset=True)
    try:
        updated = Program.model_validate({**program.model_dump(), **update_data})
    except ValidationError as e:
        raise BadRequestError(f"Invalid program update: {e.errors()[0]['msg']}") from e

    if updated.station_id != program.station_id:
        _require_station(document, updated.station_id)

    document.programs[index] = updated
    # Both the old and the new station lose their cached grid and on-air entry
    await manager.commit(
        document, (EntityType.PROGRAM, [program.station_id, updated.station_id])
    )

    logger.info("Updated program %s (fields: %s)", program_id, ", ".join(update_data) or "none")
    return updated


async def delete_program(manager: DataManager, program_id: str) -> None:
    document = await manager.load_for_update()
    program = document.find_program(program_id)
    if not program:
        raise NotFoundError(f"Program {program_id} not found")

    document.programs = [p for p in document.programs if p.id != program_id]
    await manager.commit(document, (EntityType.PROGRAM, [program.station_id]))

    logger.info("Deleted program %s from station %s", program_id, program.station_id)
