import json
from datetime import datetime, timezone

import pytest

from app.data.default_schedule import DEFAULT_STATIONS, build_default_document
from app.models.document import RadioDocument
from app.models.program import Weekday
from app.services.schedule_resolver import resolve_current_program
from app.services.storage_service import JsonFileStorage


def test_default_document_has_full_grid_per_station():
    document = build_default_document()
    assert [s.id for s in document.stations] == ["lima", "arequipa", "trujillo", "chiclayo"]
    assert len(document.programs) == len(DEFAULT_STATIONS) * (12 + 12 + 18)
    assert len(document.programs_for("lima")) == 42
    ids = [p.id for p in document.programs]
    assert ids == [str(i) for i in range(1, len(ids) + 1)]


def test_default_grid_covers_every_minute_of_the_week():
    document = build_default_document()
    for day in range(13, 20):  # Sunday 2025-07-13 .. Saturday 2025-07-19
        for hour in range(24):
            now = datetime(2025, 7, day, hour, 30, tzinfo=timezone.utc)
            assert resolve_current_program(document.programs, "trujillo", now) is not None


@pytest.mark.asyncio
async def test_missing_file_is_seeded_with_defaults(tmp_path):
    path = tmp_path / "data.json"
    storage = JsonFileStorage(str(path))

    document = await storage.read_document()

    assert path.exists()
    assert len(document.stations) == 4
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["programs"][0]["days"] == ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes"]


@pytest.mark.asyncio
async def test_missing_file_without_seeding_is_empty(tmp_path):
    path = tmp_path / "nested" / "data.json"
    storage = JsonFileStorage(str(path), seed_default=False)

    document = await storage.read_document()

    assert document == RadioDocument()
    assert json.loads(path.read_text(encoding="utf-8")) == {"stations": [], "programs": []}


@pytest.mark.asyncio
async def test_write_then_read(storage, data_file):
    document = await storage.read_document()
    document.programs[0].days = [Weekday.SABADO]
    document.stations[1].city = "Arequipa"

    await storage.write_document(document)

    assert await storage.read_document() == document
    text = data_file.read_text(encoding="utf-8")
    assert "Sábado" in text  # written without ASCII escapes
    assert not [p.name for p in data_file.parent.iterdir() if p.name.startswith(".data-")]


@pytest.mark.asyncio
async def test_optional_station_fields_are_omitted(storage, data_file):
    await storage.write_document(await storage.read_document())
    raw = json.loads(data_file.read_text(encoding="utf-8"))
    assert "image" not in raw["stations"][1]


@pytest.mark.asyncio
async def test_unknown_fields_are_ignored(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({
        "stations": [{"id": "lima", "name": "Lima", "url": "https://x", "legacy": True}],
        "programs": [],
    }), encoding="utf-8")

    document = await JsonFileStorage(str(path)).read_document()
    assert document.stations[0].id == "lima"
