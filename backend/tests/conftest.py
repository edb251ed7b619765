from collections.abc import AsyncIterator
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.core.cache import CacheManager
from app.main import create_app
from app.models.document import RadioDocument
from app.models.program import Program, Weekday
from app.models.station import Station
from app.services.data_manager import DataManager
from app.services.storage_service import DocumentStorage, JsonFileStorage

ADMIN_TOKEN = "test-admin-token"

# Monday 2025-07-14 10:00 in UTC-5
MONDAY_10AM = datetime(2025, 7, 14, 15, 0, tzinfo=timezone.utc)


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0):
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


class FakeNow:
    def __init__(self, value: datetime):
        self.value = value

    def __call__(self) -> datetime:
        return self.value


class CountingStorage(DocumentStorage):
    """Wraps a real storage and counts round trips to it."""

    def __init__(self, inner: DocumentStorage):
        self.inner = inner
        self.reads = 0
        self.writes = 0

    async def read_document(self) -> RadioDocument:
        self.reads += 1
        return await self.inner.read_document()

    async def write_document(self, document: RadioDocument) -> None:
        self.writes += 1
        await self.inner.write_document(document)


def sample_document() -> RadioDocument:
    weekdays = [Weekday.LUNES, Weekday.MARTES, Weekday.MIERCOLES, Weekday.JUEVES, Weekday.VIERNES]
    return RadioDocument(
        stations=[
            Station(id="lima", name="Lima", url="https://stream.example/lima", frequency="95.5 FM"),
            Station(id="arequipa", name="Arequipa", url="https://stream.example/arequipa"),
        ],
        programs=[
            Program(id="1", station_id="lima", name="Hablemos Claro", host="Nicolás Lúcar",
                    start_time="08:00", end_time="11:00", days=weekdays),
            Program(id="2", station_id="lima", name="Exitosa Te Escucha", host="Katyusca Torres",
                    start_time="11:00", end_time="14:00", days=weekdays),
            Program(id="3", station_id="lima", name="Noche Esotérica", host="Vidente Hayimy",
                    start_time="22:00", end_time="00:00", days=[Weekday.SABADO]),
            Program(id="4", station_id="arequipa", name="Exitosa Perú", host="Pedro Paredes",
                    start_time="05:00", end_time="12:00", days=weekdays),
        ],
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def now() -> FakeNow:
    return FakeNow(MONDAY_10AM)


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(sample_document().model_dump_json(indent=2), encoding="utf-8")
    return path


@pytest.fixture
def storage(data_file) -> CountingStorage:
    return CountingStorage(JsonFileStorage(str(data_file), seed_default=False))


@pytest.fixture
def cache(clock: FakeClock) -> CacheManager:
    return CacheManager(clock=clock)


@pytest.fixture
def manager(storage: CountingStorage, cache: CacheManager, now: FakeNow) -> DataManager:
    return DataManager(storage, cache, now=now)


@pytest.fixture
def admin_token(monkeypatch) -> str:
    monkeypatch.setattr(settings, "ADMIN_TOKEN", ADMIN_TOKEN)
    return ADMIN_TOKEN


@pytest.fixture
def auth_headers(admin_token: str) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest_asyncio.fixture
async def client(manager: DataManager, admin_token: str) -> AsyncIterator[AsyncClient]:
    app = create_app(manager)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
