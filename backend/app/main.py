import asyncio
import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from app.config import settings
from app.core.cache import CacheManager
from app.core.middleware import setup_middleware
from app.services.data_manager import DataManager
from app.services.storage_service import JsonFileStorage

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_data_manager() -> DataManager:
    """Storage + caches for one application instance, sized from settings."""
    storage = JsonFileStorage(settings.DATA_FILE, seed_default=settings.SEED_DEFAULT_DATA)
    cache = CacheManager(ttls=settings.cache_ttls, document_ttl=settings.FILE_CACHE_TTL)
    return DataManager(storage, cache)


async def _sweep_loop(cache: CacheManager, interval: int) -> None:
    """Periodically drop expired entries. Reads never depend on this running."""
    while True:
        await asyncio.sleep(interval)
        try:
            cache.sweep_expired()
        except Exception as e:
            logger.warning("Cache sweep failed: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    manager: DataManager = app.state.data_manager

    if settings.CACHE_WARM_UP:
        try:
            await manager.warm_up()
        except Exception as e:
            logger.warning("Cache warm-up failed: %s", e)

    sweep_task = None
    if settings.CACHE_SWEEP_INTERVAL_SECONDS > 0:
        sweep_task = asyncio.create_task(
            _sweep_loop(manager.cache, settings.CACHE_SWEEP_INTERVAL_SECONDS)
        )
        logger.info("Cache sweeper started (every %ds)", settings.CACHE_SWEEP_INTERVAL_SECONDS)

    yield

    # Shutdown: stop the sweeper
    if sweep_task is not None:
        sweep_task.cancel()
        try:
            await sweep_task
        except asyncio.CancelledError:
            pass
        logger.info("Cache sweeper stopped")


def create_app(data_manager: DataManager | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Radio Exitosa API",
        version="0.1.0",
        description="Multi-station internet radio: stations, program grid, on-air lookup",
        debug=settings.APP_DEBUG,
        lifespan=lifespan,
    )
    # Built eagerly so the app also works where lifespan events never fire
    app.state.data_manager = data_manager or build_data_manager()

    setup_middleware(app)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    # Register API routers
    from app.api.v1 import router as api_v1_router
    app.include_router(api_v1_router, prefix="/api/v1")

    return app


app = create_app()
