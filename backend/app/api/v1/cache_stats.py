"""
Admin cache dashboard — counters, memory estimates, manual flush.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_data_manager, require_admin
from app.core.exceptions import BadRequestError
from app.schemas.cache import CacheStatsData, CacheStatsResponse
from app.schemas.common import ActionResponse
from app.services.data_manager import DataManager

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin/cache-stats",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=CacheStatsResponse)
async def get_cache_stats(manager: DataManager = Depends(get_data_manager)):
    cache = manager.cache
    return CacheStatsResponse(
        data=CacheStatsData(
            global_stats=cache.global_stats(),
            by_cache=cache.stats(),
            memory=cache.memory_usage(),
            timestamp=datetime.now(timezone.utc).isoformat(),
        ),
    )


@router.delete("", response_model=ActionResponse)
async def clear_cache(
    cache: str | None = Query(None, description="Cache to flush; all caches when omitted"),
    manager: DataManager = Depends(get_data_manager),
):
    if cache is not None and cache not in manager.cache.names:
        raise BadRequestError(f"Unknown cache '{cache}'. Valid: {', '.join(manager.cache.names)}")

    manager.cache.flush(cache)
    logger.info("Admin flushed cache: %s", cache or "all")
    return ActionResponse(
        message=f"Cache {cache} cleared" if cache else "All caches cleared",
        meta={"timestamp": datetime.now(timezone.utc).isoformat()},
    )
