from fastapi import APIRouter

from app.api.v1.stations import router as stations_router
from app.api.v1.programs import router as programs_router
from app.api.v1.current_program import router as current_program_router
from app.api.v1.cache_stats import router as cache_stats_router

router = APIRouter()
router.include_router(stations_router)
router.include_router(programs_router)
router.include_router(current_program_router)
router.include_router(cache_stats_router)
