from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import Envelope


class CacheUsage(BaseModel):
    keys: int
    size: int


class CacheCounters(BaseModel):
    hits: int
    misses: int
    sets: int
    deletes: int
    hit_rate: float


class CacheStatsData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    global_stats: CacheCounters = Field(alias="global")
    by_cache: dict[str, CacheCounters]
    memory: dict[str, CacheUsage]
    timestamp: str


class CacheStatsResponse(Envelope):
    data: CacheStatsData
