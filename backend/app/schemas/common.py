from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Envelope(BaseModel):
    """Base for every JSON response: ``{"success": ..., "data": ..., "_meta": {...}}``."""

    # The alias is used both ways, since FastAPI re-validates dumped responses
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    meta: dict[str, Any] = Field(default_factory=dict, alias="_meta")


class ActionResponse(Envelope):
    message: str | None = None
