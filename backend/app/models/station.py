from pydantic import BaseModel, ConfigDict


class Station(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    url: str
    image: str | None = None
    frequency: str | None = None
    city: str | None = None
    description: str | None = None
