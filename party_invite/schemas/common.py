from pydantic import BaseModel


class OkResponse(BaseModel):
    ok: bool = True


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    database: bool
