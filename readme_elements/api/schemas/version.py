from pydantic import BaseModel


class VersionResponse(BaseModel):
    """Build identification returned by the version endpoint."""

    version: str
    revision: str
    tags: list[str]


class HealthResponse(BaseModel):
    status: str
