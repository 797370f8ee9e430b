from pydantic import BaseModel


class ErrorBody(BaseModel):
    error: str
    message: str | None = None


class HealthResponse(BaseModel):
    status: str
    missing: list[str] = []
