# This project was developed with assistance from AI tools.
"""Health check schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    name: str
    status: str
    message: str
    version: str | None = None
