"""Response body for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field

DatabaseStatus = Literal["connected", "disconnected"]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: str = Field(description="Server time, ISO 8601 UTC")
    environment: Literal["dev", "prod"]
    # The process answers even when SQLite cannot be reached; monitors key off this field.
    database: DatabaseStatus
