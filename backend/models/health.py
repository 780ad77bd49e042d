"""
Health check response model.
Simple status indicator for liveness/readiness probes.
"""
from pydantic import BaseModel, ConfigDict

HEALTHY = "healthy"


class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str

    @classmethod
    def healthy(cls) -> "HealthResponse":
        return cls(status=HEALTHY)
