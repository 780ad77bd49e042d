from backend.models.health import HEALTHY, HealthResponse
from backend.models.status import RUNNING_MESSAGE, ApiStatusResponse

__all__ = ["ApiStatusResponse", "HealthResponse", "HEALTHY", "RUNNING_MESSAGE"]
