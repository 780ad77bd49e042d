from pydantic import BaseModel, ConfigDict

RUNNING_MESSAGE = "Backend API running on EKS"


class ApiStatusResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str

    @classmethod
    def running(cls) -> "ApiStatusResponse":
        """Informational payload served from the API root"""
        return cls(message=RUNNING_MESSAGE)
