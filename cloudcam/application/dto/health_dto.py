from pydantic import BaseModel


class HealthResponse(BaseModel):
    """DTO for liveness probe"""
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    """DTO for every error body returned by the API"""
    error: str
