from config import SERVICE_NAME, SERVICE_VERSION
from models import HealthResponse

HEALTH_TEXT = "Application is healthy and running!"


async def health() -> HealthResponse:
    """Health check that doesn't depend on external services"""
    return HealthResponse(status="UP", service=SERVICE_NAME, version=SERVICE_VERSION)


async def health_text() -> str:
    return HEALTH_TEXT
