from config import SERVICE_NAME
from models import WelcomeResponse, ResumeResponse

WELCOME_TEXT = "Hello! Welcome to resume generator. This application is under development."
RESUME_TEXT = "Resume service endpoint - Coming soon!"

RESUME_FEATURES = ("REST API", "Health Checks", "Docker Support", "Kubernetes Ready")


async def welcome() -> WelcomeResponse:
    return WelcomeResponse(
        message=f"Welcome to {SERVICE_NAME}",
        endpoints="/api/health, /api/resume"
    )


async def welcome_text() -> str:
    return WELCOME_TEXT


async def resume() -> ResumeResponse:
    """Placeholder resume description"""
    return ResumeResponse(
        name="Sample Resume Service",
        description="A Spring Boot microservice for resume management",
        technology="Java Spring Boot",
        features=list(RESUME_FEATURES)
    )


async def resume_text() -> str:
    return RESUME_TEXT
