from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from config import Settings, SERVICE_NAME, SERVICE_VERSION, configure_logging, get_settings
from routes import build_router, route_table

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the resume service application for the configured response contract"""
    if settings is None:
        settings = get_settings()

    configure_logging(settings.log_level)
    routes = route_table(settings.contract)

    # App lifecycle
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {SERVICE_NAME} ({settings.contract} contract, {len(routes)} routes)")
        yield
        logger.info(f"Shutting down {SERVICE_NAME}")

    app = FastAPI(
        title=SERVICE_NAME,
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
    )
    app.state.settings = settings

    # Security headers middleware
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        return response

    # Allow all origins if ALLOWED_ORIGINS contains "*"
    if "*" in settings.allowed_origins:
        cors_origins = ["*"]
    else:
        cors_origins = settings.allowed_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Only add if not using wildcard
    if settings.allowed_hosts != ["*"]:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)

    app.include_router(build_router(settings.contract))
    return app


def run():
    import uvicorn
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


app = create_app()

if __name__ == "__main__":
    run()
