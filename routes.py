"""Route table for the resume service.

Each contract maps the same fixed set of (method, path) pairs to handlers that
build a literal payload. Nothing about the request is consulted, so every
handler is safe to call concurrently.
"""
from typing import Awaitable, Callable, List, NamedTuple

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from health import health, health_text
from resume import welcome, welcome_text, resume, resume_text

CONTRACTS = ("json", "text")


class Route(NamedTuple):
    method: str
    path: str
    handler: Callable[[], Awaitable]


JSON_ROUTES: List[Route] = [
    Route("GET", "/", welcome),
    Route("GET", "/api/", welcome),
    Route("GET", "/health", health),
    Route("GET", "/api/health", health),
    Route("GET", "/api/resume", resume),
    Route("GET", "/resume", resume),
]

TEXT_ROUTES: List[Route] = [
    Route("GET", "/", welcome_text),
    Route("GET", "/health", health_text),
    Route("GET", "/api/health", health_text),
    Route("GET", "/api/resume", resume_text),
    Route("GET", "/resume", resume_text),
]


def route_table(contract: str) -> List[Route]:
    """Return the ordered route entries for a contract"""
    if contract == "json":
        return list(JSON_ROUTES)
    if contract == "text":
        return list(TEXT_ROUTES)
    raise ValueError(f"Unknown response contract: {contract!r} (expected one of {', '.join(CONTRACTS)})")


def build_router(contract: str) -> APIRouter:
    """Register every route of the contract on a fresh APIRouter"""
    response_class = PlainTextResponse if contract == "text" else JSONResponse
    router = APIRouter(default_response_class=response_class)

    for route in route_table(contract):
        router.add_api_route(
            route.path,
            route.handler,
            methods=[route.method],
            name=f"{route.handler.__name__}:{route.path}",
        )

    return router
