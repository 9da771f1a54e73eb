"""FastAPI application entrypoint for the room lobby."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi import HTTPException
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import roomlobby.runtime as runtime
from roomlobby.api.errors import handle_http_exception
from roomlobby.api.errors import handle_validation_error
from roomlobby.api.routers.rooms import router as rooms_router
from roomlobby.core.config import load_settings


def startup() -> None:
    """Provision the schema before handling traffic."""
    runtime.startup()


@asynccontextmanager
async def lifespan(_: FastAPI):
    startup()
    yield


settings = load_settings()
app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.include_router(rooms_router)


@app.exception_handler(HTTPException)
async def handle_http_exception_route(request: Request, exc: HTTPException) -> JSONResponse:
    """Adapter used by FastAPI exception handling."""
    return await handle_http_exception(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error_route(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await handle_validation_error(request, exc)


@app.get("/api/health")
def health() -> dict[str, bool]:
    return {"ok": True}


__all__ = [
    "app",
    "startup",
]
