"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import httpx
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from google import genai
from starlette.exceptions import HTTPException as StarletteHTTPException
from taskboard_common.logging import setup_logging

from config import load_config
from dependencies import build_voice_task_handler
from response_models import ErrorResponse, FieldError
from routes import system_router, voice_router

patch_all()

_config = load_config()

logger = setup_logging(_config.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Creates the provider clients once and shares them across requests."""
    gemini_client = genai.Client(api_key=_config.gemini.api_key)
    async with httpx.AsyncClient(
        timeout=_config.elevenlabs.timeout_seconds
    ) as http_client:
        app.state.voice_task_handler = build_voice_task_handler(
            _config, http_client, gemini_client
        )
        logger.info("Provider clients initialized")
        try:
            yield
        finally:
            await gemini_client.aio.aclose()
    logger.info("Provider clients closed")


app = FastAPI(title="Taskboard Voice Service", lifespan=lifespan)
app.state.config = _config
app.include_router(system_router)
app.include_router(voice_router)


def _error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.url.path} not found"
    else:
        message = str(exc.detail)
    return _error(exc.status_code, ErrorResponse(message=message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        FieldError(
            path=".".join(str(part) for part in error.get("loc", ())),
            message=error.get("msg", ""),
        )
        for error in exc.errors()
    ]
    return _error(400, ErrorResponse(message="Validation failed", errors=errors))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return _error(500, ErrorResponse(message="Internal server error"))
