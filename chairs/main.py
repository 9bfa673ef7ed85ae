import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .core.correlation import CORRELATION_HEADER, correlation_middleware, get_correlation_id
from .core.errors import ChairsError
from .core.logging_config import setup_logging
from .models import ErrorBody, ErrorResponse
from .routers import graph_admin, health

setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()
app = FastAPI(title=settings.app_name, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(correlation_middleware)


def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    correlation_id = get_correlation_id(request)
    body = ErrorResponse(error=ErrorBody(code=code, message=message), correlationId=correlation_id)
    headers = {CORRELATION_HEADER: correlation_id} if correlation_id else None
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


@app.exception_handler(ChairsError)
async def chairs_error_handler(request: Request, exc: ChairsError):
    logger.error("%s %s failed: %s (status %d)", request.method, request.url.path, exc.detail, exc.status_code)
    return _error_response(request, exc.status_code, exc.code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return _error_response(request, 422, "VALIDATION", "Malformed request body")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(request, 500, "INTERNAL", "Internal server error")


app.include_router(health.router)
app.include_router(graph_admin.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
