"""
Quiz API Server

FastAPI server for authoring quizzes and scoring submissions:
- Quiz / question CRUD backed by SQLite (cascade delete)
- Learner and admin views of questions
- Answer scoring engine
- Uniform {status, message, data} response envelope
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

import app_state
from core.config import get_config
from core.exceptions import AppError
from core.logger import get_logger, setup_logging
from core.responses import send_error
from quiz.router import router as quiz_router

# =============================================================================
# CONFIGURATION
# =============================================================================

config = get_config()
setup_logging(config.log_level, config.log_format.value)
logger = get_logger("server")


# =============================================================================
# FASTAPI APP
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle."""
    logger.info(f"Starting Quiz API ({config.environment})...")
    await app_state.get_store()
    yield
    await app_state.cleanup()
    logger.info("Quiz API stopped")


app = FastAPI(
    title="Quiz API",
    description="Quiz authoring and answer scoring backend",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with status and latency."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({elapsed_ms:.1f}ms, ip={request.client.host if request.client else '-'})"
    )
    return response


# =============================================================================
# ERROR HANDLERS
# =============================================================================

def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = [str(item) for item in error.get("loc", ()) if item != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return ", ".join(parts)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Domain errors -> envelope with the mapped status code."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{type(exc).__name__} on {request.method} {request.url.path}: "
        f"{exc.message} {exc.details}"
    )
    return send_error(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Schema failures -> 400 with field-level messages."""
    message = f"Validation failed: {_format_validation_errors(exc)}"
    logger.warning(f"Validation error on {request.method} {request.url.path}: {message}")
    return send_error(message, 400)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        logger.warning(f"Route not found: {request.method} {request.url.path}")
        return send_error(f"Route {request.url.path} not found", 404)
    return send_error(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Anything else -> 500; detail only outside production."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    message = "Internal server error" if get_config().is_production else (str(exc) or "Something went wrong")
    return send_error(message, 500)


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================

@app.get("/health")
async def health_check():
    """Liveness + database readiness."""
    try:
        store = await app_state.get_store()
        database = "ok" if await store.ping() else "schema missing"
    except AppError as e:
        database = e.message

    healthy = database == "ok"
    return {
        "status": "success" if healthy else "error",
        "message": "Quiz API is running" if healthy else "Quiz API is degraded",
        "data": {
            "environment": get_config().environment,
            "database": database,
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        },
    }


# =============================================================================
# ROUTERS
# =============================================================================

app.include_router(quiz_router)


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.host, port=config.port)
