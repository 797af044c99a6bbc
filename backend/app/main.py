# backend/app/main.py

import logging
import os
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError, TimeoutError as SA_TimeoutError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.gzip import GZipMiddleware

from . import models  # noqa: F401  registers tables on Base.metadata
from .api import api_custom_package, api_employee, api_hotel, api_package, api_vehicle
from .core.config import settings, FRONTEND_ORIGINS
from .core.observability import setup_logging, setup_tracer
from .database import Base, engine
from .utils.errors import AppError

# Configure logging before creating any loggers
setup_logging()
logger = logging.getLogger(__name__)

_BOOT_TS = time.time()

Base.metadata.create_all(bind=engine)

# Always use ORJSONResponse for JSON payloads
app = FastAPI(title="Travel Package Booking API", default_response_class=ORJSONResponse)
setup_tracer(app)


app.add_middleware(
    CORSMiddleware,
    allow_origins=FRONTEND_ORIGINS,
    allow_credentials="*" not in FRONTEND_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("CORS origins set to: %s", FRONTEND_ORIGINS)
app.add_middleware(GZipMiddleware, minimum_size=1024)


def _error_content(message: str, field_errors: dict | None = None) -> dict:
    content = {"success": False, "message": message}
    if field_errors:
        content["field_errors"] = field_errors
    return content


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Turn anything unhandled into a JSON 500 and log it."""
    try:
        return await call_next(request)
    except SA_TimeoutError as exc:  # DB pool timeout -> 503 to reduce retry storms
        logger.error("DB timeout at %s: %s", request.url.path, str(exc))
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=_error_content("Database busy, please retry"),
        )
    except Exception as exc:
        logger.exception("Unhandled error at %s: %s", request.url.path, exc)
        message = "Internal Server Error" if settings.is_production else str(exc) or "Internal Server Error"
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_content(message),
        )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    lvl = logger.warning if exc.status_code < 500 else logger.error
    lvl("%s at %s: %s", type(exc).__name__, request.url.path, exc.message)
    return ORJSONResponse(status_code=exc.status_code, content=exc.to_content())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning("HTTP error %s at %s: %s", exc.status_code, request.url.path, exc.detail)
    return ORJSONResponse(
        status_code=exc.status_code,
        content=_error_content(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report body/path validation problems as a 400 with per-field errors."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    field_errors: dict[str, str] = {}
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        key = ".".join(loc) or "body"
        msg = str(err.get("msg", "Invalid value"))
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        field_errors.setdefault(key, msg)
    message = next(iter(field_errors.values()), "Invalid request data")
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_content(message, field_errors),
    )


@app.get("/healthz", tags=["health"])
def healthz():
    """Liveness plus a synchronous DB ping."""
    body = {
        "status": "ok",
        "uptime_s": round(time.time() - _BOOT_TS, 1),
        "pid": os.getpid(),
    }
    t0 = time.perf_counter()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Health DB ping failed: %s", exc)
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={**body, "status": "error", "error": str(exc)},
            headers={"Cache-Control": "no-store"},
        )
    body["db_ping_ms"] = round((time.perf_counter() - t0) * 1000.0, 2)
    return ORJSONResponse(content=body, headers={"Cache-Control": "no-store"})


api_prefix = settings.API_PREFIX  # usually "/api"

app.include_router(
    api_custom_package.router,
    prefix=f"{api_prefix}/custom-packages",
    tags=["custom-packages"],
)
app.include_router(api_employee.router, prefix=f"{api_prefix}/employees", tags=["employees"])
app.include_router(api_hotel.router, prefix=f"{api_prefix}/hotels", tags=["hotels"])
app.include_router(api_vehicle.router, prefix=f"{api_prefix}/vehicles", tags=["vehicles"])
app.include_router(api_package.router, prefix=f"{api_prefix}/packages", tags=["packages"])


# ─── A simple root check ─────────────────────────────────────────────────────────────
@app.get("/")
async def root():
    return {"message": "Welcome to the Travel Package Booking API"}
