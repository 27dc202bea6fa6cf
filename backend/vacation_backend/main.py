"""
Entrypoint for the Vacation Requests API.

Run with::

    uvicorn vacation_backend.main:app --reload
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vacation_backend.database import init_db
from vacation_backend.logging_config import setup_logging
from vacation_backend.routes import vacations
from vacation_backend.schemas import UNKNOWN_ERROR

APP_NAME = "Vacation Requests API"

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_FILE") or None)

    app = FastAPI(title=APP_NAME)

    cors_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    extra = os.getenv("CORS_ORIGINS", "")
    if extra:
        cors_origins.extend(o.strip() for o in extra.split(",") if o.strip())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(vacations.router, tags=["vacations"])

    # Malformed bodies and params are client errors like any other rejection
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "; ".join(_format_validation_error(err) for err in errors) if errors else UNKNOWN_ERROR
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.on_event("startup")
    def on_startup():
        init_db()

    @app.get("/health")
    def health_check():
        return {"app_name": APP_NAME, "status": "healthy"}

    return app


def _format_validation_error(err: dict) -> str:
    location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
    return f"{location}: {err.get('msg')}" if location else str(err.get("msg"))


app = create_app()
