"""
Main FastAPI application for the workforce portal.
"""

import logging
import logging.config
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from workforce import __version__
from workforce.api import attendance, auth, dashboard, employees, leave_requests
from workforce.config import settings, validate_settings
from workforce.database import engine, init_db
from workforce.exceptions import DomainError, InvalidInput

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        init_db()
    logger.info("Workforce portal started")
    yield
    logger.info("Workforce portal stopped")


async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(part) for part in error["loc"][1:]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=InvalidInput.status_code,
        content={"detail": InvalidInput.message, "code": InvalidInput.code, "errors": errors},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "code": "internal_error"},
    )


def create_app() -> FastAPI:
    """Build the application. A missing SECRET_KEY stops startup here."""
    validate_settings(settings)
    logging.config.dictConfig(settings.get_logging_config())

    app = FastAPI(
        title="Workforce Portal",
        description="Employee records, daily attendance and leave requests",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "authentication", "description": "Login and own profile"},
            {"name": "employees", "description": "Employee management (admin)"},
            {"name": "attendance", "description": "Daily check-in and check-out"},
            {"name": "leave-requests", "description": "Leave submission and review"},
            {"name": "dashboard", "description": "Aggregate statistics (admin)"},
        ],
    )

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    for module in (auth, employees, attendance, leave_requests, dashboard):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint for monitoring"""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            raise HTTPException(status_code=503, detail="Service unavailable")

        return {
            "status": "healthy",
            "database": "connected",
            "version": __version__,
        }

    return app


app = create_app()
