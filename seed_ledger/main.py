"""
Seed Ledger Service API

This module assembles the FastAPI application for seed-inventory bookkeeping.
It records inward shipments, outward shipments, returns and expiry events in
four independent ledgers, with PostgreSQL persistence.

Endpoints:
    POST /api/{ledger}: Record an entry
    GET /api/{ledger}: List a ledger, newest first
    DELETE /api/{ledger}/{id}: Delete an entry
    GET /api/{ledger}/export/csv: Export a ledger to CSV
    GET /api/reports: All four ledgers in one response
    GET /healthz: Health check endpoint for orchestration systems
    GET /*: Static application shell

Run with ``seed-ledger`` or ``uvicorn --factory seed_ledger.main:create_app``.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .api import build_ledger_router, reports_router
from .config import Settings
from .database import create_db_engine, create_session_factory, init_schema
from .ledgers import LEDGERS
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def initialize_datastore(engine: Engine) -> None:
    """
    Create the ledger tables or terminate the process.

    A datastore that is unreachable or rejects the DDL at startup is not
    retried.

    Raises:
        SystemExit: if schema creation fails
    """
    try:
        init_schema(engine)
    except SQLAlchemyError as e:
        logger.critical(f"Database initialization failed: {e}")
        raise SystemExit(1) from e


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The database engine is built here and owned by the application; the
    schema is created when the application starts.

    Args:
        settings: Service settings; read from the environment when omitted

    Returns:
        FastAPI: configured application
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        initialize_datastore(engine)
        yield
        engine.dispose()

    app = FastAPI(title="seed-ledger-service", lifespan=lifespan)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database operation failed"},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database operation failed"},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.get("/healthz", response_model=dict)
    def health():
        """
        Health check endpoint for the ledger service.

        Returns:
            dict: {"status": "healthy"} while the process is serving requests
        """
        return {"status": "healthy"}

    app.include_router(reports_router, prefix="/api/reports", tags=["reports"])
    for ledger in LEDGERS.values():
        app.include_router(build_ledger_router(ledger), prefix=f"/api/{ledger.name}", tags=[ledger.name])

    static_dir = Path(settings.static_dir).resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        """Serve static files, falling back to ``index.html`` for any other path."""
        candidate = (static_dir / full_path).resolve()
        if full_path and candidate.is_file() and static_dir in candidate.parents:
            return FileResponse(candidate)

        index = static_dir / "index.html"
        if not index.is_file():
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(index)

    return app


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
