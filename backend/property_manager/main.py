"""
Property Manager API
====================
Local backend for the property management desktop app.

Data lives in flat JSON files (one array per collection) under the
configured data directory. Property occupancy is derived from ACTIVE
leases and re-synced after every lease change.

Run:
    python -m property_manager.main
    property-manager            (console script)
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from property_manager.api.routes import router
from property_manager.api.records import router as records_router
from property_manager.api.leases import router as leases_router
from property_manager.api.auth import router as auth_router
from property_manager.api.deps import get_store
from property_manager.config import get_settings
from property_manager.db.seed import seed_if_empty

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Write sample data on startup when enabled and the data dir has none."""
    if settings.seed_sample_data:
        seed_if_empty(get_store())
    yield


app = FastAPI(
    title="Property Manager API",
    description="""
    Backend for managing rental properties.

    ## Resources
    - **Properties**: units with address, rent and an occupancy status
    - **Tenants**: contact details plus their leases
    - **Leases**: tie a tenant to a property; creating one can generate monthly rent payments
    - **Payments**: rent, deposits and fees with due/paid dates
    - **Maintenance**: requests against a property

    ## Derived data
    - **Dashboard**: occupancy, expected income, pending/overdue payments
    - **Property status**: OCCUPIED/AVAILABLE follows the ACTIVE leases
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api", tags=["System"])
app.include_router(records_router, prefix="/api")
app.include_router(leases_router, prefix="/api")
app.include_router(auth_router, prefix="/api", tags=["Auth"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or incomplete request bodies are client errors (400)."""
    logger.info(f"[VALIDATION] {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Property Manager API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "running",
        "dataDir": str(settings.data_dir),
    }


def run():
    logger.info(f"[SERVER] Starting on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "property_manager.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
