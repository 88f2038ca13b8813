import json
import logging
import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.config import settings
from app.database import Base, engine, get_db
from app.errors import register_exception_handlers
from app.routers import images, plant_groups, plants, seed

logger = logging.getLogger("plantcatalog")
logging.basicConfig(level=settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan for startup/shutdown events."""
    if settings.create_tables_on_startup:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
    yield


app = FastAPI(
    title="Plant Catalog API",
    description="Catalog of plant groups, plants, care guides and images",
    version="1.0.0",
    lifespan=lifespan
)

register_exception_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Set basic security headers for all API responses."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


@app.middleware("http")
async def structured_logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    req_id = request.headers.get("X-Request-ID", str(uuid4()))

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = req_id
        return response
    finally:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(json.dumps({
            "request_id": req_id,
            "path": request.url.path,
            "method": request.method,
            "status": status_code,
            "duration_ms": duration_ms,
        }))


if settings.enable_metrics:
    Instrumentator().instrument(app).expose(app, include_in_schema=False, should_gzip=True)

# Include routers
app.include_router(plant_groups.router)
app.include_router(plants.router)
app.include_router(images.router)

# Admin routers
app.include_router(plant_groups.admin_router)
app.include_router(plants.admin_router)
app.include_router(images.admin_router)
app.include_router(seed.admin_router)


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint for Docker."""
    try:
        db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Health check could not reach the database")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "db": "error"},
        )
    return {"status": "healthy", "db": "ok"}


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": "Plant Catalog API",
        "version": "1.0.0",
        "docs": "/docs",
        "public": {
            "groups": "/api/plant-groups",
            "group_plants": "/api/plant-groups/{id}/plants",
            "plant": "/api/plants/{id}",
            "image": "/api/images/{id}"
        },
        "admin": {
            "seed": "/api/admin/seed",
            "reset": "/api/admin/reset"
        }
    }
