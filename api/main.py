"""Filter Set FastAPI Application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import get_settings
from api.routers import customers, filters
from config import config
from config.logging_config import setup_logging

settings = get_settings()

setup_logging("DEBUG" if settings.debug else config.app.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for declaring search filters, validating submitted filter state and querying with the result",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(filters.router, prefix="/api/filters", tags=["Filters"])
app.include_router(customers.router, prefix="/api/customers", tags=["Customers"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "filters": "/api/filters",
            "customers": "/api/customers",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from api.services.database import get_db

    try:
        db = get_db()
        count = db.connect().execute("SELECT COUNT(*) FROM customers").fetchone()[0]
        return {
            "status": "healthy",
            "database": "connected",
            "total_customers": count,
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }
