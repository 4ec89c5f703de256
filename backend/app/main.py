"""
Members API - FastAPI Application

Member and department directory backed by MongoDB.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.core.logging_config import setup_logging
from app.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.database.connections import get_mongo_client, close_connections
from app.database.databases import directory_db
from app.routers import auth, health, members, departments

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up Members API...")

    try:
        client = await get_mongo_client()
        await directory_db.create_directory_indexes(client[directory_db.DB_NAME])
        logger.info("✓ Database indexes created")
    except PyMongoError as e:
        logger.warning(f"⚠ Database initialization warning: {e}")

    yield

    logger.info("Shutting down Members API...")
    await close_connections()
    logger.info("✓ Database connections closed")


# Create FastAPI application
app = FastAPI(
    title="Members API",
    description="""
## Members & Departments API

### Features
- **Members**: List, filter and paginate members joined with their user records
- **Departments**: Manage departments referenced by member records
- **Authentication**: JWT tokens issued for credential accounts

### Authentication
All `/api/v1` endpoints require a JWT token passed as a query parameter:
```
GET /api/v1/members?token=your_jwt_token
```

Obtain a token via `POST /api/auth/login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(SecurityHeadersMiddleware, allowed_origins=settings.allowed_origins)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(members.router)
app.include_router(departments.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "API services are nominal!!",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
