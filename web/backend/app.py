#!/usr/bin/env python3
"""
Career Compass - FastAPI Application

Career quiz API: Holland Code and Big Five questionnaires, preference
capture and ranked job recommendations, with optional LLM enrichment.

Usage:
    career-compass-web

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from database.database import init_db
from .config import get_config
from .dependencies import get_db_manager
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    session_router,
    quiz_router,
    profile_router,
    enrichment_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(get_db_manager().engine)
    logger.info("Career profile tables ready")
    yield


# Create FastAPI app
app = FastAPI(
    title="Career Compass API",
    description="API for the career quiz and job recommendations",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(session_router)
app.include_router(quiz_router)
app.include_router(profile_router)
app.include_router(enrichment_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "career-compass-web"}


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Career Compass Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
