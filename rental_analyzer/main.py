"""
Main FastAPI application entry point.
"""

import logging

import uvicorn
from fastapi import FastAPI

from rental_analyzer.config import get_settings
from rental_analyzer.api import router as api_router
from rental_analyzer.db.database import init_db

settings = get_settings()


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Rental property cash flow, amortization and return analysis",
    version="0.1.0",
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.on_event("startup")
def on_startup():
    """Create database tables if they do not exist."""
    init_db()


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}


def run() -> None:
    """Run the API server with the configured host and port."""
    uvicorn.run(
        "rental_analyzer.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
