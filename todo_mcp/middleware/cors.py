"""CORS configuration for the HTTP tool surface."""
from fastapi.middleware.cors import CORSMiddleware
import logging
import os

logger = logging.getLogger(__name__)

# Get environment configuration
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "")

# Base allowed origins for development
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# Add an extra client origin if provided
if FRONTEND_URL and FRONTEND_URL not in ALLOWED_ORIGINS:
    ALLOWED_ORIGINS.append(FRONTEND_URL)


def add_cors_middleware(app):
    """Add CORS middleware to the FastAPI application."""
    # In production only the configured client origin is allowed
    if ENVIRONMENT == "production":
        origins = [FRONTEND_URL] if FRONTEND_URL else []
        logger.info(f"[PROD] Using production CORS with origins: {origins}")
    else:
        origins = ALLOWED_ORIGINS
        logger.info(f"[DEV] Using development CORS with origins: {origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
