"""CORS configuration for the task board frontend."""
from fastapi.middleware.cors import CORSMiddleware
import logging

from tasktracker.config import ENVIRONMENT, FRONTEND_URL, DEV_ORIGINS, PRODUCTION_ORIGIN_REGEX

logger = logging.getLogger(__name__)

# Base allowed origins for development
ALLOWED_ORIGINS = list(DEV_ORIGINS)

# Add the configured frontend URL if provided
if FRONTEND_URL and FRONTEND_URL not in ALLOWED_ORIGINS:
    ALLOWED_ORIGINS.append(FRONTEND_URL)


def add_cors_middleware(app, environment: str = ENVIRONMENT):
    """Add CORS middleware to the FastAPI application."""
    # In production, use allow_origin_regex for wildcard support (preview deployments)
    if environment == "production":
        logger.info("Using production CORS with origin regex %s", PRODUCTION_ORIGIN_REGEX)
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=PRODUCTION_ORIGIN_REGEX,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        logger.info("Using development CORS with origins: %s", ALLOWED_ORIGINS)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
