"""Main FastAPI application for the Task Tracker API."""
from fastapi import FastAPI
import logging

from tasktracker.config import LOG_LEVEL, ENVIRONMENT
from tasktracker.db.init import init_db
from tasktracker.middleware.cors import add_cors_middleware
from tasktracker.middleware.errors import add_error_handlers
from tasktracker.routers import board_router, tasks_router, users_router

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Create FastAPI application
app = FastAPI(
    title="Task Tracker API",
    description="Create, edit, filter, complete and delete tasks",
    version=VERSION,
)

# Add CORS middleware
add_cors_middleware(app)

# Map domain errors to JSON responses
add_error_handlers(app)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup."""
    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed; requests touching the database will fail")
        return
    logger.info("Application startup complete (environment: %s).", ENVIRONMENT)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Organize your tasks efficiently",
        "title": "Task Tracker API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(tasks_router, prefix="/api")  # /api/users/{user_id}/tasks, /api/tasks/{task_id}
app.include_router(board_router, prefix="/api")  # /api/users/{user_id}/board
app.include_router(users_router, prefix="/api")  # /api/users


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "tasktracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=ENVIRONMENT == "development",
    )
