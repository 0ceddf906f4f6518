"""Environment configuration for the Task Tracker API."""
import os
from dotenv import load_dotenv

# Load variables from a local .env file if one exists
load_dotenv()

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Fallback to a local SQLite file for development
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./task_tracker.db")

FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")

# Origins accepted outside production (Vite dev server and the API itself)
DEV_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
]

# Origins accepted in production, as a regex
PRODUCTION_ORIGIN_REGEX = os.environ.get(
    "PRODUCTION_ORIGIN_REGEX", r"https://.*\.vercel\.app"
)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Owner used by the demo board when no user is supplied
DEMO_USER_ID = os.environ.get("DEMO_USER_ID", "user-123")
