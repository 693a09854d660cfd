"""FastAPI application entry point."""

import os
import sys
import logging
from contextlib import asynccontextmanager
from importlib.metadata import version
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must run before importing modules that read env vars at import time (DATABASE_URL)
load_dotenv()

from api.routes import health, users
from api.server import StartupError, serve
from adapter.sql.connection import get_engine, reset_engine
from adapter.sql.models import ensure_schema
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)

# Version comes from the installed distribution (pyproject.toml at build time)
DISTRIBUTION_NAME = "users-api"
VERSION = version(DISTRIBUTION_NAME)

SERVICE_NAME = "Users API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create missing tables, dispose the pool on exit."""
    ensure_schema(get_engine())

    # Only announce the port once startup work has succeeded
    listen_port = getattr(app.state, "listen_port", None)
    if listen_port is not None:
        logger.info(f"Server listening on {listen_port}", extra={"port": listen_port})

    yield  # App runs here

    reset_engine()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Lists and creates users stored in a relational database",
    version=VERSION,
    lifespan=lifespan,
)

# CORS: "*" disables credentials (browsers reject credentials with a wildcard origin)
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(users.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


def main():
    """Run the server; exit with status 1 if it cannot start listening."""
    try:
        serve(app)
    except StartupError as e:
        logger.error("Server failed to start", extra={"error": str(e)})
        sys.exit(1)


if __name__ == "__main__":
    main()
