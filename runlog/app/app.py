# This file loads env variables and must thus be imported before anything else.
from . import env_loader  # noqa: F401
from .env_loader import get_current_environment

import logging

from fastapi import FastAPI

from .log_config import configure_logging
from .models import EnvironmentResponse
from .routers import chat_router, runs_router

"""FastAPI application setup for the running log.

Exposes the chat conversation over HTTP plus read-only run, stats and CSV
export routes.
"""

logger = logging.getLogger(__name__)

app = FastAPI(title="runlog")
app.include_router(chat_router)
app.include_router(runs_router)

configure_logging()


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint that returns 200 status."""
    return {"status": "healthy"}


@app.get("/environment", response_model=EnvironmentResponse)
def get_environment() -> EnvironmentResponse:
    """Get the current environment configuration."""
    return EnvironmentResponse(environment=get_current_environment())
