"""
FastAPI application entry point for the Block Palette API.

This module sets up the FastAPI application, includes routes,
and handles CORS and error handling.
"""

import logging
import os
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blockpalette import config
from blockpalette.api.routes import blocks, palettes

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("blockpalette.api")

# Create FastAPI app
app = FastAPI(
    title=config.API_TITLE,
    description="API for building color-aware Minecraft block selections and palettes",
    version=config.API_VERSION,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add routes
app.include_router(blocks.router)
app.include_router(palettes.router)


@app.get("/", tags=["health"])
async def root() -> Dict[str, Any]:
    """
    Root endpoint for health checks.

    Returns:
        Dictionary with API name, version, and status.
    """
    return {"name": config.API_TITLE, "version": config.API_VERSION, "status": "online"}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to catch unhandled errors.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An internal server error occurred"},
    )


def start_api():
    """
    Start the API using uvicorn.

    This function is the entry point when running the API.
    """
    import uvicorn

    host = os.environ.get("BLOCKPALETTE_API_HOST", "0.0.0.0")
    port = int(os.environ.get("BLOCKPALETTE_API_PORT", 8000))

    logger.info(f"Starting Block Palette API on {host}:{port}")
    uvicorn.run("blockpalette.api.main:app", host=host, port=port, log_level="info")


if __name__ == "__main__":
    start_api()
