"""
FastAPI Application Entry Point for SlotPoker.

This module creates and configures the FastAPI application with:
- HTTP routes for hand scoring and settlement
- CORS middleware for development
"""

import os
import argparse
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from slotpoker import __version__
from slotpoker.server.routes import router

# Configure logging
logging.basicConfig(
    level=os.environ.get("SLOTPOKER_LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("SlotPoker server starting up...")
    yield
    logger.info("SlotPoker server shutting down...")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="SlotPoker",
        description="Three-slot poker hand scoring and settlement API",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    return app


# Create the application instance
app = create_app()


def build_parser() -> argparse.ArgumentParser:
    """Command line options shared by run.py and the slotpoker-server script."""
    parser = argparse.ArgumentParser(description="SlotPoker Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level for the server and settlement logs",
    )
    return parser


def main(argv=None):
    """Run the server (for use as entry point)."""
    import uvicorn
    args = build_parser().parse_args(argv)

    # Read by this module when it configures logging in the server process
    os.environ["SLOTPOKER_LOG_LEVEL"] = args.log_level.upper()
    logging.getLogger().setLevel(args.log_level.upper())

    uvicorn.run(
        "slotpoker.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
