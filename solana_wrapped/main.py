"""Main entry point for the Solana Wrapped server."""

# Standard library imports
import sys
from typing import Optional

# Third-party library imports
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Internal imports
from solana_wrapped import __version__
from solana_wrapped.api.error_handling import global_exception_handler, validation_exception_handler
from solana_wrapped.config import get_helius_config, get_server_config, get_wrapped_config
from solana_wrapped.logging_config import RequestIdMiddleware, configure_logging, get_logger
from solana_wrapped.routes.transactions import router as transactions_router

logger = get_logger(__name__)

APP_NAME = "Solana Wrapped"


def create_application() -> FastAPI:
    """Create the FastAPI application.

    Returns:
        The configured FastAPI app
    """
    server_config = get_server_config()

    application = FastAPI(
        title=APP_NAME,
        description="Year-in-review summaries of Solana wallet activity",
        version=__version__,
    )

    # Add middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=server_config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestIdMiddleware)

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, global_exception_handler)

    # Include routers
    application.include_router(transactions_router, prefix="/api")

    @application.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @application.get("/version")
    async def version():
        """Get API version information."""
        return {
            "version": __version__,
            "name": APP_NAME,
        }

    return application


app = create_application()


def run_server(port: Optional[int] = None):
    """Run the server from command line.

    Args:
        port: Optional port override
    """
    config = get_server_config()
    configure_logging(config.log_level)

    # Override port if specified
    if port is not None:
        try:
            config.port = int(port)
        except ValueError:
            logger.error(f"Invalid port number: {port}")
            sys.exit(1)

    wrapped_config = get_wrapped_config()
    logger.info(
        f"Starting {APP_NAME} on {config.bind_address} (Environment: {config.environment})"
    )
    logger.info(f"Using Helius RPC URL: {get_helius_config().rpc_url} for year {wrapped_config.year}")

    uvicorn.run(
        "solana_wrapped.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower(),
    )
