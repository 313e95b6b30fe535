"""Error handling utilities for API endpoints."""

import functools
import logging
from typing import Any, Awaitable, Callable

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from solana_wrapped.utils.errors import (
    ConfigurationError,
    HeliusRpcError,
    SolanaWrappedError,
    ValidationError,
)

# Set up logger
logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the ``{"message": ...}`` error payload."""
    return JSONResponse({"message": message}, status_code=status_code)


def with_error_handling(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
    """Decorator to map pipeline errors onto HTTP responses.

    Validation errors become 400, configuration errors, upstream failures and
    anything unexpected become 500. The error message is passed through.

    Args:
        func: The endpoint function to wrap

    Returns:
        Wrapped function with error handling
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except ValidationError as e:
            logger.warning(f"Invalid request: {e.message}")
            return error_response(e.message, e.status_code)
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e.message}")
            return error_response(e.message, e.status_code)
        except HeliusRpcError as e:
            logger.error(f"Helius error: {e.message}")
            return error_response(e.message, e.status_code)
        except SolanaWrappedError as e:
            logger.error(f"Request failed: {e.message}")
            return error_response(e.message, e.status_code)
        except Exception as e:
            logger.error(f"Unexpected error: {str(e)}", exc_info=True)
            return error_response(str(e) or "Failed to fetch transactions", 500)

    return wrapper


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed query parameters as 400 with the standard payload."""
    errors = exc.errors()
    fields = ", ".join(
        ".".join(str(part) for part in error.get("loc", ()) if part != "query")
        for error in errors
    )
    logger.warning(f"Request validation failed for {request.url.path}: {fields}")
    return error_response(f"Invalid request parameters: {fields}" if fields else "Invalid request parameters", 400)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions.

    Args:
        request: FastAPI request
        exc: Exception that was raised

    Returns:
        JSON response with error details
    """
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return error_response("Internal server error", 500)
