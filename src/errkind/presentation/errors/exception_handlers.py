"""Global exception handlers for FastAPI applications.

Handlers:
    error_exception_handler: Converts a raised Error to its serialized form
    generic_exception_handler: Catches all other unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from errkind.core.container import get_logger
from errkind.core.enums import Kind
from errkind.core.errors import E, Error
from errkind.presentation.errors.error_response_builder import ErrorResponseBuilder
from errkind.presentation.errors.status_codes import get_status_code


async def error_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert a raised Error to a JSON error response.

    Server-side failures (5xx) are logged at ERROR with the full chain,
    client failures (4xx) at WARNING.

    Args:
        request: FastAPI Request object.
        exc: Error raised by a route or dependency.

    Returns:
        JSONResponse with the serialized error.

    Example:
        >>> raise E(new("no rows"), "user not found", Kind.NOT_EXIST)
        >>> # Returns 404:
        >>> # {"type": "item does not exist", "error": "user not found", "code": 5}
    """
    # Type narrowing: registered only for Error
    assert isinstance(exc, Error)

    status_code = get_status_code(exc.kind)
    logger = get_logger().bind(
        request_path=request.url.path,
        request_method=request.method,
    )
    context = {
        "kind": exc.kind.name,
        "code": int(exc.kind),
        "status_code": status_code,
    }
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed", error=exc, **context)
    else:
        logger.warning("Request rejected", error_message=exc.short_message(), **context)

    return ErrorResponseBuilder.from_error(exc)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Wraps the exception as an INTERNAL error so the response never leaks
    the original message.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with a 500 serialized error
    """
    error = E(exc, "internal error", Kind.INTERNAL)
    assert error is not None

    logger = get_logger().bind(
        request_path=request.url.path,
        request_method=request.method,
    )
    logger.error("Unhandled exception", error=exc)

    return ErrorResponseBuilder.from_error(error)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(Error, error_exception_handler)

    # Catch-all for 500 errors
    app.add_exception_handler(Exception, generic_exception_handler)
