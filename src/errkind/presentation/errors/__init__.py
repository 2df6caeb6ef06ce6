"""HTTP error responses for annotated errors.

Exports:
    ErrorResponseBuilder: Build JSON responses from Error values
    get_status_code: Map a Kind to its HTTP status code
    status_code_for: Map any error value to an HTTP status code
    register_exception_handlers: Register exception handlers with FastAPI
"""

from errkind.presentation.errors.error_response_builder import ErrorResponseBuilder
from errkind.presentation.errors.exception_handlers import (
    register_exception_handlers,
)
from errkind.presentation.errors.status_codes import get_status_code, status_code_for

__all__ = [
    "ErrorResponseBuilder",
    "get_status_code",
    "register_exception_handlers",
    "status_code_for",
]
