"""Error response builder.

Builds JSON responses carrying the serialized form of an ``Error``.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi.responses import JSONResponse

from errkind.core.errors import Error
from errkind.presentation.errors.status_codes import get_status_code


class ErrorResponseBuilder:
    """Build JSON error responses from annotated errors.

    The response status comes from the error kind; the body is the
    ``{"detail", "type", "error", "code"}`` payload.

    Example:
        >>> error = E(new("connection refused"), "item store offline", Kind.TRANSIENT)
        >>> response = ErrorResponseBuilder.from_error(error)
        >>> response.status_code
        503
    """

    @staticmethod
    def from_error(error: Error) -> JSONResponse:
        """Convert an Error to a JSON response.

        Args:
            error: Annotated error to convert

        Returns:
            JSONResponse with the serialized error as content
        """
        return JSONResponse(
            status_code=get_status_code(error.kind),
            content=error.to_dict(),
        )
