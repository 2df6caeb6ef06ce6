"""Kind to HTTP status code mapping.

Exports:
    get_status_code: Map a Kind to its HTTP status code
    status_code_for: Map any error value to an HTTP status code
"""

from fastapi import status

from errkind.core.enums import Kind
from errkind.core.errors import Error

# Keyed only by Kind; UNKNOWN, INTERNAL and IO fall through to 500
_KIND_STATUS: dict[Kind, int] = {
    Kind.INVALID: status.HTTP_400_BAD_REQUEST,
    Kind.DECRYPT: status.HTTP_400_BAD_REQUEST,
    Kind.UNMARSHAL: status.HTTP_400_BAD_REQUEST,
    Kind.PERMISSION: status.HTTP_401_UNAUTHORIZED,
    Kind.PRIVATE: status.HTTP_401_UNAUTHORIZED,
    Kind.TRANSIENT: status.HTTP_503_SERVICE_UNAVAILABLE,
    Kind.NOT_EXIST: status.HTTP_404_NOT_FOUND,
    Kind.UNSUPPORTED: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    Kind.NOT_ACCEPTABLE: status.HTTP_406_NOT_ACCEPTABLE,
    Kind.DUPLICATED: status.HTTP_409_CONFLICT,
}


def get_status_code(kind: Kind) -> int:
    """Map an error kind to an HTTP status code.

    Args:
        kind: Error kind

    Returns:
        HTTP status code (400-599)

    Example:
        >>> get_status_code(Kind.NOT_EXIST)
        404
    """
    return _KIND_STATUS.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def status_code_for(err: object) -> int:
    """Map an error value to an HTTP status code.

    ``Error`` values map by kind; anything else is a 500.
    """
    if isinstance(err, Error):
        return get_status_code(err.kind)
    return status.HTTP_500_INTERNAL_SERVER_ERROR
