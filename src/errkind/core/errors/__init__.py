"""Core errors package.

Exports the error record, its builder and accessors.

Usage:
    from errkind.core.errors import E, Error, MetaData, new
"""

from errkind.core.errors.accessors import Causer, is_kind, root_cause
from errkind.core.errors.builder import E, ErrorBuilder
from errkind.core.errors.error import Error
from errkind.core.errors.metadata import MetaData
from errkind.core.errors.payload import ErrorPayload
from errkind.core.errors.text_error import TextError, errorf, new

__all__ = [
    "Causer",
    "E",
    "Error",
    "ErrorBuilder",
    "ErrorPayload",
    "MetaData",
    "TextError",
    "errorf",
    "is_kind",
    "new",
    "root_cause",
]
