"""Structured error annotation.

Wrap a failure with a message, a kind and metadata at each layer of a
call stack, then render or serialize the resulting chain.

Usage:
    from errkind import E, Kind, MetaData, new

    err = E(new("network unreachable"), "io error", Kind.IO)
    err = E(err, "can't load profile", MetaData({"user_id": "42"}))
    err.short_message()  # "can't load profile"
    str(err)  # "can't load profile: io error: network unreachable"
"""

from errkind.core.enums import Kind
from errkind.core.errors import (
    Causer,
    E,
    Error,
    ErrorBuilder,
    ErrorPayload,
    MetaData,
    TextError,
    errorf,
    is_kind,
    new,
    root_cause,
)

__all__ = [
    "Causer",
    "E",
    "Error",
    "ErrorBuilder",
    "ErrorPayload",
    "Kind",
    "MetaData",
    "TextError",
    "errorf",
    "is_kind",
    "new",
    "root_cause",
]
