"""Classification accessors for error values."""

from typing import Protocol, runtime_checkable

from errkind.core.enums import Kind
from errkind.core.errors.error import Error


@runtime_checkable
class Causer(Protocol):
    """Anything that exposes the error it wraps as ``cause``."""

    @property
    def cause(self) -> BaseException | None: ...


def root_cause(err: object) -> object:
    """Return the underlying cause of the error, if possible.

    Follows ``cause`` for as long as the value exposes one. A value
    without a cause is returned unchanged; None is returned as is.
    """
    while err is not None and isinstance(err, Causer):
        err = err.cause
    return err


def is_kind(err: object, kind: Kind) -> bool:
    """Report whether ``err`` is an ``Error`` of the given kind."""
    return isinstance(err, Error) and err.kind == kind
