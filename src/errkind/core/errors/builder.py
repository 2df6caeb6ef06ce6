"""Error builder.

``E`` builds an ``Error`` from a list of arguments whose type determines
their meaning. ``ErrorBuilder`` is the explicit form behind it: one
optional field per argument shape, each following last-wins assignment.

The argument shapes are:
    str
        Message for this link. The outermost message is what end users
        see through ``Error.short_message``.
    Kind
        Class of error, such as permission failure.
    MetaData
        Metadata attached by reference.
    Mapping
        Any other mapping with string keys is copied into a new MetaData.
        Mappings with other keys are ignored.
    BaseException
        The underlying error. An ``Error`` is copied so the new record
        owns its cause.

If no kind is given (or it is UNKNOWN) and the cause is an ``Error``, the
cause's kind is used. If no metadata is given, the cause's metadata is
shared. Without a cause the builder yields None, so ``return E(err, "ctx")``
is safe when ``err`` may be None.
"""

import copy
from collections.abc import Mapping

import structlog

from errkind.core.enums import Kind
from errkind.core.errors.error import Error
from errkind.core.errors.metadata import MetaData

logger = structlog.get_logger(__name__)


class ErrorBuilder:
    """Accumulates the fields of an ``Error``.

    Example:
        >>> err = (
        ...     ErrorBuilder()
        ...     .with_cause(new("network unreachable"))
        ...     .with_message("io error")
        ...     .with_kind(Kind.IO)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._message = ""
        self._kind = Kind.UNKNOWN
        self._meta: MetaData | None = None
        self._cause: BaseException | None = None

    def with_message(self, message: str) -> "ErrorBuilder":
        self._message = message
        return self

    def with_kind(self, kind: Kind) -> "ErrorBuilder":
        self._kind = kind
        return self

    def with_meta(self, meta: Mapping[str, object]) -> "ErrorBuilder":
        self._meta = meta if isinstance(meta, MetaData) else MetaData(meta)
        return self

    def with_cause(self, cause: BaseException | None) -> "ErrorBuilder":
        if isinstance(cause, Error):
            cause = copy.copy(cause)
        self._cause = cause
        return self

    def apply(self, arg: object) -> "ErrorBuilder":
        """Assign ``arg`` to the field matching its shape.

        None and unrecognized shapes are ignored.
        """
        match arg:
            case None:
                pass
            case Kind():
                self.with_kind(arg)
            case str():
                self.with_message(arg)
            case Mapping() if all(isinstance(key, str) for key in arg):
                self.with_meta(arg)
            case BaseException():
                self.with_cause(arg)
            case _:
                logger.debug(
                    "Ignoring unrecognized error argument",
                    arg_type=type(arg).__name__,
                )
        return self

    def build(self) -> Error | None:
        """Return the built ``Error``, or None when no cause was given."""
        if self._cause is None:
            return None

        kind = self._kind
        meta = self._meta
        # Fill missing fields from a wrapped Error
        if isinstance(self._cause, Error):
            if kind == Kind.UNKNOWN:
                kind = self._cause.kind
            if meta is None:
                meta = self._cause.meta

        return Error(self._cause, message=self._message, kind=kind, meta=meta)


def E(*args: object) -> Error | None:
    """Build an ``Error`` from its arguments.

    See the module docstring for the meaning of each argument type. If an
    argument type repeats, only the last one is recorded.

    Returns:
        Error | None: The new record, or None if no error was supplied.

    Example:
        >>> err = E(new("network unreachable"), "io error", Kind.IO)
        >>> str(E(err, "can't unmarshal bar", Kind.UNMARSHAL))
        "can't unmarshal bar: io error: network unreachable"
    """
    builder = ErrorBuilder()
    for arg in args:
        builder.apply(arg)
    return builder.build()
