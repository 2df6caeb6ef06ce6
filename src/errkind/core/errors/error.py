"""Annotated error record.

An ``Error`` wraps an underlying failure with a short message, a ``Kind``
and optional ``MetaData``. Wrapping an ``Error`` in another ``Error``
forms a chain that ends at a plain (non-``Error``) exception.

Records are built with ``errkind.E`` rather than instantiated directly;
the builder applies kind/metadata inheritance and returns ``None`` when
there is nothing to wrap.
"""

from typing import Any

from errkind.core.enums import Kind
from errkind.core.errors.metadata import MetaData
from errkind.core.errors.payload import ErrorPayload

SEPARATOR = ": "


class Error(Exception):
    """Error annotated with kind, message and metadata.

    Attributes are read-only; a record is never changed after it is built.

    Attributes:
        kind: Class of error, UNKNOWN if never set along the chain.
        message: Context added at this link, may be empty.
        meta: Metadata about the underlying error, if any.
        cause: The wrapped error, never None.
    """

    def __init__(
        self,
        cause: BaseException,
        *,
        message: str = "",
        kind: Kind = Kind.UNKNOWN,
        meta: MetaData | None = None,
    ) -> None:
        if cause is None:
            raise ValueError(
                "Error requires a cause, use E() to wrap optional errors"
            )
        super().__init__(message)
        self._cause = cause
        self._message = message
        self._kind = kind
        self._meta = meta
        self.__cause__ = cause

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def meta(self) -> MetaData | None:
        return self._meta

    @property
    def cause(self) -> BaseException:
        return self._cause

    def chained_message(self) -> str:
        """Join every link's message down to the leaf error.

        Links with an empty message add no separator.

        Returns:
            str: e.g. ``"no part of group: invalid key: network unreachable"``
        """
        parts: list[str] = []
        link: BaseException = self
        while isinstance(link, Error):
            if link._message:
                parts.append(link._message)
            link = link._cause
        parts.append(str(link))
        return SEPARATOR.join(parts)

    def short_message(self) -> str:
        """Return the chained message up to its first separator.

        Shows a friendly message to the end user instead of the full trace,
        avoiding leaks of internal detail.
        """
        return self.chained_message().partition(SEPARATOR)[0]

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            detail=dict(self._meta) if self._meta else None,
            type=self._kind.label,
            error=self.short_message(),
            code=int(self._kind),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{"detail", "type", "error", "code"}``.

        ``detail`` is omitted when there is no metadata.
        """
        return self.to_payload().to_dict()

    def to_json(self) -> str:
        """Serialize to compact JSON, see ``to_dict``."""
        return self.to_payload().to_json()

    def __str__(self) -> str:
        return self.chained_message()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self._kind.name}, "
            f"message={self._message!r}, cause={self._cause!r})"
        )

    def __copy__(self) -> "Error":
        clone = _restore(type(self), self.args)
        clone.__setstate__(dict(self.__dict__))
        return clone

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (type(self), self.args), dict(self.__dict__))

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self.__cause__ = self._cause


def _restore(cls: type[Error], args: tuple[Any, ...]) -> Error:
    # __init__ is skipped; fields come back through __setstate__
    return cls.__new__(cls, *args)
