"""Wire form of an annotated error.

Exports:
    ErrorPayload: Serialized error (detail, type, error, code)
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    """Serialized error sent to API consumers.

    Field names and order are part of the external contract. ``detail`` is
    left out of the dumped form when there is no metadata.

    Attributes:
        detail: Error metadata, if any
        type: Label of the error kind
        error: Short, user-facing message
        code: Integer value of the error kind

    Examples:
        >>> ErrorPayload(
        ...     detail={"foo": "bar"},
        ...     type="I/O error",
        ...     error="network latency",
        ...     code=3,
        ... ).to_json()
        '{"detail":{"foo":"bar"},"type":"I/O error","error":"network latency","code":3}'
    """

    detail: dict[str, Any] | None = Field(
        None,
        description="Machine-readable error metadata",
    )
    type: str = Field(
        ...,
        description="Fixed label of the error kind",
        examples=["I/O error"],
    )
    error: str = Field(
        ...,
        description="Short, user-facing error message",
        examples=["network latency"],
    )
    code: int = Field(
        ...,
        description="Integer value of the error kind",
        examples=[3],
    )

    def _excluded(self) -> set[str] | None:
        return {"detail"} if not self.detail else None

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict in wire order, omitting empty ``detail``."""
        return self.model_dump(mode="json", exclude=self._excluded())

    def to_json(self) -> str:
        """Dump to compact JSON in wire order, omitting empty ``detail``."""
        return self.model_dump_json(exclude=self._excluded())
