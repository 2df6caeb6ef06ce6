"""Structured diagnostic context attached to an error link."""

from typing import Any


class MetaData(dict[str, Any]):
    """Machine-readable details about the underlying error.

    Serialized as-is under the ``detail`` key of an error payload. A
    MetaData instance is attached by reference and may be shared with
    records that inherit it, so do not mutate it once it has been used.
    """
