"""Error kinds (categorical classification of failures).

Kind values are shared between clients and servers and are serialized as
the integer ``code`` of an error payload. Do not reorder this list or
remove any items since that will change their values. New items must be
added only to the end.
"""

from enum import IntEnum


class Kind(IntEnum):
    """Class of error, such as permission failure.

    UNKNOWN is used when the class is unknown or irrelevant.
    """

    UNKNOWN = 0  # Unclassified error.
    INVALID = 1  # Invalid operation for this type of item.
    PERMISSION = 2  # Permission denied.
    IO = 3  # External I/O error such as network failure.
    DUPLICATED = 4  # Duplicated item.
    NOT_EXIST = 5  # Item does not exist.
    PRIVATE = 6  # Information withheld.
    INTERNAL = 7  # Internal error or inconsistency.
    DECRYPT = 8  # Invalid encryption info.
    UNMARSHAL = 9  # Invalid input data.
    TRANSIENT = 10  # A transient error.
    UNSUPPORTED = 11  # An unsupported media type.
    NOT_ACCEPTABLE = 12  # We cannot accept the provided media types.

    @property
    def label(self) -> str:
        """Human-readable label, serialized as the payload ``type``."""
        return _LABELS[self]


# User-visible, keep verbatim
_LABELS: dict[Kind, str] = {
    Kind.UNKNOWN: "Unknown error",
    Kind.INVALID: "invalid operation",
    Kind.PERMISSION: "permission denied",
    Kind.IO: "I/O error",
    Kind.DUPLICATED: "item already exists",
    Kind.NOT_EXIST: "item does not exist",
    Kind.PRIVATE: "information withheld",
    Kind.INTERNAL: "internal error",
    Kind.DECRYPT: "invalid encryption",
    Kind.UNMARSHAL: "invalid data",
    Kind.TRANSIENT: "transient error",
    Kind.UNSUPPORTED: "unsupported",
    Kind.NOT_ACCEPTABLE: "not accepted",
}
