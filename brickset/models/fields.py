"""
Three-state field values for catalog records.

Brickset's catalog is incomplete for many sets, so a decoded field can be:

- a value: the service returned data
- ``None``: the service sent an explicit null (present, but empty)
- ``UNKNOWN``: the service returned nothing for the field

Collapsing ``UNKNOWN`` into zero or an empty string would hide the difference
between "no data" and "empty data", so the decoders never do it.
"""

from enum import Enum
from typing import TypeAlias, TypeVar

T = TypeVar("T")

# Brickset's own placeholder for a field it has no data for
NOT_SPECIFIED = "{Not specified}"


class Unknown(Enum):
    """Marker for a field the service returned no data for."""

    UNKNOWN = "unknown"

    def __repr__(self) -> str:
        return "UNKNOWN"

    def __bool__(self) -> bool:
        return False


UNKNOWN = Unknown.UNKNOWN

Field: TypeAlias = T | None | Unknown


def is_known(value: object) -> bool:
    """True when the service returned something for the field, even a null."""
    return value is not UNKNOWN


def known_or(value: "Field[T]", default: T) -> T:
    """Return ``value``, or ``default`` when it is unknown or null."""
    if value is UNKNOWN or value is None:
        return default
    return value  # type: ignore[return-value]
