"""
Helpers for reading the payload region of a success envelope.

Payload errors carry a ``path`` such as ``sets[3].LEGOCom.US.retailPrice``
so a contract violation can be traced to the exact field.
"""

import json
from typing import Any

from pydantic import ValidationError

from brickset.errors import UnexpectedPayloadShape
from brickset.models.fields import NOT_SPECIFIED, UNKNOWN


def join_path(path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


def shape_error(error: ValidationError, path: str = "") -> UnexpectedPayloadShape:
    """Report the first validation failure at its location below ``path``."""
    first = error.errors()[0]
    for part in first["loc"]:
        path = join_path(path, part)
    return UnexpectedPayloadShape(first["msg"], path=path)


def list_region(region: dict[str, Any], key: str) -> list[Any]:
    """
    Fetch a list-valued payload field.

    The list may arrive as a JSON array or as a string holding a JSON array,
    which is parsed a second time.

    Raises:
        UnexpectedPayloadShape: If the field is missing or not a list
    """
    if key not in region:
        raise UnexpectedPayloadShape("missing from a successful response", path=key)
    value = region[key]
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise UnexpectedPayloadShape("string is not an encoded list", path=key) from e
    if not isinstance(value, list):
        raise UnexpectedPayloadShape(f"expected a list, got {type(value).__name__}", path=key)
    return value


def optional_count(region: dict[str, Any], key: str = "matches") -> Any:
    """A top-level count such as ``matches``, three-state like any other field."""
    if key not in region:
        return UNKNOWN
    value = region[key]
    if value == NOT_SPECIFIED:
        return UNKNOWN
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    raise UnexpectedPayloadShape(f"expected an integer, got {type(value).__name__}", path=key)
