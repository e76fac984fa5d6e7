"""
Set record decoding for ``getSets`` and wanted-list responses.

The field rules live on the ``Set`` model; this module walks the ``sets``
list and turns validation failures into ``UnexpectedPayloadShape`` with the
record's position in the path.
"""

from typing import Any

from pydantic import ValidationError

from brickset.models.fields import UNKNOWN
from brickset.models.set import (
    Set,
    SetsPage,
    UserCollection,
    WantedList,
    WantedListEntry,
    full_set_number,
)
from brickset.parsers.regions import join_path, list_region, optional_count, shape_error

SETS_KEY = "sets"


def decode_set(record: Any, path: str = "") -> Set:
    """
    Decode one set record.

    Args:
        record: A JSON object from the ``sets`` list
        path: Location of the record, used in error messages

    Raises:
        UnexpectedPayloadShape: If the record has no usable ``number`` or a
            field has the wrong type
    """
    try:
        return Set.model_validate(record)
    except ValidationError as e:
        raise shape_error(e, path) from e


def encode_set(item: Set) -> dict[str, Any]:
    return item.to_wire()


def decode_sets(region: dict[str, Any]) -> SetsPage:
    records = list_region(region, SETS_KEY)
    sets = tuple(
        decode_set(record, join_path(SETS_KEY, index)) for index, record in enumerate(records)
    )
    return SetsPage(matches=optional_count(region), sets=sets)


def encode_sets(page: SetsPage) -> dict[str, Any]:
    encoded: dict[str, Any] = {}
    if page.matches is not UNKNOWN:
        encoded["matches"] = page.matches
    encoded[SETS_KEY] = [encode_set(item) for item in page.sets]
    return encoded


def wanted_entry(item: Set) -> WantedListEntry:
    """Lift the user's collection details out of a set record."""
    collection = item.collection
    if not isinstance(collection, UserCollection):
        # UNKNOWN or null: the service sent no collection details
        return WantedListEntry(set=item)
    return WantedListEntry(
        set=item,
        qty_owned=collection.qty_owned,
        owned=collection.owned,
        user_rating=collection.rating,
        notes=collection.notes,
    )


def decode_wanted_sets(region: dict[str, Any]) -> WantedList:
    page = decode_sets(region)
    return WantedList(
        matches=page.matches,
        entries=tuple(wanted_entry(item) for item in page.sets),
    )


def encode_wanted_sets(wanted: WantedList) -> dict[str, Any]:
    return encode_sets(
        SetsPage(matches=wanted.matches, sets=tuple(entry.set for entry in wanted.entries))
    )


__all__ = [
    "decode_set",
    "decode_sets",
    "decode_wanted_sets",
    "encode_set",
    "encode_sets",
    "encode_wanted_sets",
    "full_set_number",
    "wanted_entry",
]
