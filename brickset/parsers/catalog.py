"""Decoding of catalog reference lists (themes, years, reviews, ...)."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from brickset.parsers.regions import join_path, list_region, shape_error

RowT = TypeVar("RowT", bound=BaseModel)


def decode_rows(region: dict[str, Any], key: str, model: type[RowT]) -> tuple[RowT, ...]:
    """
    Validate every item of a list payload field against ``model``.

    Raises:
        UnexpectedPayloadShape: If the list is missing or any row is invalid
    """
    rows: list[RowT] = []
    for index, item in enumerate(list_region(region, key)):
        try:
            rows.append(model.model_validate(item))
        except ValidationError as e:
            raise shape_error(e, join_path(key, index)) from e
    return tuple(rows)


def encode_rows(key: str, rows: tuple[BaseModel, ...]) -> dict[str, Any]:
    return {
        "matches": len(rows),
        key: [row.model_dump(by_alias=True, mode="json") for row in rows],
    }
