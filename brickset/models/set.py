"""
Set records as returned by ``getSets``.

Field names follow the Brickset v3 JSON exactly (``setID``, ``bricksetURL``,
``LEGOCom`` ...) through pydantic aliases. Only ``number`` is required. Every
other field is three-state (see ``brickset.models.fields``): an absent key or
the text ``{Not specified}`` is ``UNKNOWN``, an explicit null is ``None``.

Types are strict: a flag in a count field, or a number sent as text, is a
validation error rather than a silent coercion.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    field_validator,
    model_validator,
)

from brickset.models.fields import NOT_SPECIFIED, UNKNOWN, Unknown

T = TypeVar("T")


def _known(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    if value is UNKNOWN or value == NOT_SPECIFIED:
        return UNKNOWN
    return handler(value)


def _number(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("expected a number")
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError("number is too large") from e


def _timestamp(value: Any) -> Any:
    if value is None or isinstance(value, (str, datetime)):
        return value
    raise ValueError("expected an ISO 8601 timestamp")


def _tags(value: Any) -> Any:
    # Tags arrive as an array or as one comma-delimited string
    if isinstance(value, str):
        return tuple(tag.strip() for tag in value.split(",") if tag.strip())
    return value


Known = Annotated[T | None, WrapValidator(_known)]

Text = Known[StrictStr]
Integer = Known[StrictInt]
Flag = Known[StrictBool]
Number = Annotated[float | None, BeforeValidator(_number), WrapValidator(_known)]
Timestamp = Annotated[datetime | None, BeforeValidator(_timestamp), WrapValidator(_known)]
Tags = Annotated[tuple[StrictStr, ...] | None, BeforeValidator(_tags), WrapValidator(_known)]


def full_set_number(number: str, variant: object) -> str:
    """
    Join a set number and its variant: ("7140", 1) -> "7140-1".

    Numbers that already carry a variant suffix are returned unchanged.
    """
    if "-" in number or not isinstance(variant, int) or isinstance(variant, bool):
        return number
    return f"{number}-{variant}"


def _unknown_fields(record: "_Record") -> dict[str, Any]:
    exclude: dict[str, Any] = {}
    for name in type(record).model_fields:
        value = getattr(record, name)
        if value is UNKNOWN:
            exclude[name] = True
        elif isinstance(value, _Record):
            nested = _unknown_fields(value)
            if nested:
                exclude[name] = nested
    return exclude


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """The record as the service sends it, with ``UNKNOWN`` fields left out."""
        return self.model_dump(by_alias=True, mode="json", exclude=_unknown_fields(self))


class Image(_Record):
    """Thumbnail and full-size image URLs."""

    thumbnail_url: Text = Field(default=UNKNOWN, alias="thumbnailURL")
    image_url: Text = Field(default=UNKNOWN, alias="imageURL")


class UserCollection(_Record):
    """
    The logged-in user's relationship with a set.

    Only populated when the request carried a user hash.
    """

    owned: Flag = UNKNOWN
    wanted: Flag = UNKNOWN
    qty_owned: Integer = Field(default=UNKNOWN, alias="qtyOwned")
    rating: Number = UNKNOWN
    notes: Text = UNKNOWN


class CommunityCollections(_Record):
    """How many Brickset members own or want a set."""

    owned_by: Integer = Field(default=UNKNOWN, alias="ownedBy")
    wanted_by: Integer = Field(default=UNKNOWN, alias="wantedBy")


class RetailDetails(_Record):
    """LEGO.com pricing and availability for one region."""

    retail_price: Number = Field(default=UNKNOWN, alias="retailPrice")
    date_first_available: Timestamp = Field(default=UNKNOWN, alias="dateFirstAvailable")
    date_last_available: Timestamp = Field(default=UNKNOWN, alias="dateLastAvailable")


class LegoCom(_Record):
    """LEGO.com details keyed by region (US, UK, CA, DE)."""

    united_states: Known[RetailDetails] = Field(default=UNKNOWN, alias="US")
    united_kingdom: Known[RetailDetails] = Field(default=UNKNOWN, alias="UK")
    canada: Known[RetailDetails] = Field(default=UNKNOWN, alias="CA")
    germany: Known[RetailDetails] = Field(default=UNKNOWN, alias="DE")


class AgeRange(_Record):
    min: Number = UNKNOWN
    max: Number = UNKNOWN


class Dimensions(_Record):
    """Box dimensions in centimetres and weight in kilograms."""

    height: Number = UNKNOWN
    width: Number = UNKNOWN
    depth: Number = UNKNOWN
    weight: Number = UNKNOWN


class Barcode(_Record):
    upc: Text = Field(default=UNKNOWN, alias="UPC")
    ean: Text = Field(default=UNKNOWN, alias="EAN")


class ExtendedData(_Record):
    """Returned only when the request asked for extended data."""

    description: Text = UNKNOWN
    notes: Text = UNKNOWN
    tags: Tags = UNKNOWN


class Set(_Record):
    """
    A LEGO set from the Brickset catalog.

    Attributes:
        number: Full set number including the variant (e.g., "7140-1").
            The only field the service always returns.
        set_id: Brickset's internal numeric ID
        number_variant: Variant part of the set number
        year: Release year
        pieces: Piece count
        minifigs: Minifigure count
        rating: Community rating (0-5)
        last_updated: When Brickset last changed the record
    """

    number: StrictStr
    set_id: Integer = Field(default=UNKNOWN, alias="setID")
    number_variant: Integer = Field(default=UNKNOWN, alias="numberVariant")
    name: Text = UNKNOWN
    year: Integer = UNKNOWN
    theme: Text = UNKNOWN
    theme_group: Text = Field(default=UNKNOWN, alias="themeGroup")
    subtheme: Text = UNKNOWN
    category: Text = UNKNOWN
    released: Flag = UNKNOWN
    pieces: Integer = UNKNOWN
    minifigs: Integer = UNKNOWN
    image: Known[Image] = UNKNOWN
    brickset_url: Text = Field(default=UNKNOWN, alias="bricksetURL")
    collection: Known[UserCollection] = UNKNOWN
    collections: Known[CommunityCollections] = UNKNOWN
    lego_com: Known[LegoCom] = Field(default=UNKNOWN, alias="LEGOCom")
    rating: Number = UNKNOWN
    review_count: Integer = Field(default=UNKNOWN, alias="reviewCount")
    packaging_type: Text = Field(default=UNKNOWN, alias="packagingType")
    availability: Text = UNKNOWN
    instructions_count: Integer = Field(default=UNKNOWN, alias="instructionsCount")
    additional_image_count: Integer = Field(default=UNKNOWN, alias="additionalImageCount")
    age_range: Known[AgeRange] = Field(default=UNKNOWN, alias="ageRange")
    dimensions: Known[Dimensions] = UNKNOWN
    barcode: Known[Barcode] = UNKNOWN
    extended_data: Known[ExtendedData] = Field(default=UNKNOWN, alias="extendedData")
    last_updated: Timestamp = Field(default=UNKNOWN, alias="lastUpdated")

    @model_validator(mode="before")
    @classmethod
    def join_variant(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        number = data.get("number")
        if not isinstance(number, str) or not number.strip() or number == NOT_SPECIFIED:
            return data
        variant = data.get("numberVariant", data.get("number_variant"))
        return {**data, "number": full_set_number(number, variant)}

    @field_validator("number")
    @classmethod
    def number_present(cls, value: str) -> str:
        if not value.strip() or value == NOT_SPECIFIED:
            raise ValueError("set has no number")
        return value


@dataclass(frozen=True, slots=True)
class WantedListEntry:
    """
    A set on the user's wanted list.

    Attributes:
        set: The catalog record
        qty_owned: Copies the user already owns
        owned: Whether the set is also on the user's owned list
        user_rating: The user's own rating of the set
        notes: The user's notes for the set
    """

    set: Set
    qty_owned: int | None | Unknown = UNKNOWN
    owned: bool | None | Unknown = UNKNOWN
    user_rating: float | None | Unknown = UNKNOWN
    notes: str | None | Unknown = UNKNOWN


@dataclass(frozen=True, slots=True)
class SetsPage:
    """One page of ``getSets`` results, in service order."""

    matches: int | None | Unknown
    sets: tuple[Set, ...] = ()

    def __len__(self) -> int:
        return len(self.sets)


@dataclass(frozen=True, slots=True)
class WantedList:
    """One page of the user's wanted sets, in service order."""

    matches: int | None | Unknown
    entries: tuple[WantedListEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)
