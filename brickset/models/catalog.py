"""
Catalog reference rows: themes, subthemes, years, instructions, images,
reviews, notes, minifigs and API key usage.

Unlike sets, the service always fills these rows completely, so they are
strict pydantic models and a missing field is a contract violation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Theme(_Row):
    """A top-level theme with its set count and active years."""

    name: str = Field(..., alias="theme")
    set_count: int = Field(..., alias="setCount", ge=0)
    subtheme_count: int = Field(..., alias="subthemeCount", ge=0)
    year_from: int = Field(..., alias="yearFrom")
    year_to: int = Field(..., alias="yearTo")


class Subtheme(_Row):
    theme: str
    name: str = Field(..., alias="subtheme")
    set_count: int = Field(..., alias="setCount", ge=0)
    year_from: int = Field(..., alias="yearFrom")
    year_to: int = Field(..., alias="yearTo")


class Year(_Row):
    """Number of sets released in a theme during one year."""

    theme: str
    year: int
    set_count: int = Field(..., alias="setCount", ge=0)


class Instructions(_Row):
    url: str = Field(..., alias="URL")
    description: str = ""


class AdditionalImage(_Row):
    thumbnail_url: str | None = Field(default=None, alias="thumbnailURL")
    image_url: str | None = Field(default=None, alias="imageURL")


class UserNote(_Row):
    """The user's free-text notes for one set."""

    set_id: int = Field(..., alias="setID")
    notes: str


class ApiKeyUsage(_Row):
    """Requests made with the API key on one day."""

    date_stamp: datetime = Field(..., alias="dateStamp")
    count: int = Field(..., ge=0)


class ReviewRating(_Row):
    """
    Scores a reviewer gave a set.

    The service sends 0 for a score the reviewer left blank; those are None
    here and go back out as 0.
    """

    overall: int
    parts: int | None = None
    building_experience: int | None = Field(default=None, alias="buildingExperience")
    playability: int | None = None
    value_for_money: int | None = Field(default=None, alias="valueForMoney")

    @field_validator("parts", "building_experience", "playability", "value_for_money", mode="before")
    @classmethod
    def zero_is_blank(cls, value: object) -> object:
        return None if value == 0 and not isinstance(value, bool) else value

    @field_serializer("parts", "building_experience", "playability", "value_for_money")
    def blank_is_zero(self, value: int | None) -> int:
        return 0 if value is None else value


class Review(_Row):
    """A member review of a set."""

    author: str
    date_posted: datetime = Field(..., alias="datePosted")
    rating: ReviewRating
    title: str
    review: str
    html: bool = Field(..., alias="HTML")


class MinifigCollection(_Row):
    """
    The user's copies of one minifig.

    Attributes:
        minifig_number: Brickset minifig number (e.g., "sw0001a")
        owned_in_sets: Copies that came with sets the user owns
        owned_loose: Copies owned on their own
        owned_total: Sum of the two
    """

    minifig_number: str = Field(..., alias="minifigNumber")
    name: str
    category: str
    owned_in_sets: int = Field(..., alias="ownedInSets", ge=0)
    owned_loose: int = Field(..., alias="ownedLoose", ge=0)
    owned_total: int = Field(..., alias="ownedTotal", ge=0)
    wanted: bool


class UserMinifigNote(_Row):
    minifig_number: str = Field(..., alias="minifigNumber")
    notes: str
