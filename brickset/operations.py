"""
Brickset v3 operations.

Each supported remote method is a frozen dataclass carrying exactly the
parameters that method accepts. Values are validated on construction, so a
constructed operation can always be turned into a wire request.

API key and user hash are ordinary fields: nothing here reads configuration
or environment variables.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, TypeAlias

MAX_PAGE_SIZE = 500

MIN_RATING = 1
MAX_RATING = 5


class OperationKind(str, Enum):
    """Remote method names, as they appear in the endpoint path."""

    CHECK_KEY = "checkKey"
    LOGIN = "login"
    CHECK_USER_HASH = "checkUserHash"
    GET_KEY_USAGE_STATS = "getKeyUsageStats"
    GET_SETS = "getSets"
    GET_WANTED_SETS = "getWantedSets"
    GET_THEMES = "getThemes"
    GET_SUBTHEMES = "getSubthemes"
    GET_YEARS = "getYears"
    GET_INSTRUCTIONS = "getInstructions"
    GET_INSTRUCTIONS_BY_SET_NUMBER = "getInstructions2"
    GET_ADDITIONAL_IMAGES = "getAdditionalImages"
    GET_REVIEWS = "getReviews"
    SET_COLLECTION = "setCollection"
    GET_USER_NOTES = "getUserNotes"
    GET_MINIFIG_COLLECTION = "getMinifigCollection"
    SET_MINIFIG_COLLECTION = "setMinifigCollection"
    GET_USER_MINIFIG_NOTES = "getUserMinifigNotes"

    @property
    def method(self) -> str:
        """The endpoint method the operation is sent to."""
        # Wanted sets are a getSets call with the wanted filter forced on
        if self is OperationKind.GET_WANTED_SETS:
            return OperationKind.GET_SETS.value
        return self.value


class OrderBy(str, Enum):
    """Sort orders accepted by getSets. ``*_DESC`` members sort descending."""

    NUMBER = "Number"
    YEAR_FROM = "YearFrom"
    PIECES = "Pieces"
    MINIFIGS = "Minifigs"
    RATING = "Rating"
    US_RETAIL_PRICE = "USRetailPrice"
    UK_RETAIL_PRICE = "UKRetailPrice"
    CA_RETAIL_PRICE = "CARetailPrice"
    DE_RETAIL_PRICE = "DERetailPrice"
    FR_RETAIL_PRICE = "FRRetailPrice"
    US_PRICE_PER_PIECE = "USPricePerPiece"
    UK_PRICE_PER_PIECE = "UKPricePerPiece"
    CA_PRICE_PER_PIECE = "CAPricePerPiece"
    DE_PRICE_PER_PIECE = "DEPricePerPiece"
    FR_PRICE_PER_PIECE = "FRPricePerPiece"
    THEME = "Theme"
    SUBTHEME = "Subtheme"
    NAME = "Name"
    RANDOM = "Random"
    QTY_OWNED = "QtyOwned"
    OWN_COUNT = "OwnCount"
    WANT_COUNT = "WantCount"
    USER_RATING = "UserRating"
    COLLECTION_ID = "CollectionID"
    NUMBER_DESC = "NumberDESC"
    YEAR_FROM_DESC = "YearFromDESC"
    PIECES_DESC = "PiecesDESC"
    MINIFIGS_DESC = "MinifigsDESC"
    RATING_DESC = "RatingDESC"
    US_RETAIL_PRICE_DESC = "USRetailPriceDESC"
    UK_RETAIL_PRICE_DESC = "UKRetailPriceDESC"
    CA_RETAIL_PRICE_DESC = "CARetailPriceDESC"
    DE_RETAIL_PRICE_DESC = "DERetailPriceDESC"
    FR_RETAIL_PRICE_DESC = "FRRetailPriceDESC"
    US_PRICE_PER_PIECE_DESC = "USPricePerPieceDESC"
    UK_PRICE_PER_PIECE_DESC = "UKPricePerPieceDESC"
    CA_PRICE_PER_PIECE_DESC = "CAPricePerPieceDESC"
    DE_PRICE_PER_PIECE_DESC = "DEPricePerPieceDESC"
    FR_PRICE_PER_PIECE_DESC = "FRPricePerPieceDESC"
    THEME_DESC = "ThemeDESC"
    SUBTHEME_DESC = "SubthemeDESC"
    NAME_DESC = "NameDESC"
    RANDOM_DESC = "RandomDESC"
    QTY_OWNED_DESC = "QtyOwnedDESC"
    OWN_COUNT_DESC = "OwnCountDESC"
    WANT_COUNT_DESC = "WantCountDESC"
    USER_RATING_DESC = "UserRatingDESC"
    COLLECTION_ID_DESC = "CollectionIDDESC"

    def reversed(self) -> "OrderBy":
        """The same ordering in the opposite direction."""
        if self.value.endswith("DESC"):
            return OrderBy(self.value.removesuffix("DESC"))
        return OrderBy(f"{self.value}DESC")


def _check_page(page_size: int | None, page_number: int | None) -> None:
    if page_size is not None and not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
    if page_number is not None and page_number < 1:
        raise ValueError(f"page_number must be at least 1, got {page_number}")


def _check_required(**values: str) -> None:
    for name, value in values.items():
        if not value:
            raise ValueError(f"{name} is required")


@dataclass(frozen=True, slots=True)
class CheckKey:
    """Check that an API key is valid."""

    kind: ClassVar[OperationKind] = OperationKind.CHECK_KEY

    api_key: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key)


@dataclass(frozen=True, slots=True)
class Login:
    """Exchange a username and password for a user hash."""

    kind: ClassVar[OperationKind] = OperationKind.LOGIN

    api_key: str
    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, username=self.username, password=self.password)


@dataclass(frozen=True, slots=True)
class CheckUserHash:
    """Check that a user hash from an earlier login is still valid."""

    kind: ClassVar[OperationKind] = OperationKind.CHECK_USER_HASH

    api_key: str
    user_hash: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, user_hash=self.user_hash)


@dataclass(frozen=True, slots=True)
class GetSets:
    """
    Search the set catalog.

    Attributes:
        api_key: Brickset API key
        user_hash: Logged-in user; required for the owned/wanted filters and
            to get the user's collection details back with each set
        set_id: A single Brickset set ID
        query: Free text matched against number, name, theme and subtheme
        theme: Exact theme name
        subtheme: Exact subtheme name
        set_number: Full set number including the variant, e.g. "6876-1"
        years: Release years to include
        tag: A Brickset tag
        owned: Only sets the user owns
        wanted: Only sets the user wants
        updated_since: Only sets changed on or after this date
        order_by: Sort order
        page_size: Results per page (1-500, service default 20)
        page_number: 1-based page (service default 1)
        extended_data: Include description, notes and tags
    """

    kind: ClassVar[OperationKind] = OperationKind.GET_SETS

    api_key: str
    user_hash: str | None = None
    set_id: int | None = None
    query: str | None = None
    theme: str | None = None
    subtheme: str | None = None
    set_number: str | None = None
    years: tuple[int, ...] = ()
    tag: str | None = None
    owned: bool = False
    wanted: bool = False
    updated_since: date | None = None
    order_by: OrderBy | None = None
    page_size: int | None = None
    page_number: int | None = None
    extended_data: bool = False

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key)
        if (self.owned or self.wanted) and not self.user_hash:
            raise ValueError("owned/wanted filters require a user_hash")
        _check_page(self.page_size, self.page_number)
        # Accept any iterable of years but store an immutable tuple
        object.__setattr__(self, "years", tuple(self.years))


@dataclass(frozen=True, slots=True)
class GetWantedSets:
    """Fetch one page of the user's wanted list."""

    kind: ClassVar[OperationKind] = OperationKind.GET_WANTED_SETS

    api_key: str
    user_hash: str
    order_by: OrderBy | None = None
    page_size: int | None = None
    page_number: int | None = None
    extended_data: bool = False

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, user_hash=self.user_hash)
        _check_page(self.page_size, self.page_number)


@dataclass(frozen=True, slots=True)
class GetThemes:
    kind: ClassVar[OperationKind] = OperationKind.GET_THEMES

    api_key: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key)


@dataclass(frozen=True, slots=True)
class GetSubthemes:
    kind: ClassVar[OperationKind] = OperationKind.GET_SUBTHEMES

    api_key: str
    theme: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, theme=self.theme)


@dataclass(frozen=True, slots=True)
class GetYears:
    kind: ClassVar[OperationKind] = OperationKind.GET_YEARS

    api_key: str
    theme: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, theme=self.theme)


@dataclass(frozen=True, slots=True)
class GetInstructions:
    """Building instructions for a set, by Brickset set ID."""

    kind: ClassVar[OperationKind] = OperationKind.GET_INSTRUCTIONS

    api_key: str
    set_id: int

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key)


@dataclass(frozen=True, slots=True)
class GetInstructionsBySetNumber:
    """Building instructions for a set, by full set number."""

    kind: ClassVar[OperationKind] = OperationKind.GET_INSTRUCTIONS_BY_SET_NUMBER

    api_key: str
    set_number: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, set_number=self.set_number)


@dataclass(frozen=True, slots=True)
class GetAdditionalImages:
    kind: ClassVar[OperationKind] = OperationKind.GET_ADDITIONAL_IMAGES

    api_key: str
    set_id: int

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key)


@dataclass(frozen=True, slots=True)
class CollectionUpdate:
    """
    Changes to the user's collection entry for one set.

    Fields left as ``None`` are not sent and are not changed. An empty update
    is valid and changes nothing.

    Attributes:
        qty_owned: Copies owned; 0 removes the set from the owned list
        wanted: Add to (True) or remove from (False) the wanted list
        notes: Replacement notes
        rating: The user's rating (1-5)
    """

    qty_owned: int | None = None
    wanted: bool | None = None
    notes: str | None = None
    rating: int | None = None

    def __post_init__(self) -> None:
        if self.qty_owned is not None and self.qty_owned < 0:
            raise ValueError(f"qty_owned cannot be negative, got {self.qty_owned}")
        if self.rating is not None and not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(
                f"rating must be between {MIN_RATING} and {MAX_RATING}, got {self.rating}"
            )


@dataclass(frozen=True, slots=True)
class SetCollection:
    """Change the user's collection entry for a set."""

    kind: ClassVar[OperationKind] = OperationKind.SET_COLLECTION

    api_key: str
    user_hash: str
    set_id: int
    update: CollectionUpdate = field(default_factory=CollectionUpdate)

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, user_hash=self.user_hash)


@dataclass(frozen=True, slots=True)
class GetUserNotes:
    """All of the user's set notes."""

    kind: ClassVar[OperationKind] = OperationKind.GET_USER_NOTES

    api_key: str
    user_hash: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, user_hash=self.user_hash)


@dataclass(frozen=True, slots=True)
class GetKeyUsageStats:
    """Daily request counts for the API key."""

    kind: ClassVar[OperationKind] = OperationKind.GET_KEY_USAGE_STATS

    api_key: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key)


@dataclass(frozen=True, slots=True)
class GetReviews:
    """Member reviews of a set, by Brickset set ID."""

    kind: ClassVar[OperationKind] = OperationKind.GET_REVIEWS

    api_key: str
    set_id: int

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key)


@dataclass(frozen=True, slots=True)
class GetMinifigCollection:
    """
    The user's minifig collection.

    Attributes:
        owned: Only minifigs the user owns
        wanted: Only minifigs the user wants
        query: Free text matched against minifig number and name
    """

    kind: ClassVar[OperationKind] = OperationKind.GET_MINIFIG_COLLECTION

    api_key: str
    user_hash: str
    owned: bool = False
    wanted: bool = False
    query: str | None = None

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, user_hash=self.user_hash)


@dataclass(frozen=True, slots=True)
class MinifigCollectionUpdate:
    """
    Changes to the user's collection entry for one minifig.

    Unlike sets, a zero quantity is sent as ``own=0`` without ``qtyOwned``.
    """

    qty_owned: int | None = None
    wanted: bool | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.qty_owned is not None and self.qty_owned < 0:
            raise ValueError(f"qty_owned cannot be negative, got {self.qty_owned}")


@dataclass(frozen=True, slots=True)
class SetMinifigCollection:
    """Change the user's collection entry for a minifig, e.g. "sw0001a"."""

    kind: ClassVar[OperationKind] = OperationKind.SET_MINIFIG_COLLECTION

    api_key: str
    user_hash: str
    minifig_number: str
    update: MinifigCollectionUpdate = field(default_factory=MinifigCollectionUpdate)

    def __post_init__(self) -> None:
        _check_required(
            api_key=self.api_key, user_hash=self.user_hash, minifig_number=self.minifig_number
        )


@dataclass(frozen=True, slots=True)
class GetUserMinifigNotes:
    kind: ClassVar[OperationKind] = OperationKind.GET_USER_MINIFIG_NOTES

    api_key: str
    user_hash: str

    def __post_init__(self) -> None:
        _check_required(api_key=self.api_key, user_hash=self.user_hash)


Operation: TypeAlias = (
    CheckKey
    | Login
    | CheckUserHash
    | GetKeyUsageStats
    | GetSets
    | GetWantedSets
    | GetThemes
    | GetSubthemes
    | GetYears
    | GetInstructions
    | GetInstructionsBySetNumber
    | GetAdditionalImages
    | GetReviews
    | SetCollection
    | GetUserNotes
    | GetMinifigCollection
    | SetMinifigCollection
    | GetUserMinifigNotes
)
