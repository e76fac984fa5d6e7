from brickset.models.catalog import (
    AdditionalImage,
    ApiKeyUsage,
    Instructions,
    MinifigCollection,
    Review,
    ReviewRating,
    Subtheme,
    Theme,
    UserMinifigNote,
    UserNote,
    Year,
)
from brickset.models.fields import NOT_SPECIFIED, UNKNOWN, Field, Unknown, is_known, known_or
from brickset.models.set import (
    AgeRange,
    Barcode,
    CommunityCollections,
    Dimensions,
    ExtendedData,
    Image,
    LegoCom,
    RetailDetails,
    Set,
    SetsPage,
    UserCollection,
    WantedList,
    WantedListEntry,
)

__all__ = [
    "AdditionalImage",
    "AgeRange",
    "ApiKeyUsage",
    "Barcode",
    "CommunityCollections",
    "Dimensions",
    "ExtendedData",
    "Field",
    "Image",
    "Instructions",
    "LegoCom",
    "MinifigCollection",
    "NOT_SPECIFIED",
    "RetailDetails",
    "Review",
    "ReviewRating",
    "Set",
    "SetsPage",
    "Subtheme",
    "Theme",
    "UNKNOWN",
    "Unknown",
    "UserCollection",
    "UserMinifigNote",
    "UserNote",
    "WantedList",
    "WantedListEntry",
    "Year",
    "is_known",
    "known_or",
]
