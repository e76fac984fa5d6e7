"""Client library for the Brickset v3 LEGO set database API."""

from brickset.client import BricksetClient
from brickset.errors import (
    BricksetError,
    MalformedResponse,
    MissingToken,
    NotLoggedIn,
    RequestFailed,
    ResponseError,
    ServiceError,
    TransportError,
    UnexpectedPayloadShape,
)
from brickset.models import UNKNOWN, Set, SetsPage, WantedList, WantedListEntry
from brickset.operations import (
    CheckKey,
    CheckUserHash,
    CollectionUpdate,
    GetAdditionalImages,
    GetInstructions,
    GetInstructionsBySetNumber,
    GetKeyUsageStats,
    GetMinifigCollection,
    GetReviews,
    GetSets,
    GetSubthemes,
    GetThemes,
    GetUserMinifigNotes,
    GetUserNotes,
    GetWantedSets,
    GetYears,
    Login,
    MinifigCollectionUpdate,
    Operation,
    OperationKind,
    OrderBy,
    SetCollection,
    SetMinifigCollection,
)
from brickset.parsers import Result, Success, decode, encode
from brickset.request import WireRequest, build

__all__ = [
    "BricksetClient",
    "BricksetError",
    "CheckKey",
    "CheckUserHash",
    "CollectionUpdate",
    "GetAdditionalImages",
    "GetInstructions",
    "GetInstructionsBySetNumber",
    "GetKeyUsageStats",
    "GetMinifigCollection",
    "GetReviews",
    "GetSets",
    "GetSubthemes",
    "GetThemes",
    "GetUserMinifigNotes",
    "GetUserNotes",
    "GetWantedSets",
    "GetYears",
    "Login",
    "MalformedResponse",
    "MinifigCollectionUpdate",
    "MissingToken",
    "NotLoggedIn",
    "Operation",
    "OperationKind",
    "OrderBy",
    "RequestFailed",
    "ResponseError",
    "Result",
    "ServiceError",
    "Set",
    "SetCollection",
    "SetMinifigCollection",
    "SetsPage",
    "Success",
    "TransportError",
    "UNKNOWN",
    "UnexpectedPayloadShape",
    "WantedList",
    "WantedListEntry",
    "WireRequest",
    "build",
    "decode",
    "encode",
]
