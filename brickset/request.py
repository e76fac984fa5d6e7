"""
Request building.

``build`` turns an operation into a ``WireRequest``: the endpoint method and
the ordered form fields the service expects. It is pure and never fails.
Turning the ``WireRequest`` into an HTTP call is the transport's job; the
helpers here only render the URL and the form body.

Encoding rules:
    - integers are decimal text
    - flags are the literal "1"
    - dates are YYYY-MM-DD
    - several years are joined with ", "
    - optional parameters that are not set are left out entirely
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlencode

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
    SetCollection,
    SetMinifigCollection,
)

DEFAULT_ENDPOINT = "https://brickset.com/api/v3.asmx/"

FLAG = 1

# Service literal for "no user" on methods that declare userHash as mandatory
NO_USER_HASH = ""


@dataclass(frozen=True, slots=True)
class WireRequest:
    """
    A request ready for transport encoding.

    Attributes:
        method: Endpoint method name (e.g., "getSets")
        params: Form fields in the order they are sent
    """

    method: str
    params: tuple[tuple[str, str], ...]

    def as_dict(self) -> dict[str, str]:
        return dict(self.params)

    def url(self, endpoint: str = DEFAULT_ENDPOINT) -> str:
        """Endpoint URL with the method appended, without parameters."""
        return f"{endpoint.rstrip('/')}/{self.method}"

    def query_url(self, endpoint: str = DEFAULT_ENDPOINT) -> str:
        """
        URL with every parameter in the query string.

        Prefer ``form_body`` for real calls: it keeps the API key and password
        out of URLs and server logs.
        """
        return f"{self.url(endpoint)}?{urlencode(self.params)}"

    def form_body(self) -> str:
        """``application/x-www-form-urlencoded`` body."""
        return urlencode(self.params)


def _json_params(params: dict[str, object]) -> str:
    """Compact JSON object with unset entries dropped, in insertion order."""
    present = {key: value for key, value in params.items() if value is not None}
    return json.dumps(present, separators=(",", ":"), ensure_ascii=False)


def _flag(enabled: bool) -> int | None:
    return FLAG if enabled else None


def _years(years: tuple[int, ...]) -> str | None:
    if not years:
        return None
    return ", ".join(str(year) for year in years)


def _get_sets_params(operation: GetSets) -> dict[str, object]:
    return {
        "setID": operation.set_id,
        "query": operation.query,
        "theme": operation.theme,
        "subtheme": operation.subtheme,
        "setNumber": operation.set_number,
        "year": _years(operation.years),
        "tag": operation.tag,
        "owned": _flag(operation.owned),
        "wanted": _flag(operation.wanted),
        "updatedSince": (
            operation.updated_since.strftime("%Y-%m-%d") if operation.updated_since else None
        ),
        "orderBy": operation.order_by.value if operation.order_by else None,
        "pageSize": operation.page_size,
        "pageNumber": operation.page_number,
        "extendedData": _flag(operation.extended_data),
    }


def _collection_params(update: CollectionUpdate) -> dict[str, object]:
    # A zero quantity alone removes the set; "own" is only sent to add it
    own = FLAG if update.qty_owned else None
    want: int | None = None
    if update.wanted is not None:
        want = 1 if update.wanted else 0
    return {
        "own": own,
        "want": want,
        "qtyOwned": update.qty_owned,
        "notes": update.notes,
        "rating": update.rating,
    }


def _minifig_collection_params(update: MinifigCollectionUpdate) -> dict[str, object]:
    # Minifigs are removed with own=0; a positive quantity goes in qtyOwned alone
    own = 0 if update.qty_owned == 0 else None
    qty_owned = update.qty_owned if update.qty_owned else None
    want: int | None = None
    if update.wanted is not None:
        want = 1 if update.wanted else 0
    return {
        "own": own,
        "want": want,
        "qtyOwned": qty_owned,
        "notes": update.notes,
    }


def _build_check_key(operation: CheckKey) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key),)


def _build_login(operation: Login) -> tuple[tuple[str, str], ...]:
    return (
        ("apiKey", operation.api_key),
        ("username", operation.username),
        ("password", operation.password),
    )


def _build_check_user_hash(operation: CheckUserHash) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("userHash", operation.user_hash))


def _build_get_sets(operation: GetSets) -> tuple[tuple[str, str], ...]:
    return (
        ("apiKey", operation.api_key),
        ("params", _json_params(_get_sets_params(operation))),
        ("userHash", operation.user_hash or NO_USER_HASH),
    )


def _build_get_wanted_sets(operation: GetWantedSets) -> tuple[tuple[str, str], ...]:
    params = {
        "wanted": FLAG,
        "orderBy": operation.order_by.value if operation.order_by else None,
        "pageSize": operation.page_size,
        "pageNumber": operation.page_number,
        "extendedData": _flag(operation.extended_data),
    }
    return (
        ("apiKey", operation.api_key),
        ("params", _json_params(params)),
        ("userHash", operation.user_hash),
    )


def _build_get_themes(operation: GetThemes) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key),)


def _build_get_subthemes(operation: GetSubthemes) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("theme", operation.theme))


def _build_get_years(operation: GetYears) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("theme", operation.theme))


def _build_get_instructions(operation: GetInstructions) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("setID", str(operation.set_id)))


def _build_get_instructions_by_set_number(
    operation: GetInstructionsBySetNumber,
) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("setNumber", operation.set_number))


def _build_get_additional_images(operation: GetAdditionalImages) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("setID", str(operation.set_id)))


def _build_set_collection(operation: SetCollection) -> tuple[tuple[str, str], ...]:
    return (
        ("apiKey", operation.api_key),
        ("userHash", operation.user_hash),
        ("setID", str(operation.set_id)),
        ("params", _json_params(_collection_params(operation.update))),
    )


def _build_get_user_notes(operation: GetUserNotes) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("userHash", operation.user_hash))


def _build_get_key_usage_stats(operation: GetKeyUsageStats) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key),)


def _build_get_reviews(operation: GetReviews) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("setID", str(operation.set_id)))


def _build_get_minifig_collection(
    operation: GetMinifigCollection,
) -> tuple[tuple[str, str], ...]:
    params = {
        "owned": _flag(operation.owned),
        "wanted": _flag(operation.wanted),
        "query": operation.query,
    }
    return (
        ("apiKey", operation.api_key),
        ("userHash", operation.user_hash),
        ("params", _json_params(params)),
    )


def _build_set_minifig_collection(
    operation: SetMinifigCollection,
) -> tuple[tuple[str, str], ...]:
    return (
        ("apiKey", operation.api_key),
        ("userHash", operation.user_hash),
        ("minifigNumber", operation.minifig_number),
        ("params", _json_params(_minifig_collection_params(operation.update))),
    )


def _build_get_user_minifig_notes(
    operation: GetUserMinifigNotes,
) -> tuple[tuple[str, str], ...]:
    return (("apiKey", operation.api_key), ("userHash", operation.user_hash))


_BUILDERS: dict[OperationKind, Callable[..., tuple[tuple[str, str], ...]]] = {
    OperationKind.CHECK_KEY: _build_check_key,
    OperationKind.LOGIN: _build_login,
    OperationKind.CHECK_USER_HASH: _build_check_user_hash,
    OperationKind.GET_SETS: _build_get_sets,
    OperationKind.GET_WANTED_SETS: _build_get_wanted_sets,
    OperationKind.GET_THEMES: _build_get_themes,
    OperationKind.GET_SUBTHEMES: _build_get_subthemes,
    OperationKind.GET_YEARS: _build_get_years,
    OperationKind.GET_INSTRUCTIONS: _build_get_instructions,
    OperationKind.GET_INSTRUCTIONS_BY_SET_NUMBER: _build_get_instructions_by_set_number,
    OperationKind.GET_ADDITIONAL_IMAGES: _build_get_additional_images,
    OperationKind.SET_COLLECTION: _build_set_collection,
    OperationKind.GET_USER_NOTES: _build_get_user_notes,
    OperationKind.GET_KEY_USAGE_STATS: _build_get_key_usage_stats,
    OperationKind.GET_REVIEWS: _build_get_reviews,
    OperationKind.GET_MINIFIG_COLLECTION: _build_get_minifig_collection,
    OperationKind.SET_MINIFIG_COLLECTION: _build_set_minifig_collection,
    OperationKind.GET_USER_MINIFIG_NOTES: _build_get_user_minifig_notes,
}


def build(operation: Operation) -> WireRequest:
    """
    Render an operation as a wire request.

    Args:
        operation: Any supported operation

    Returns:
        WireRequest with the method name and ordered form fields
    """
    params = _BUILDERS[operation.kind](operation)
    return WireRequest(method=operation.kind.method, params=params)
