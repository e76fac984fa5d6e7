"""
Response decoding.

``decode`` runs in two phases:

1. Parse the body into a ``ResponseEnvelope``. Anything that is not a
   Brickset envelope raises ``MalformedResponse``.
2. Branch on the status. An error status becomes a ``ServiceError`` value;
   a success status has its payload decoded for the given operation, and a
   missing or malformed payload raises ``UnexpectedPayloadShape``.

Decoding is stateless: the same bytes always produce equal values.
``encode`` renders a decoded result back into an envelope so that
``decode(op, encode(op, decode(op, raw)))`` equals ``decode(op, raw)``.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from brickset.errors import DEFAULT_SERVICE_MESSAGE, MissingToken, ServiceError, UnexpectedPayloadShape
from brickset.models.catalog import (
    AdditionalImage,
    ApiKeyUsage,
    Instructions,
    MinifigCollection,
    Review,
    Subtheme,
    Theme,
    UserMinifigNote,
    UserNote,
    Year,
)
from brickset.operations import Operation, OperationKind
from brickset.parsers.catalog import decode_rows, encode_rows
from brickset.parsers.envelope import ResponseStatus, parse_envelope
from brickset.parsers.sets import (
    decode_sets,
    decode_wanted_sets,
    encode_sets,
    encode_wanted_sets,
)

T = TypeVar("T")

# "hash" is what the live service sends; "token" is accepted as well
TOKEN_KEYS = ("hash", "token")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful response carrying the operation's decoded payload."""

    value: T


Result: TypeAlias = Success[T] | ServiceError


def _decode_token(region: dict[str, Any]) -> str:
    for key in TOKEN_KEYS:
        if key not in region:
            continue
        token = region[key]
        if token is None or token == "":
            raise MissingToken(path=key)
        if not isinstance(token, str):
            raise UnexpectedPayloadShape(
                f"expected a string, got {type(token).__name__}", path=key
            )
        return token
    raise MissingToken()


def _decode_nothing(_region: dict[str, Any]) -> None:
    return None


def _encode_nothing(_value: None) -> dict[str, Any]:
    return {}


def _rows(key: str, model: type) -> tuple[Callable[..., Any], Callable[..., dict[str, Any]]]:
    return (
        lambda region: decode_rows(region, key, model),
        lambda rows: encode_rows(key, rows),
    )


_CODECS: dict[OperationKind, tuple[Callable[..., Any], Callable[..., dict[str, Any]]]] = {
    OperationKind.CHECK_KEY: (_decode_nothing, _encode_nothing),
    OperationKind.LOGIN: (_decode_token, lambda token: {"hash": token}),
    OperationKind.CHECK_USER_HASH: (_decode_nothing, _encode_nothing),
    OperationKind.GET_SETS: (decode_sets, encode_sets),
    OperationKind.GET_WANTED_SETS: (decode_wanted_sets, encode_wanted_sets),
    OperationKind.GET_THEMES: _rows("themes", Theme),
    OperationKind.GET_SUBTHEMES: _rows("subthemes", Subtheme),
    OperationKind.GET_YEARS: _rows("years", Year),
    OperationKind.GET_INSTRUCTIONS: _rows("instructions", Instructions),
    OperationKind.GET_INSTRUCTIONS_BY_SET_NUMBER: _rows("instructions", Instructions),
    OperationKind.GET_ADDITIONAL_IMAGES: _rows("additionalImages", AdditionalImage),
    OperationKind.SET_COLLECTION: (_decode_nothing, _encode_nothing),
    OperationKind.GET_USER_NOTES: _rows("userNotes", UserNote),
    OperationKind.GET_KEY_USAGE_STATS: _rows("apiKeyUsage", ApiKeyUsage),
    OperationKind.GET_REVIEWS: _rows("reviews", Review),
    OperationKind.GET_MINIFIG_COLLECTION: _rows("minifigs", MinifigCollection),
    OperationKind.SET_MINIFIG_COLLECTION: (_decode_nothing, _encode_nothing),
    OperationKind.GET_USER_MINIFIG_NOTES: _rows("userMinifigNotes", UserMinifigNote),
}


def decode(operation: Operation, raw: bytes | str) -> Result[Any]:
    """
    Decode a response body for the operation that produced it.

    Args:
        operation: The operation the request was built from
        raw: Response body

    Returns:
        ``Success`` with the operation's payload, or the ``ServiceError`` the
        service reported

    Raises:
        MalformedResponse: If the body is not a Brickset envelope
        UnexpectedPayloadShape: If a success envelope lacks the expected payload
    """
    envelope = parse_envelope(raw)

    if envelope.status is ResponseStatus.ERROR:
        message = envelope.message if envelope.message and envelope.message.strip() else None
        return ServiceError(message or DEFAULT_SERVICE_MESSAGE)

    decode_payload, _ = _CODECS[operation.kind]
    return Success(decode_payload(envelope.payload()))


def encode(operation: Operation, result: Result[Any]) -> bytes:
    """Render a decoded result as the envelope the service would have sent."""
    if isinstance(result, ServiceError):
        body: dict[str, Any] = {"status": ResponseStatus.ERROR.value, "message": result.message}
    else:
        _, encode_payload = _CODECS[operation.kind]
        body = {"status": ResponseStatus.SUCCESS.value, **encode_payload(result.value)}
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
