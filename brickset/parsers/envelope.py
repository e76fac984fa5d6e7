"""
The generic Brickset response envelope.

Every response is a JSON object with a ``status`` of ``"success"`` or
``"error"``, an optional ``message``, and operation-specific fields. The live
service puts those fields next to ``status``:

    {"status": "success", "matches": 1, "sets": [...]}

An explicit ``payload`` object is accepted as well:

    {"status": "success", "payload": {"sets": [...]}}
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from brickset.errors import MalformedResponse, UnexpectedPayloadShape

PAYLOAD_KEY = "payload"


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ResponseEnvelope(BaseModel):
    """Decoded top level of a response: status, message and payload fields."""

    model_config = ConfigDict(extra="allow", frozen=True)

    status: ResponseStatus
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is ResponseStatus.SUCCESS

    def payload(self) -> dict[str, Any]:
        """
        The operation-specific region of the envelope.

        Raises:
            UnexpectedPayloadShape: If ``payload`` is present but not an object
        """
        extra = dict(self.model_extra or {})
        if PAYLOAD_KEY not in extra:
            return extra
        region = extra[PAYLOAD_KEY]
        if not isinstance(region, dict):
            raise UnexpectedPayloadShape("expected an object", path=PAYLOAD_KEY)
        return region


def parse_envelope(raw: bytes | str) -> ResponseEnvelope:
    """
    Parse raw response bytes into the generic envelope.

    Args:
        raw: Response body as returned by the transport

    Returns:
        The envelope, payload fields untouched

    Raises:
        MalformedResponse: If the body is empty, not JSON, not an object, or
            has no recognizable status
    """
    if not raw or not raw.strip():
        raise MalformedResponse("empty response body", body=raw)

    try:
        return ResponseEnvelope.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedResponse(f"not a Brickset response envelope: {e}", body=raw) from e
