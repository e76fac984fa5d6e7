import pytest

from brickset.errors import MalformedResponse, UnexpectedPayloadShape
from brickset.parsers.envelope import ResponseStatus, parse_envelope


class TestParseEnvelope:
    def test_success(self) -> None:
        envelope = parse_envelope(b'{"status": "success", "matches": 3}')

        assert envelope.status is ResponseStatus.SUCCESS
        assert envelope.succeeded
        assert envelope.message is None

    def test_error_with_message(self) -> None:
        envelope = parse_envelope(b'{"status": "error", "message": "Invalid API key"}')

        assert envelope.status is ResponseStatus.ERROR
        assert not envelope.succeeded
        assert envelope.message == "Invalid API key"

    def test_empty_body(self) -> None:
        with pytest.raises(MalformedResponse, match="empty"):
            parse_envelope(b"")

    def test_not_json(self) -> None:
        with pytest.raises(MalformedResponse):
            parse_envelope(b"Service Unavailable")


class TestPayload:
    def test_fields_next_to_status(self) -> None:
        envelope = parse_envelope(b'{"status": "success", "message": "", "matches": 1, "sets": []}')

        assert envelope.payload() == {"matches": 1, "sets": []}

    def test_explicit_payload_object(self) -> None:
        envelope = parse_envelope(b'{"status": "success", "payload": {"hash": "abc"}, "x": 1}')

        assert envelope.payload() == {"hash": "abc"}

    def test_no_payload_fields(self) -> None:
        assert parse_envelope(b'{"status": "success"}').payload() == {}

    def test_payload_wrong_type(self) -> None:
        envelope = parse_envelope(b'{"status": "success", "payload": "abc"}')

        with pytest.raises(UnexpectedPayloadShape) as excinfo:
            envelope.payload()

        assert excinfo.value.path == "payload"
