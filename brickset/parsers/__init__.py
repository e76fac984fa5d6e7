from brickset.parsers.envelope import ResponseEnvelope, ResponseStatus, parse_envelope
from brickset.parsers.response import Result, Success, decode, encode
from brickset.parsers.sets import decode_set, full_set_number

__all__ = [
    "ResponseEnvelope",
    "ResponseStatus",
    "Result",
    "Success",
    "decode",
    "decode_set",
    "encode",
    "full_set_number",
    "parse_envelope",
]
