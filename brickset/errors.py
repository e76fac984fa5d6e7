"""
Error taxonomy.

Two kinds of failure come out of a Brickset exchange:

- The service reported an error (bad API key, expired user hash, invalid
  parameters). This is an expected outcome and is returned as a
  ``ServiceError`` value, never raised by the decoder.
- The bytes don't match what the library expects (not JSON, no status,
  payload missing or the wrong shape). These are contract violations and are
  raised as ``ResponseError`` subclasses.

The orchestration layer adds ``RequestFailed``, ``TransportError`` and
``NotLoggedIn`` on top.
"""

from dataclasses import dataclass

DEFAULT_SERVICE_MESSAGE = "The service reported an error without a message."


class BricksetError(Exception):
    """Base class for all Brickset client exceptions."""


@dataclass(frozen=True, slots=True)
class ServiceError:
    """A failure the service reported through its own status field."""

    message: str = DEFAULT_SERVICE_MESSAGE

    def __str__(self) -> str:
        return self.message


class ResponseError(BricksetError):
    """The response violates the contract this library expects."""


class MalformedResponse(ResponseError):
    """
    The body is not a Brickset envelope at all.

    Typical causes: HTML error page, truncated body, API version mismatch.
    """

    def __init__(self, message: str, body: bytes | str = b""):
        self.body = body
        super().__init__(message)


class UnexpectedPayloadShape(ResponseError):
    """The envelope claimed success but its payload is missing or malformed."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class MissingToken(UnexpectedPayloadShape):
    """A successful login carried no user hash."""

    def __init__(self, path: str = "hash"):
        super().__init__("login succeeded but no user hash was returned", path=path)


class RequestFailed(BricksetError):
    """Raised by the client when the service answers with an error status."""

    def __init__(self, error: ServiceError, method: str = ""):
        self.error = error
        self.method = method
        super().__init__(f"{method}: {error.message}" if method else error.message)


class TransportError(BricksetError):
    """The HTTP exchange itself failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class NotLoggedIn(BricksetError):
    """A user-specific call was made before logging in."""

    def __init__(self) -> None:
        super().__init__("Not logged in")
