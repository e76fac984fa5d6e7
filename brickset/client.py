"""
HTTP client for the Brickset v3 API.

Wraps an ``httpx.Client`` with one method per operation and keeps the user
hash from ``log_in`` for the calls that need it. Requests are always POSTed
with the parameters form-encoded in the body.

Example:
    with BricksetClient(api_key) as client:
        client.log_in(username, password)
        wanted = client.get_wanted_sets(order_by=OrderBy.PIECES_DESC, page_size=500)
        for entry in wanted.entries:
            print(entry.set.number, entry.set.name)
"""

import logging
from types import TracebackType
from typing import Any

import httpx

from brickset.config import Settings
from brickset.errors import NotLoggedIn, RequestFailed, ServiceError, TransportError
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
from brickset.models.set import SetsPage, WantedList
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
    OrderBy,
    SetCollection,
    SetMinifigCollection,
)
from brickset.parsers.response import decode
from brickset.request import DEFAULT_ENDPOINT, build

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
DEFAULT_TIMEOUT = 15.0


class BricksetClient:
    """
    Brickset API client with rudimentary session handling.

    Args:
        api_key: Brickset API key
        client: Optional httpx client; one is created (and closed) if omitted
        endpoint: API base URL
        user_hash: Token from an earlier login, trusted without checking
        timeout: Request timeout in seconds for the created client
    """

    def __init__(
        self,
        api_key: str,
        client: httpx.Client | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
        user_hash: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = "brickset-python/0.1",
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self._user_hash = user_hash or None
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.Client | None = None) -> "BricksetClient":
        return cls(
            settings.api_key,
            client=client,
            endpoint=settings.endpoint,
            user_hash=settings.user_hash or None,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    def __enter__(self) -> "BricksetClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            self._client.close()

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    @property
    def user_hash(self) -> str | None:
        return self._user_hash

    def is_logged_in(self) -> bool:
        return self._user_hash is not None

    def log_in(self, username: str, password: str) -> str:
        """
        Log in and keep the returned user hash for later calls.

        Returns:
            The user hash, which can be saved and passed to ``reuse_login``

        Raises:
            RequestFailed: If the credentials are rejected
        """
        user_hash: str = self.execute(Login(self.api_key, username, password))
        self._user_hash = user_hash
        logger.info("Logged in to Brickset as %s", username)
        return user_hash

    def reuse_login(self, user_hash: str) -> None:
        """
        Log in with a saved user hash after checking it with the service.

        Raises:
            RequestFailed: If the hash is invalid or expired
        """
        self.check_user_hash(user_hash)
        self.force_reuse_login(user_hash)

    def force_reuse_login(self, user_hash: str) -> None:
        """Use a saved user hash without validating it."""
        self._user_hash = user_hash

    def log_out(self) -> None:
        """Forget the user hash. Has no effect when not logged in."""
        self._user_hash = None

    def check_key(self) -> None:
        """Raise ``RequestFailed`` unless the API key is valid."""
        self.execute(CheckKey(self.api_key))

    def check_user_hash(self, user_hash: str) -> None:
        """Raise ``RequestFailed`` unless ``user_hash`` is valid."""
        self.execute(CheckUserHash(self.api_key, user_hash))

    def validate_login(self) -> None:
        """Check the current user hash with the service."""
        self.check_user_hash(self._require_user_hash())

    def get_key_usage_stats(self) -> tuple[ApiKeyUsage, ...]:
        """Daily request counts for the API key, as reported by the service."""
        usage: tuple[ApiKeyUsage, ...] = self.execute(GetKeyUsageStats(self.api_key))
        return usage

    # -------------------------------------------------------------------------
    # Sets
    # -------------------------------------------------------------------------

    def get_sets(self, **filters: Any) -> SetsPage:
        """
        Search the catalog. Keyword arguments are ``GetSets`` filters.

        The user hash is sent when logged in, so each set carries the user's
        collection details.
        """
        if (filters.get("owned") or filters.get("wanted")) and not self.is_logged_in():
            raise NotLoggedIn()
        page: SetsPage = self.execute(GetSets(self.api_key, user_hash=self._user_hash, **filters))
        return page

    def get_wanted_sets(
        self,
        order_by: OrderBy | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
        extended_data: bool = False,
    ) -> WantedList:
        """One page of the user's wanted list. Requires a login."""
        operation = GetWantedSets(
            self.api_key,
            self._require_user_hash(),
            order_by=order_by,
            page_size=page_size,
            page_number=page_number,
            extended_data=extended_data,
        )
        wanted: WantedList = self.execute(operation)
        return wanted

    def get_owned_sets(
        self,
        order_by: OrderBy | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
        extended_data: bool = False,
    ) -> SetsPage:
        """One page of the user's owned sets. Requires a login."""
        self._require_user_hash()
        return self.get_sets(
            owned=True,
            order_by=order_by,
            page_size=page_size,
            page_number=page_number,
            extended_data=extended_data,
        )

    def get_instructions(self, set_id: int) -> tuple[Instructions, ...]:
        instructions: tuple[Instructions, ...] = self.execute(GetInstructions(self.api_key, set_id))
        return instructions

    def get_instructions_by_set_number(self, set_number: str) -> tuple[Instructions, ...]:
        instructions: tuple[Instructions, ...] = self.execute(
            GetInstructionsBySetNumber(self.api_key, set_number)
        )
        return instructions

    def get_additional_images(self, set_id: int) -> tuple[AdditionalImage, ...]:
        images: tuple[AdditionalImage, ...] = self.execute(
            GetAdditionalImages(self.api_key, set_id)
        )
        return images

    def get_reviews(self, set_id: int) -> tuple[Review, ...]:
        reviews: tuple[Review, ...] = self.execute(GetReviews(self.api_key, set_id))
        return reviews

    # -------------------------------------------------------------------------
    # Themes
    # -------------------------------------------------------------------------

    def get_themes(self) -> tuple[Theme, ...]:
        themes: tuple[Theme, ...] = self.execute(GetThemes(self.api_key))
        return themes

    def get_subthemes(self, theme: str) -> tuple[Subtheme, ...]:
        subthemes: tuple[Subtheme, ...] = self.execute(GetSubthemes(self.api_key, theme))
        return subthemes

    def get_years(self, theme: str) -> tuple[Year, ...]:
        years: tuple[Year, ...] = self.execute(GetYears(self.api_key, theme))
        return years

    # -------------------------------------------------------------------------
    # Collection
    # -------------------------------------------------------------------------

    def set_collection(self, set_id: int, update: CollectionUpdate) -> None:
        """Apply ``update`` to the user's entry for a set. Requires a login."""
        self.execute(SetCollection(self.api_key, self._require_user_hash(), set_id, update))

    def set_wanted(self, set_id: int, wanted: bool) -> None:
        self.set_collection(set_id, CollectionUpdate(wanted=wanted))

    def set_owned(self, set_id: int, qty_owned: int) -> None:
        """Set the owned quantity; zero removes the set from the owned list."""
        self.set_collection(set_id, CollectionUpdate(qty_owned=qty_owned))

    def set_notes(self, set_id: int, notes: str) -> None:
        self.set_collection(set_id, CollectionUpdate(notes=notes))

    def set_rating(self, set_id: int, rating: int) -> None:
        self.set_collection(set_id, CollectionUpdate(rating=rating))

    def get_notes(self) -> tuple[UserNote, ...]:
        notes: tuple[UserNote, ...] = self.execute(
            GetUserNotes(self.api_key, self._require_user_hash())
        )
        return notes

    # -------------------------------------------------------------------------
    # Minifigs
    # -------------------------------------------------------------------------

    def get_minifig_collection(
        self, owned: bool = False, wanted: bool = False, query: str | None = None
    ) -> tuple[MinifigCollection, ...]:
        """
        The user's minifig collection. Requires a login.

        Args:
            owned: Only minifigs the user owns
            wanted: Only minifigs the user wants
            query: Free text matched against minifig number and name
        """
        operation = GetMinifigCollection(
            self.api_key, self._require_user_hash(), owned=owned, wanted=wanted, query=query
        )
        minifigs: tuple[MinifigCollection, ...] = self.execute(operation)
        return minifigs

    def get_owned_minifigs(self, query: str | None = None) -> tuple[MinifigCollection, ...]:
        return self.get_minifig_collection(owned=True, query=query)

    def get_wanted_minifigs(self, query: str | None = None) -> tuple[MinifigCollection, ...]:
        return self.get_minifig_collection(wanted=True, query=query)

    def set_minifig_collection(self, minifig_number: str, update: MinifigCollectionUpdate) -> None:
        """Apply ``update`` to the user's entry for a minifig. Requires a login."""
        self.execute(
            SetMinifigCollection(self.api_key, self._require_user_hash(), minifig_number, update)
        )

    def set_minifig_owned(self, minifig_number: str, qty_owned: int) -> None:
        """Set the owned quantity; zero removes the minifig from the owned list."""
        self.set_minifig_collection(minifig_number, MinifigCollectionUpdate(qty_owned=qty_owned))

    def set_minifig_wanted(self, minifig_number: str, wanted: bool) -> None:
        self.set_minifig_collection(minifig_number, MinifigCollectionUpdate(wanted=wanted))

    def set_minifig_notes(self, minifig_number: str, notes: str) -> None:
        self.set_minifig_collection(minifig_number, MinifigCollectionUpdate(notes=notes))

    def get_minifig_notes(self) -> tuple[UserMinifigNote, ...]:
        notes: tuple[UserMinifigNote, ...] = self.execute(
            GetUserMinifigNotes(self.api_key, self._require_user_hash())
        )
        return notes

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def execute(self, operation: Operation) -> Any:
        """
        Send an operation and return its decoded payload.

        Raises:
            TransportError: If the HTTP exchange fails or returns a non-2xx status
            RequestFailed: If the service reports an error
            MalformedResponse: If the body is not a Brickset envelope
            UnexpectedPayloadShape: If the payload doesn't match the operation
        """
        request = build(operation)
        name = operation.kind.value
        logger.debug("Executing Brickset API request: %s", name)

        try:
            response = self._client.post(
                request.url(self.endpoint),
                content=request.form_body(),
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{name}: HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"{name}: {e}") from e

        result = decode(operation, response.content)
        if isinstance(result, ServiceError):
            logger.warning("Brickset %s failed: %s", name, result.message)
            raise RequestFailed(result, method=name)
        return result.value

    def _require_user_hash(self) -> str:
        if self._user_hash is None:
            raise NotLoggedIn()
        return self._user_hash
