"""
Print the logged-in user's Brickset wanted list.

Credentials come from BRICKSET_* environment variables (or .env). A saved
BRICKSET_USER_HASH is tried first; otherwise the job logs in with
BRICKSET_USERNAME and BRICKSET_PASSWORD, prompting for the password if it is
not set.
"""

import argparse
import getpass
import logging

from brickset.client import BricksetClient
from brickset.config import Settings, settings
from brickset.errors import BricksetError, RequestFailed
from brickset.models.fields import UNKNOWN, Field
from brickset.models.set import LegoCom, RetailDetails, WantedList, WantedListEntry
from brickset.operations import MAX_PAGE_SIZE, OrderBy

logger = logging.getLogger(__name__)

UNKNOWN_TEXT = "Unknown"


def _show(value: Field[object]) -> str:
    if value is UNKNOWN or value is None:
        return UNKNOWN_TEXT
    return str(value)


def _pricing_lines(lego_com: Field[LegoCom]) -> list[str]:
    if not isinstance(lego_com, LegoCom):
        return []
    regions: list[tuple[str, Field[RetailDetails]]] = [
        ("USD", lego_com.united_states),
        ("CAD", lego_com.canada),
        ("EUR", lego_com.germany),
        ("GBP", lego_com.united_kingdom),
    ]
    lines: list[str] = []
    for currency, details in regions:
        if not isinstance(details, RetailDetails) or not isinstance(details.retail_price, float):
            continue
        line = f"  - {details.retail_price:.2f} {currency}"
        if details.date_last_available:
            line += f" Last available: {details.date_last_available:%Y-%m-%d}"
        lines.append(line)
    return lines


def format_entry(entry: WantedListEntry) -> list[str]:
    """Human-readable summary of one wanted set."""
    item = entry.set
    lines = [
        f"{item.number} {_show(item.name)}",
        f"  Theme: {_show(item.theme)} (Subtheme: {_show(item.subtheme)})",
        f"  Pieces: {_show(item.pieces)}",
        f"  Availability: {_show(item.availability)}",
    ]
    pricing = _pricing_lines(item.lego_com)
    if pricing:
        lines.append("  Pricing on LEGO.com:")
        lines.extend(pricing)
    return lines


def format_wanted_list(wanted: WantedList) -> list[str]:
    lines = [f"User has {_show(wanted.matches)} sets in wantlist"]
    for entry in wanted.entries:
        lines.extend(format_entry(entry))
    return lines


def log_in(client: BricksetClient, settings: Settings) -> None:
    """Log in with the saved user hash, falling back to username/password."""
    if settings.user_hash:
        try:
            client.reuse_login(settings.user_hash)
            logger.info("Logged in using saved user hash")
            return
        except RequestFailed as e:
            logger.warning("Could not log in with saved user hash: %s", e)

    password = settings.password or getpass.getpass("Password: ")
    user_hash = client.log_in(settings.username, password)
    logger.info("Logged in; set BRICKSET_USER_HASH=%s to skip the password next time", user_hash)


def run_wantlist(
    settings: Settings,
    order_by: OrderBy = OrderBy.PIECES_DESC,
    page_size: int = MAX_PAGE_SIZE,
    client: BricksetClient | None = None,
) -> WantedList:
    """
    Log in and fetch the wanted list.

    Args:
        settings: Credentials and endpoint
        order_by: Sort order
        page_size: Number of sets to fetch
        client: Optional client, mainly for tests

    Returns:
        The first page of the user's wanted list
    """
    owned_client = client is None
    client = client or BricksetClient.from_settings(settings)
    try:
        log_in(client, settings)
        wanted = client.get_wanted_sets(order_by=order_by, page_size=page_size)
        logger.info("Fetched %d wanted sets", len(wanted))
        return wanted
    finally:
        if owned_client:
            client.close()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for printing the wanted list."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Print your Brickset wanted list")
    parser.add_argument(
        "--order-by",
        type=OrderBy,
        default=OrderBy.PIECES_DESC,
        choices=list(OrderBy),
        metavar="ORDER",
        help="Sort order, e.g. PiecesDESC or Name (default: PiecesDESC)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=MAX_PAGE_SIZE,
        help=f"Number of sets to fetch, 1-{MAX_PAGE_SIZE} (default: {MAX_PAGE_SIZE})",
    )
    args = parser.parse_args(argv)

    if not settings.api_key:
        logger.error("BRICKSET_API_KEY is not set")
        return 1

    try:
        wanted = run_wantlist(settings, order_by=args.order_by, page_size=args.page_size)
    except (BricksetError, ValueError) as e:
        logger.error("Failed to fetch wanted list: %s", e)
        return 1

    for line in format_wanted_list(wanted):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
