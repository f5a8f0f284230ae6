"""Command-line driver for the listing feed.

Usage:
    catalog-feed --pages 3 --search iphone

Requires:
    CATALOG_ENDPOINT_URL and CATALOG_ACCESS_TOKEN in the environment, ./.env,
    config/catalog.json or ~/.catalog_feed.json
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence, TextIO

from .catalog_config import CatalogConfig, load_catalog_config
from .config import CatalogEnvironment, ConfigurationError
from .data_models import FilterParams, Listing
from .listing_api import ListingFetcher
from .logging_config import setup_logging
from .pagination import PaginationController, PaginationPhase

logger = logging.getLogger(__name__)

SERVICE_NAME = "catalog-feed"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=SERVICE_NAME, description="Page through marketplace listings.")
    parser.add_argument("--pages", type=int, default=1, help="Maximum number of pages to load (default: 1)")
    parser.add_argument("--search", default="", help="Free-text search")
    parser.add_argument("--sort", default="", help="Sort key passed to the service")
    parser.add_argument("--category", action="append", default=[], dest="categories", help="Category filter; repeatable")
    parser.add_argument("--min", default="", dest="min_price", help="Minimum price")
    parser.add_argument("--max", default="", dest="max_price", help="Maximum price")
    parser.add_argument("--refresh", action="store_true", help="Refresh once after loading, as a pull-to-refresh would")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def filters_from_args(args: argparse.Namespace) -> FilterParams:
    categories = args.categories if args.categories else CatalogEnvironment().items("CATEGORIES")
    return FilterParams(
        categories=tuple(categories),
        max_price=args.max_price,
        min_price=args.min_price,
        search=args.search,
        sort=args.sort,
    )


def format_listing(listing: Listing) -> str:
    currency = listing.currency if listing.currency else ""
    name = listing.display_name if listing.display_name else "Product Name"
    brand = listing.brand if listing.brand else "-"
    return f"{listing.id:>8}  {currency} {listing.formatted_price:>10}  {brand}  {name}"


async def run_feed(
    controller: PaginationController,
    *,
    pages: int,
    refresh: bool = False,
) -> PaginationPhase:
    """Load up to ``pages`` pages, then optionally refresh; return the final phase."""
    await controller.load_initial()
    loaded = 1
    while loaded < pages and controller.phase is PaginationPhase.IDLE and not controller.exhausted:
        await controller.load_more()
        loaded += 1
    if refresh:
        await controller.refresh()
    return controller.phase


async def _main_async(config: CatalogConfig, args: argparse.Namespace, out: TextIO) -> int:
    async with ListingFetcher(config) as fetcher:
        controller = PaginationController(fetcher, filters_from_args(args), page_size=config.page_size)
        final_phase = await run_feed(controller, pages=args.pages, refresh=args.refresh)

    snapshot = controller.snapshot()
    for listing in snapshot.listings:
        print(format_listing(listing), file=out)
    if snapshot.error:
        print(snapshot.error, file=sys.stderr)
        return 1
    if not snapshot.listings:
        print("No products available", file=out)
    logger.info("Loaded %d listings (exhausted=%s, phase=%s)", len(snapshot.listings), snapshot.is_exhausted, final_phase.value)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(SERVICE_NAME, verbose=args.verbose)
    if args.pages < 1:
        logger.error("--pages must be at least 1")
        return 2
    try:
        config = load_catalog_config()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 2
    return asyncio.run(_main_async(config, args, sys.stdout))


if __name__ == "__main__":
    sys.exit(main())
