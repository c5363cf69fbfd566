#!/usr/bin/env python3
"""CLI smoke check against the live DashX API.

Usage:
    # Identify an anonymous visitor and track one event
    PYTHONPATH=src python scripts/run_smoke_check.py

    # Identify a known account
    PYTHONPATH=src python scripts/run_smoke_check.py --uid 42 --event "Checked In" -v
"""
import argparse
import asyncio
import logging
import sys

import aiohttp

from dashx_core import DashXClientError, create_client


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="DashX API smoke check")
    parser.add_argument(
        "--uid",
        type=str,
        help="Account uid to identify. Defaults to an anonymous visitor.",
    )
    parser.add_argument(
        "--event",
        type=str,
        default="Smoke Check Ran",
        help="Event name to track",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("dashx_smoke_check")

    try:
        async with aiohttp.ClientSession() as session:
            client = create_client(session=session)

            account = await client.identify(args.uid)
            logger.info("identifyAccount: %s", account)

            result = await client.track(args.event, args.uid, {"source": "cli"})
            logger.info("trackEvent: %s", result)
    except DashXClientError as e:
        logger.error("Smoke check failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
