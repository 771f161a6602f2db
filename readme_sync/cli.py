"""Command-line entry point for the README sync."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

import requests

from .config import DEFAULT_OUTPUT_DIR, SyncConfig
from .sync import run_sync

logger = logging.getLogger("readme_sync.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Download Babel package READMEs from GitHub and write them as Docusaurus docs."
        ),
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        type=Path,
        help="Directory where the Markdown files should be written",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = SyncConfig.from_env(args.output.resolve())

    overall_start = time.perf_counter()
    try:
        results = asyncio.run(run_sync(config))
    except (requests.RequestException, ValueError) as exc:
        logger.error("Could not retrieve package listing: %s", exc)
        sys.exit(1)
    total_elapsed = time.perf_counter() - overall_start

    successes = sum(1 for result in results if result.succeeded)
    failures = len(results) - successes
    logger.log(
        logging.WARNING if failures else logging.INFO,
        "Finished in %.2fs (%d/%d succeeded, %d failed)",
        total_elapsed,
        successes,
        len(results),
        failures,
    )

    if args.verbose:
        for result in results:
            logger.debug(
                "Timing for %s -> total: %.2fs",
                result.name,
                result.total_seconds,
            )


if __name__ == "__main__":
    main()
