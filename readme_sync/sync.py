"""High-level orchestration for listing, downloading and writing READMEs."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import requests

from .candidates import collect_candidates, filter_candidates
from .config import SOURCES, SyncConfig
from .github import build_raw_url, create_session, fetch_directory_listing, fetch_raw_text
from .markdown import build_document
from .models import Candidate, DirectoryListing, SyncResult

logger = logging.getLogger("readme_sync")


async def fetch_listings(
    session: requests.Session,
    config: SyncConfig,
    sources: Sequence[Tuple[str, str]] = SOURCES,
) -> List[DirectoryListing]:
    """Fetch every source listing concurrently; any failure propagates."""
    return list(
        await asyncio.gather(
            *(
                fetch_directory_listing(session, config, repo, branch)
                for repo, branch in sources
            )
        )
    )


def write_document(output_root: Path, filename: str, content: str) -> Path:
    output_path = output_root / filename
    output_path.write_text(content, encoding="utf-8")
    return output_path


async def process_candidate(
    session: requests.Session,
    candidate: Candidate,
    config: SyncConfig,
) -> SyncResult:
    """Fetch, trim and write one README. Errors are logged, never raised."""
    start = time.perf_counter()
    url = build_raw_url(candidate.uri, config)
    try:
        text = await fetch_raw_text(session, url, timeout=config.request_timeout)
    except requests.RequestException as exc:
        logger.error("Could not load %s: %s", candidate.name, exc)
        return SyncResult(candidate.name, None, exc, time.perf_counter() - start)

    document = build_document(candidate, text, config.skip_lines)
    try:
        output_path = await asyncio.to_thread(
            write_document, config.output_root, document.filename, document.content
        )
    except OSError as exc:
        logger.error("Could not write %s: %s", candidate.name, exc)
        return SyncResult(candidate.name, None, exc, time.perf_counter() - start)

    logger.info("Saved %s to %s", candidate.name, output_path)
    return SyncResult(candidate.name, output_path, None, time.perf_counter() - start)


async def _process_with_semaphore(
    semaphore: asyncio.Semaphore,
    session: requests.Session,
    candidate: Candidate,
    config: SyncConfig,
) -> SyncResult:
    async with semaphore:
        return await process_candidate(session, candidate, config)


async def download_candidates(
    candidates: Sequence[Candidate],
    config: SyncConfig,
    session: requests.Session,
) -> List[SyncResult]:
    """Process candidates with at most ``config.concurrency`` in flight."""
    try:
        config.output_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not write %s: %s", config.output_root, exc)
        return [SyncResult(candidate.name, None, exc, 0.0) for candidate in candidates]

    semaphore = asyncio.Semaphore(config.concurrency)
    tasks = [
        _process_with_semaphore(semaphore, session, candidate, config)
        for candidate in candidates
    ]
    return list(await asyncio.gather(*tasks))


async def run_sync(
    config: SyncConfig,
    session: Optional[requests.Session] = None,
) -> List[SyncResult]:
    """List the source repositories, then download every published package README.

    Listing failures propagate before any file is written.
    """
    owns_session = session is None
    if session is None:
        session = create_session(config)
    try:
        logger.info("Retrieving package listing...")
        listings = await fetch_listings(session, config)

        candidates = filter_candidates(collect_candidates(listings, config.organization))
        logger.info("Downloading READMEs...")
        logger.debug("%d packages matched", len(candidates))
        return await download_candidates(candidates, config, session)
    finally:
        if owns_session:
            session.close()
