"""HTTP access to the GitHub contents API and the raw content host."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict
from urllib.parse import urlencode

import requests
from requests.adapters import HTTPAdapter

from .config import SyncConfig
from .models import DirectoryEntry, DirectoryListing

logger = logging.getLogger("readme_sync")

USER_AGENT = "babel-readmes"


def create_session(config: SyncConfig) -> requests.Session:
    """Create a session whose connection pool fits the download concurrency."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    adapter = HTTPAdapter(
        pool_connections=config.concurrency,
        pool_maxsize=config.concurrency,
    )
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def build_listing_url(repo: str, branch: str, config: SyncConfig) -> str:
    """URL of the contents listing for ``<repo>/packages`` at ``branch``.

    Appends the OAuth app's client id and secret when both are configured.
    Never carries an access token.
    """
    params: Dict[str, str] = {"ref": branch}
    if config.has_client_credentials:
        params["client_id"] = config.client_id or ""
        params["client_secret"] = config.client_secret or ""
    base = config.api_base.rstrip("/")
    return f"{base}/repos/{config.organization}/{repo}/contents/packages?{urlencode(params)}"


def build_raw_url(uri: str, config: SyncConfig) -> str:
    return config.raw_base.rstrip("/") + uri


async def fetch_directory_listing(
    session: requests.Session,
    config: SyncConfig,
    repo: str,
    branch: str = "master",
) -> DirectoryListing:
    """Fetch the packages directory listing of ``repo`` at ``branch``.

    Raises ``requests.RequestException`` on network or HTTP errors and
    ``ValueError`` when the body is not a JSON array of entries.
    """
    url = build_listing_url(repo, branch, config)
    logger.debug("Listing %s@%s", repo, branch)
    resp = await asyncio.to_thread(
        lambda: session.get(url, timeout=config.request_timeout)
    )
    resp.raise_for_status()
    payload = resp.json()
    if not isinstance(payload, list):
        raise ValueError(
            f"Unexpected listing payload for {repo}@{branch}: {type(payload).__name__}"
        )
    try:
        entries = [DirectoryEntry.from_api(item) for item in payload]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed listing entry for {repo}@{branch}: {exc!r}") from exc
    return DirectoryListing(repo=repo, branch=branch, entries=entries)


async def fetch_raw_text(
    session: requests.Session,
    url: str,
    timeout: float | None = None,
) -> str:
    """Download a raw file and return its text."""
    resp = await asyncio.to_thread(lambda: session.get(url, timeout=timeout))
    resp.raise_for_status()
    return resp.text
