"""Mapping of directory listings to README candidates, and name filtering."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from .models import Candidate, DirectoryListing

ALLOWED_SCOPES = ("preset", "plugin", "proposal")
PACKAGE_NAME_PATTERN = re.compile(r"^babel-([^-\s]+)-.*")

# Packages whose README does not live under a packages/ directory.
SPECIAL_CASES: Sequence[Candidate] = (
    Candidate(name="babel-preset-env", uri="/babel/babel-preset-env/1.x/README.md"),
    Candidate(name="babylon", uri="/babel/babylon/master/README.md"),
)


def candidates_from_listing(
    listing: DirectoryListing, organization: str = "babel"
) -> List[Candidate]:
    """Turn the directories of a listing into README candidates."""
    return [
        Candidate(
            name=entry.name,
            uri=f"/{organization}/{listing.repo}/{listing.branch}/{entry.path}/README.md",
        )
        for entry in listing.entries
        if entry.is_directory
    ]


def collect_candidates(
    listings: Iterable[DirectoryListing], organization: str = "babel"
) -> List[Candidate]:
    candidates: List[Candidate] = []
    for listing in listings:
        candidates.extend(candidates_from_listing(listing, organization))
    candidates.extend(SPECIAL_CASES)
    return candidates


def is_published_package(name: str) -> bool:
    """True for ``babel-preset-*``, ``babel-plugin-*`` and ``babel-proposal-*``."""
    match = PACKAGE_NAME_PATTERN.match(name)
    return bool(match) and match.group(1) in ALLOWED_SCOPES


def filter_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    return [candidate for candidate in candidates if is_published_package(candidate.name)]
