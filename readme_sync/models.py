"""Data models used throughout the README sync pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional


@dataclass
class DirectoryEntry:
    """One entry of a GitHub contents API listing."""

    name: str
    path: str
    type: str

    @property
    def is_directory(self) -> bool:
        return self.type == "dir"

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "DirectoryEntry":
        return cls(
            name=str(payload["name"]),
            path=str(payload["path"]),
            type=str(payload.get("type", "")),
        )


@dataclass
class DirectoryListing:
    """Entries of a repository's packages directory at a given branch."""

    repo: str
    branch: str
    entries: List[DirectoryEntry] = field(default_factory=list)


@dataclass(frozen=True)
class Candidate:
    """A README slated for download."""

    name: str
    uri: str


@dataclass
class Document:
    """Final Markdown artifact for a candidate."""

    candidate: Candidate
    filename: str
    content: str


@dataclass
class SyncResult:
    """Outcome of processing a single candidate."""

    name: str
    output_path: Optional[Path]
    error: Optional[BaseException]
    total_seconds: float

    @property
    def succeeded(self) -> bool:
        return self.output_path is not None
