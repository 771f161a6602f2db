"""Configuration objects and constants for the README sync."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

DEFAULT_OUTPUT_DIR = "docs-v7"
DEFAULT_ORGANIZATION = "babel"
GITHUB_API_BASE = "https://api.github.com"
GITHUB_RAW_BASE = "https://raw.githubusercontent.com"
CONCURRENT_REQUESTS = 20

# (repository, branch) pairs whose packages directory is listed.
SOURCES: Tuple[Tuple[str, str], ...] = (
    ("babel", "6.x"),
    ("minify", "master"),
)


@dataclass
class SyncConfig:
    """Settings that control listing, downloading and writing READMEs."""

    output_root: Path
    organization: str = DEFAULT_ORGANIZATION
    api_base: str = GITHUB_API_BASE
    raw_base: str = GITHUB_RAW_BASE
    concurrency: int = CONCURRENT_REQUESTS
    skip_lines: int = 4
    request_timeout: Optional[float] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None

    @property
    def has_client_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @classmethod
    def from_env(
        cls,
        output_root: Path,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "SyncConfig":
        """Build a config, picking up the GitHub OAuth app credentials if set."""
        env = os.environ if environ is None else environ
        return cls(
            output_root=output_root,
            client_id=env.get("GITHUB_CLIENT_ID") or None,
            client_secret=env.get("GITHUB_CLIENT_SECRET") or None,
        )
