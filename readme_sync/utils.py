"""Utility helpers for package name handling."""

from __future__ import annotations

import re

PACKAGE_PREFIX = "babel-"
SIDEBAR_PREFIX_PATTERN = re.compile(r"^babel-(plugin|proposal|preset)-")


def strip_package_prefix(name: str) -> str:
    """Remove the leading ``babel-`` from a package name, if present."""
    if name.startswith(PACKAGE_PREFIX):
        return name[len(PACKAGE_PREFIX):]
    return name


def output_filename(name: str) -> str:
    return f"{strip_package_prefix(name)}.md"


def sidebar_label(name: str) -> str:
    """Short label shown in the docs sidebar, e.g. ``transform-arrow-functions``."""
    return SIDEBAR_PREFIX_PATTERN.sub("", name, count=1)
