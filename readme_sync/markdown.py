"""README trimming and Docusaurus front matter generation."""

from __future__ import annotations

from .models import Candidate, Document
from .utils import output_filename, sidebar_label

FRONT_MATTER_DELIMITER = "---"


def strip_leading_lines(text: str, count: int = 4) -> str:
    """Drop the first ``count`` lines of a README.

    Package READMEs start with a ``# babel-something`` heading, a blank line,
    a ``> description`` line and another blank line. The shape is not checked.
    """
    return "\n".join(text.split("\n")[count:])


def compose_front_matter(name: str, body: str) -> str:
    """Generate final Markdown including front matter."""
    front_matter_lines = [
        FRONT_MATTER_DELIMITER,
        f"title: {name}",
        f"sidebar_label: {sidebar_label(name)}",
        FRONT_MATTER_DELIMITER,
        "",
    ]
    return "\n".join(front_matter_lines) + "\n" + body + "\n"


def build_document(candidate: Candidate, text: str, skip_lines: int = 4) -> Document:
    body = strip_leading_lines(text, skip_lines)
    return Document(
        candidate=candidate,
        filename=output_filename(candidate.name),
        content=compose_front_matter(candidate.name, body),
    )
