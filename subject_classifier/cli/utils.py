"""CLI Utility Functions"""

import json
from typing import Iterator, TextIO

from subject_classifier.categories import Category
from subject_classifier.models import ConventionalCommit, Simple, Subject
from subject_classifier.output import colorize_category, dim

ELLIPSIS = '…'


def read_subjects(stream: TextIO) -> Iterator[str]:
    """Yield one subject per non-blank line, without the line ending."""
    for line in stream:
        line = line.rstrip('\r\n')
        if line.strip():
            yield line


def truncate(text: str, max_length: int) -> str:
    """Shorten text to max_length characters. 0 disables truncation."""
    if max_length <= 0 or len(text) <= max_length:
        return text
    if max_length == 1:
        return ELLIPSIS
    return text[:max_length - 1] + ELLIPSIS


def is_unclassified(subject: Subject) -> bool:
    """True for subjects a commit linter should reject."""
    if isinstance(subject, Simple):
        return True
    return isinstance(subject, ConventionalCommit) and subject.category is Category.OTHER


def matches_filters(subject: Subject, category: str | None = None, kind: str | None = None) -> bool:
    if kind and subject.kind != kind:
        return False
    if category:
        return isinstance(subject, ConventionalCommit) and subject.category.value == category
    return True


def format_subject(subject: Subject, show_icon: bool = True, show_scope: bool = True, max_length: int = 0) -> str:
    """Render a subject as '<icon><scope> <description>' for the terminal."""
    description = truncate(subject.description, max_length)
    if isinstance(subject, ConventionalCommit):
        description = colorize_category(description, subject.category, subject.breaking_change)

    parts = []
    if show_icon:
        parts.append(subject.icon)
    if show_scope and subject.scope:
        parts.append(dim(f"({subject.scope}) "))
    parts.append(description)
    return ''.join(parts)


def format_json(subject: Subject) -> str:
    return json.dumps(subject.to_dict(), ensure_ascii=False)
