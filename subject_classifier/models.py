"""Classified Subjects

A classified subject is one of a closed set of frozen dataclasses. Every
variant answers the same read-only accessors: description, scope, icon,
kind and to_dict().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from subject_classifier.categories import Category
from subject_classifier.icons import KIND_ICONS, SUBTREE_ICONS, category_icon

BREAKING_MARKER = '!'


# ---------------------------------------------------------------------------
# Subtree operations
# ---------------------------------------------------------------------------

class SubtreeOperation(ABC):
    """Operation recorded by subtree tooling."""
    subtree: str
    git_ref: str

    @property
    @abstractmethod
    def kind(self) -> str:
        pass


@dataclass(frozen=True)
class Import(SubtreeOperation):
    subtree: str
    git_ref: str

    @property
    def kind(self) -> str:
        return 'import'


@dataclass(frozen=True)
class Split(SubtreeOperation):
    subtree: str
    git_ref: str

    @property
    def kind(self) -> str:
        return 'split'


@dataclass(frozen=True)
class Update(SubtreeOperation):
    subtree: str
    git_ref: str

    @property
    def kind(self) -> str:
        return 'update'


# ---------------------------------------------------------------------------
# Subjects
# ---------------------------------------------------------------------------

class Subject(ABC):
    """Base of every classification result."""

    @property
    @abstractmethod
    def kind(self) -> str:
        pass

    @property
    def icon(self) -> str:
        return KIND_ICONS[self.kind]

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'description': self.description,
            'scope': self.scope,
            'icon': self.icon,
        }


@dataclass(frozen=True)
class ConventionalCommit(Subject):
    """Conventional Commits subject or one of the recognized shorthands."""
    breaking_change: bool
    category: Category
    scope: Optional[str]
    description: str

    @property
    def kind(self) -> str:
        return 'conventional_commit'

    @property
    def icon(self) -> str:
        return category_icon(self.category, self.breaking_change)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['category'] = self.category.value
        data['breaking_change'] = self.breaking_change
        return data


@dataclass(frozen=True)
class PullRequest(Subject):
    id: str
    description: str

    @property
    def kind(self) -> str:
        return 'pull_request'

    @property
    def scope(self) -> Optional[str]:
        return None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['id'] = self.id
        return data


@dataclass(frozen=True)
class Release(Subject):
    version: str
    scope: Optional[str]
    description: str

    @property
    def kind(self) -> str:
        return 'release'

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['version'] = self.version
        return data


@dataclass(frozen=True)
class SubtreeCommit(Subject):
    operation: SubtreeOperation
    description: str

    @property
    def kind(self) -> str:
        return 'subtree_commit'

    @property
    def scope(self) -> Optional[str]:
        return self.operation.subtree

    @property
    def icon(self) -> str:
        return SUBTREE_ICONS[self.operation.kind]

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['operation'] = self.operation.kind
        data['git_ref'] = self.operation.git_ref
        return data


class _RawSubject(Subject):
    """Variants that only carry the original subject line."""
    raw: str

    @property
    def description(self) -> str:
        return self.raw

    @property
    def scope(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Fixup(_RawSubject):
    raw: str

    @property
    def kind(self) -> str:
        return 'fixup'


@dataclass(frozen=True)
class Remove(_RawSubject):
    raw: str

    @property
    def kind(self) -> str:
        return 'remove'


@dataclass(frozen=True)
class Rename(_RawSubject):
    raw: str

    @property
    def kind(self) -> str:
        return 'rename'


@dataclass(frozen=True)
class Revert(_RawSubject):
    raw: str

    @property
    def kind(self) -> str:
        return 'revert'


@dataclass(frozen=True)
class Simple(_RawSubject):
    """No rule matched."""
    raw: str

    @property
    def kind(self) -> str:
        return 'simple'


# Closed set of result types
VARIANTS = (
    ConventionalCommit,
    Fixup,
    PullRequest,
    Release,
    Remove,
    Rename,
    Revert,
    SubtreeCommit,
    Simple,
)

SUBTREE_OPERATIONS = (Import, Split, Update)


__all__ = [
    "Subject", "ConventionalCommit", "Fixup", "PullRequest", "Release",
    "Remove", "Rename", "Revert", "SubtreeCommit", "Simple",
    "SubtreeOperation", "Import", "Split", "Update",
    "VARIANTS", "SUBTREE_OPERATIONS", "BREAKING_MARKER",
]
