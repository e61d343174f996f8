"""
Subject Classifier

Classifies commit subject lines into conventional commits, releases,
pull-request merges, subtree operations and a few lexical special cases.
"""

__version__ = "1.0.0"

from subject_classifier.categories import Category, CATEGORY_SYNONYMS, category_for
from subject_classifier.classifier import classify
from subject_classifier.models import (
    ConventionalCommit,
    Fixup,
    Import,
    PullRequest,
    Release,
    Remove,
    Rename,
    Revert,
    Simple,
    Split,
    Subject,
    SubtreeCommit,
    SubtreeOperation,
    Update,
    VARIANTS,
)

# Category names for argparse choices and colour lookup
CATEGORY_NAMES = [category.value for category in Category]

# Variant kinds, e.g. for --only filtering
KIND_NAMES = [
    'conventional_commit', 'fixup', 'pull_request', 'release',
    'remove', 'rename', 'revert', 'subtree_commit', 'simple',
]

__all__ = [
    "__version__",
    "classify",
    "Category",
    "CATEGORY_NAMES",
    "CATEGORY_SYNONYMS",
    "category_for",
    "KIND_NAMES",
    "Subject",
    "ConventionalCommit",
    "Fixup",
    "PullRequest",
    "Release",
    "Remove",
    "Rename",
    "Revert",
    "Simple",
    "SubtreeCommit",
    "SubtreeOperation",
    "Import",
    "Split",
    "Update",
    "VARIANTS",
]
