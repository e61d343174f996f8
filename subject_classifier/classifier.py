"""Subject Classifier - ordered rule cascade over a commit subject line."""

import re
from typing import Callable, Optional

from subject_classifier.categories import Category, category_for
from subject_classifier.models import (
    BREAKING_MARKER,
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
    Update,
)

# Compiled once at import, read-only afterwards
RELEASE_SCOPED_RE = re.compile(r'^(?:Release|Bump) :?(.+)@v?([0-9.]+)\b', re.IGNORECASE)
RELEASE_RE = re.compile(r'^(?:Release|Bump)\s.*?v?([0-9.]+)', re.IGNORECASE)

AZURE_PR_RE = re.compile(r'^Merged PR (\d+): (.+)')
GITHUB_PR_RE = re.compile(r"^Merge (?:remote-tracking branch '.+/pr/(\d+)'|pull request #(\d+) from .+)\Z")
BITBUCKET_PR_RE = re.compile(r'^Merge pull request #(\d+) in .+ from .+ to .+\Z')
BORS_PR_RE = re.compile(r'^Merge #(\d+)\b')
PR_PATTERNS = (GITHUB_PR_RE, BITBUCKET_PR_RE, BORS_PR_RE)

UPDATE_RE = re.compile(r'^Update :?(.+) to (.+)')
IMPORT_RE = re.compile(r'^:?(.+) Import .+⸪(.+)')
SPLIT_RE = re.compile(r"^Split '(.+)/' into commit '(.+)'")

ADD_RE = re.compile(r'^add:?\s*', re.IGNORECASE)
FIX_RE = re.compile(r'^(bug)?fix(ing|ed)?(\(.+\))?[/:\s]+', re.IGNORECASE)
CONVENTIONAL_COMMIT_RE = re.compile(
    r'^(SECURITY FIX!?|BREAKING CHANGE!?|\w+!?)(\(.+\)!?)?[/:\s]+(.+)',
    re.IGNORECASE,
)

FIXUP_PREFIX = 'fixup!'


def classify(subject: str) -> Subject:
    """Classify a commit subject line. Never raises; falls back to Simple."""
    for rule in RULES:
        result = rule(subject)
        if result is not None:
            return result
    return Simple(subject)


# ---------------------------------------------------------------------------
# Releases
# ---------------------------------------------------------------------------

def _match_scoped_release(subject: str) -> Optional[Subject]:
    match = RELEASE_SCOPED_RE.match(subject)
    if not match:
        return None
    return Release(version=match.group(2), scope=match.group(1), description=subject)


def _match_release(subject: str) -> Optional[Subject]:
    match = RELEASE_RE.match(subject)
    if not match:
        return None
    return Release(version=match.group(1), scope=None, description=subject)


# ---------------------------------------------------------------------------
# Pull requests
# ---------------------------------------------------------------------------

def _pull_request_id(match: re.Match) -> Optional[str]:
    """First populated capture group, or None."""
    return next((group for group in match.groups() if group), None)


def _match_azure_pr(subject: str) -> Optional[Subject]:
    match = AZURE_PR_RE.match(subject)
    if not match:
        return None
    pr_id, text = match.groups()
    if not pr_id:
        return Simple(subject)
    return PullRequest(id=pr_id, description=f"{text} (#{pr_id})")


def _match_pull_request(subject: str) -> Optional[Subject]:
    """GitHub, Bitbucket and bors merges; description stays verbatim."""
    for pattern in PR_PATTERNS:
        match = pattern.match(subject)
        if not match:
            continue
        pr_id = _pull_request_id(match)
        if pr_id is None:
            return Simple(subject)
        return PullRequest(id=pr_id, description=subject)
    return None


# ---------------------------------------------------------------------------
# Fixups and subtrees
# ---------------------------------------------------------------------------

def _match_fixup(subject: str) -> Optional[Subject]:
    if subject.startswith(FIXUP_PREFIX):
        return Fixup(subject)
    return None


def _subtree_rule(pattern: re.Pattern, operation: type) -> Callable[[str], Optional[Subject]]:
    def rule(subject: str) -> Optional[Subject]:
        match = pattern.match(subject)
        if not match:
            return None
        return SubtreeCommit(
            operation=operation(subtree=match.group(1), git_ref=match.group(2)),
            description=subject,
        )
    return rule


# ---------------------------------------------------------------------------
# Lexical prefixes and shorthands
# ---------------------------------------------------------------------------

LEXICAL_PREFIXES = (
    ('remove ', Remove),
    ('rename ', Rename),
    ('move ', Rename),
    ('revert ', Revert),
)


def _match_lexical(subject: str) -> Optional[Subject]:
    lowered = subject.lower()
    for prefix, variant in LEXICAL_PREFIXES:
        if lowered.startswith(prefix):
            return variant(subject)
    return None


def _shorthand(category: Category, subject: str) -> Subject:
    return ConventionalCommit(breaking_change=False, category=category, scope=None, description=subject)


def _match_add(subject: str) -> Optional[Subject]:
    if ADD_RE.match(subject):
        return _shorthand(Category.FEAT, subject)
    return None


def _match_fix(subject: str) -> Optional[Subject]:
    # An inline scope such as "fix(parser):" is deliberately not extracted here
    if FIX_RE.match(subject):
        return _shorthand(Category.FIX, subject)
    return None


def _match_deprecate(subject: str) -> Optional[Subject]:
    if subject.lower().startswith('deprecate '):
        return _shorthand(Category.DEPRECATE, subject)
    return None


# ---------------------------------------------------------------------------
# Conventional Commits grammar
# ---------------------------------------------------------------------------

def _match_conventional_commit(subject: str) -> Optional[Subject]:
    match = CONVENTIONAL_COMMIT_RE.match(subject)
    if not match:
        return None
    return parse_conventional_commit(match)


def parse_conventional_commit(match: re.Match) -> ConventionalCommit:
    """Build a ConventionalCommit from a CONVENTIONAL_COMMIT_RE match."""
    type_text, scope_text, rest = match.group(1), match.group(2) or '', match.group(3)

    breaking_change = (
        type_text.endswith(BREAKING_MARKER)
        or scope_text.endswith(BREAKING_MARKER)
        or type_text.lower() == 'breaking change'
    )
    type_text = type_text.removesuffix(BREAKING_MARKER)
    scope_text = scope_text.removesuffix(BREAKING_MARKER)

    if len(scope_text) >= 3:
        scope_text = scope_text[1:-1]

    category = category_for(type_text)
    # Unknown prefixes such as "Makefile:" stay part of the description
    description = match.group(0) if category is Category.OTHER else rest
    if breaking_change:
        description = f"{BREAKING_MARKER} {description}"

    return ConventionalCommit(
        breaking_change=breaking_change,
        category=category,
        scope=scope_text or None,
        description=description,
    )


# Priority order, highest first
RULES = (
    _match_scoped_release,
    _match_release,
    _match_azure_pr,
    _match_pull_request,
    _match_fixup,
    _subtree_rule(UPDATE_RE, Update),
    _subtree_rule(IMPORT_RE, Import),
    _subtree_rule(SPLIT_RE, Split),
    _match_lexical,
    _match_add,
    _match_fix,
    _match_deprecate,
    _match_conventional_commit,
)


__all__ = ["classify", "parse_conventional_commit", "RULES"]
