"""Commit categories and the type-token synonym table."""

from enum import Enum


class Category(Enum):
    """Category of a conventional commit."""
    ARCHIVE = 'archive'
    BUILD = 'build'
    CHANGE = 'change'
    CHORE = 'chore'
    CI = 'ci'
    DEV = 'dev'
    DEPS = 'deps'
    DOCS = 'docs'
    DEPRECATE = 'deprecate'
    FEAT = 'feat'
    FIX = 'fix'
    I18N = 'i18n'
    ISSUE = 'issue'
    IMPROVEMENT = 'improvement'
    OTHER = 'other'
    PERF = 'perf'
    REFACTOR = 'refactor'
    REPO = 'repo'
    SECURITY = 'security'
    STYLE = 'style'
    TEST = 'test'


# Lower-cased type token -> category. Tokens not listed here are Category.OTHER
CATEGORY_SYNONYMS = {
    'archive': Category.ARCHIVE,
    'build': Category.BUILD,
    'breaking change': Category.CHANGE,
    'change': Category.CHANGE,
    'chore': Category.CHORE,
    'ci': Category.CI,
    'deprecate': Category.DEPRECATE,
    'deps': Category.DEPS,
    'dev': Category.DEV,
    'docs': Category.DOCS,
    'add': Category.FEAT,
    'feat': Category.FEAT,
    'feature': Category.FEAT,
    'bugfix': Category.FIX,
    'fix': Category.FIX,
    'hotfix': Category.FIX,
    'security': Category.SECURITY,
    'security fix': Category.SECURITY,
    'i18n': Category.I18N,
    'gi': Category.ISSUE,
    'issue': Category.ISSUE,
    'done': Category.ISSUE,
    'improvement': Category.IMPROVEMENT,
    'perf': Category.PERF,
    'internal': Category.REFACTOR,
    'refactor': Category.REFACTOR,
    'repo': Category.REPO,
    'style': Category.STYLE,
    'test': Category.TEST,
    'tests': Category.TEST,
}


def category_for(token: str) -> Category:
    """Resolve a type token such as 'Feat' or 'hotfix' to its category."""
    return CATEGORY_SYNONYMS.get(token.lower(), Category.OTHER)


__all__ = ["Category", "CATEGORY_SYNONYMS", "category_for"]
