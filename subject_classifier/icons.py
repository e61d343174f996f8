"""Display glyphs for classified subjects.

Most glyphs live in the Nerd Fonts private use area, so they render as
boxes without a patched font. Callers rely on the exact strings.
"""

from subject_classifier.categories import Category

BREAKING_ICON = '⚠ '

CATEGORY_ICONS = {
    Category.ARCHIVE: '\uf53b ',
    Category.BUILD: '\U0001f528',
    Category.CHANGE: '\ue370 ',
    Category.CHORE: '\U0001f6a7 ',  # construction sign
    Category.CI: '\uf085 ',
    Category.DEPRECATE: '\uf48e ',
    Category.DEV: '\U0001f6a9',
    Category.DEPS: '\uf487 ',
    Category.DOCS: '✎ ',
    Category.FEAT: '\U0001f381',  # wrapped present
    Category.FIX: '\uf188 ',
    Category.I18N: '\ufac9',
    Category.ISSUE: '\uf145 ',
    Category.IMPROVEMENT: '\ue370 ',
    Category.OTHER: '⁇ ',
    Category.PERF: '\uf9c4',
    Category.REFACTOR: '↺ ',
    Category.REPO: '\uf401 ',
    Category.SECURITY: '\uf490 ',
    Category.STYLE: '♥ ',
    Category.TEST: '\uf45e ',
}

# Keyed by Subject.kind
KIND_ICONS = {
    'fixup': '\uf0e3 ',
    'pull_request': '\uf407 ',
    'release': '\uf412 ',
    'remove': '\uf48e ',
    'rename': '\uf044 ',
    'revert': '\uf0e2 ',
    'simple': '  ',
}

# Keyed by SubtreeOperation.kind
SUBTREE_ICONS = {
    'import': '⮈ ',
    'split': '\uf403 ',
    'update': '\uf419 ',
}


def category_icon(category: Category, breaking_change: bool = False) -> str:
    """Glyph for a conventional commit. Breaking changes override the category."""
    if breaking_change:
        return BREAKING_ICON
    return CATEGORY_ICONS[category]


__all__ = [
    "BREAKING_ICON", "CATEGORY_ICONS", "KIND_ICONS", "SUBTREE_ICONS",
    "category_icon",
]
