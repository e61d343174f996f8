"""CLI Argument Parsing"""

import argparse
import argcomplete

from subject_classifier import CATEGORY_NAMES, KIND_NAMES, __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='subject-classifier',
        description='Classify commit subject lines',
        epilog='Example: git log --format=%s | subject-classifier'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('subjects', nargs='*', metavar='SUBJECT', help='Subject lines to classify (default: read stdin)')

    # Filtering
    parser.add_argument('-t', '--type', type=str, choices=CATEGORY_NAMES, help='Only show conventional commits of this category')
    parser.add_argument('--only', type=str, choices=KIND_NAMES, help='Only show subjects of this kind')

    # Output options
    parser.add_argument('--json', action='store_true', help='Print one JSON object per subject')
    parser.add_argument('--no-icon', action='store_true', help='Do not print glyphs')
    parser.add_argument('--no-scope', action='store_true', help='Do not print scopes')
    parser.add_argument('--strict', action='store_true', help='Exit 1 if any subject is unclassified (lint mode)')
    parser.add_argument('--verbose', action='store_true', help='Show per-subject kind and timing on stderr')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    argcomplete.autocomplete(parser)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
