"""CLI Main Entry Point"""

import os
import sys
import time
from dataclasses import replace

from subject_classifier.classifier import classify
from subject_classifier.config import Config, VALID_FORMATS, load_config
from subject_classifier.output import dim, print_error, print_warning

from subject_classifier.cli.args import parse_args
from subject_classifier.cli.commands import display_config, run_install_completion
from subject_classifier.cli.utils import (
    format_json,
    format_subject,
    is_unclassified,
    matches_filters,
    read_subjects,
)


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    return 0, False


def _apply_overrides(args, config: Config) -> Config:
    """Resolve output settings.

    Precedence: CLI args > environment variables > config file
    """
    env_format = os.environ.get('SC_FORMAT')
    if env_format:
        if env_format in VALID_FORMATS:
            config.format = env_format
        else:
            print_warning(f"Ignoring SC_FORMAT={env_format}, expected one of: {', '.join(sorted(VALID_FORMATS))}")
    if args.json:
        config.format = 'json'
    if args.no_icon:
        config.show_icon = False
    if args.no_scope:
        config.show_scope = False
    if args.strict:
        config.strict = True
    return config


def _classify_all(args, config: Config, subjects) -> int:
    """Classify and print every subject. Returns the number of lint failures."""
    failures = 0
    for line in subjects:
        t0 = time.perf_counter()
        subject = classify(line)
        elapsed = time.perf_counter() - t0

        if config.strict and is_unclassified(subject):
            failures += 1
            print_error(f"Unclassified subject: {line}")

        if args.verbose:
            print(dim(f"  {subject.kind} ({elapsed * 1000:.3f}ms): {line}"), file=sys.stderr)

        if not matches_filters(subject, category=args.type, kind=args.only):
            continue

        if config.format == 'json':
            print(format_json(subject))
        else:
            print(format_subject(
                subject,
                show_icon=config.show_icon,
                show_scope=config.show_scope,
                max_length=config.max_description_length,
            ))
    return failures


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = _apply_overrides(args, replace(load_config()))

    if args.subjects:
        subjects = args.subjects
    elif sys.stdin.isatty():
        print_error("No subjects given. Pass them as arguments or pipe them on stdin.")
        return 2
    else:
        subjects = read_subjects(sys.stdin)

    failures = _classify_all(args, config, subjects)
    if failures:
        print_error(f"{failures} unclassified subject{'s' if failures != 1 else ''}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
