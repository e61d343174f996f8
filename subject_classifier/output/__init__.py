"""Terminal Output Formatting Package"""

import os
import sys

from subject_classifier.categories import Category


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    text = f"{warning('⚠')} {warning(message)}" if UNICODE_ENABLED else f"[!] {message}"
    print(text, file=sys.stderr)


CATEGORY_COLORS = {
    Category.FEAT: Colors.GREEN,
    Category.FIX: Colors.RED,
    Category.SECURITY: Colors.RED,
    Category.REFACTOR: Colors.YELLOW,
    Category.CHANGE: Colors.YELLOW,
    Category.DEPRECATE: Colors.YELLOW,
    Category.DOCS: Colors.CYAN,
    Category.TEST: Colors.MAGENTA,
    Category.PERF: Colors.GREEN,
    Category.CHORE: Colors.DIM,
    Category.STYLE: Colors.DIM,
    Category.CI: Colors.CYAN,
    Category.BUILD: Colors.CYAN,
    Category.DEPS: Colors.CYAN,
}


def colorize_category(text: str, category: Category, breaking_change: bool = False) -> str:
    """Color text by commit category. Breaking changes are always bold red."""
    if breaking_change:
        return _colorize(text, Colors.BOLD, Colors.RED)
    color = CATEGORY_COLORS.get(category)
    if not color:
        return text
    return _colorize(text, color)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CROSS",
    "error", "warning", "info", "dim", "bold",
    "print_error", "print_warning",
    "colorize_category", "CATEGORY_COLORS",
]
