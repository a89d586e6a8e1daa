"""Terminal Output Formatting Package

Colors are cosmetic: with NO_COLOR set or stdout redirected, every helper
returns its text unchanged.
"""

import re
import sys
import os


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


def _supports_color(stream=sys.stdout, environ=os.environ) -> bool:
    if environ.get('NO_COLOR'):
        return False
    if environ.get('FORCE_COLOR'):
        return True
    return hasattr(stream, 'isatty') and stream.isatty()


def _symbol(fancy: str, plain: str, stream=sys.stdout) -> str:
    """Use `fancy` only when the stream's encoding can represent it."""
    try:
        fancy.encode(getattr(stream, 'encoding', None) or 'utf-8')
    except (UnicodeEncodeError, LookupError):
        return plain
    return fancy


COLORS_ENABLED = _supports_color()

CHECK = _symbol('✓', '[OK]')
CROSS = _symbol('✗', '[X]')
RULE = _symbol('─', '-')


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


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


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_rejection(message: str) -> None:
    """Inline validation feedback; the prompt is repeated afterwards."""
    print(f"   {error(message)}")


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
}


def colorize_commit_type(message: str) -> str:
    """Color the `type(work-item):` prefix on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = re.match(r'^(\w+)(\([^)]*\))?(!?:)', lines[0])
    if match:
        color = COMMIT_TYPE_COLORS.get(match.group(1))
        if color:
            prefix = match.group(0)
            lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


__all__ = [
    "Colors", "COLORS_ENABLED",
    "CHECK", "CROSS", "RULE",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_rejection",
    "colorize_commit_type", "COMMIT_TYPE_COLORS",
]
