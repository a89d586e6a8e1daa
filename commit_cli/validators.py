"""Input rules for the commit prompts."""

import re
from functools import lru_cache

from commit_cli import COMMIT_TYPES

DEFAULT_MAX_DESCRIPTION = 72
DESCRIPTION_RE = re.compile(r'[A-Za-z0-9 ,.!?()\-]+')
CHOICE_RE = re.compile(r'[+-]?[0-9]+')


@lru_cache(maxsize=None)
def _work_item_re(prefix: str) -> re.Pattern:
    return re.compile(rf'{re.escape(prefix.lower())}-[0-9]+(-[a-z0-9]+)*')


def normalize_work_item(raw: str) -> str:
    return raw.strip().lower()


def validate_work_item(work_item: str, prefix: str) -> bool:
    """Check `<prefix>-<digits>` with optional `-<segment>` suffixes.

    Expects already-normalized (lowercase) input; see normalize_work_item().
    """
    return _work_item_re(prefix).fullmatch(work_item) is not None


def parse_type_choice(raw: str, count: int = len(COMMIT_TYPES)) -> int | None:
    """Parse a 1-based catalog number. Returns the 0-based index or None."""
    raw = raw.strip()
    # ASCII digits only; int() alone accepts '1_0' and '٣'
    if not CHOICE_RE.fullmatch(raw):
        return None
    choice = int(raw)
    if 1 <= choice <= count:
        return choice - 1
    return None


def description_problems(desc: str, max_length: int = DEFAULT_MAX_DESCRIPTION,
                         require_capital: bool = False) -> list[str]:
    """Return the reasons a short description is rejected (empty if valid)."""
    if not desc:
        return ["description is empty"]

    problems = []
    if len(desc) > max_length:
        problems.append(f"description is {len(desc)} characters (max {max_length})")
    if not DESCRIPTION_RE.fullmatch(desc):
        bad = sorted({c for c in desc if not DESCRIPTION_RE.fullmatch(c)})
        problems.append(f"characters not allowed: {' '.join(repr(c) for c in bad)}")
    if require_capital and not ('A' <= desc[0] <= 'Z'):
        problems.append("must start with an uppercase letter")
    return problems


def validate_description(desc: str, max_length: int = DEFAULT_MAX_DESCRIPTION,
                         require_capital: bool = False) -> bool:
    return not description_problems(desc, max_length, require_capital)
