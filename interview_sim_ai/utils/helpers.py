"""Small text helpers shared by the heuristic extractors and schemas."""

import re
from typing import Iterable, List

BULLET_MARKERS = ("•", "-", "*")
_LEADING_BULLET = re.compile(r"^[•\-\*]\s*")


def starts_with_bullet(line: str) -> bool:
    """True if the (already trimmed) line begins with a bullet marker."""
    return bool(line) and line.startswith(BULLET_MARKERS)


def strip_bullet(line: str) -> str:
    """Remove one leading bullet marker and the whitespace after it."""
    return _LEADING_BULLET.sub("", line, count=1)


def unique_sorted(values: Iterable[str]) -> List[str]:
    """Trim, drop blanks, de-duplicate (case-sensitive) and sort."""
    seen: set[str] = set()
    for v in values:
        if v is None:
            continue
        s = str(v).strip()
        if s:
            seen.add(s)
    return sorted(seen)


def contains_any(haystack: str, needles: Iterable[str]) -> bool:
    """Case-sensitive substring test; callers pass lowercase text and terms."""
    return any(n in haystack for n in needles)
