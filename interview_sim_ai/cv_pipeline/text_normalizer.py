"""Split raw CV text into the case-folded views the heuristic extractors match against."""

from typing import List, NamedTuple


class NormalizedText(NamedTuple):
    """
    full_lower: whole text, lowercased (for substring and multi-line regex matching).
    lines: every line, trimmed, original case; blank lines kept so positions line up.
    lower_lines: lowercase twin of `lines`.
    """

    full_lower: str
    lines: List[str]
    lower_lines: List[str]

    def non_blank(self) -> List[tuple]:
        """(original, lowercase) pairs for non-empty lines."""
        return [(line, low) for line, low in zip(self.lines, self.lower_lines) if line]


def normalize(raw: str) -> NormalizedText:
    """Never raises; None or empty input gives empty views."""
    if not raw:
        return NormalizedText(full_lower="", lines=[], lower_lines=[])
    lines = [line.strip() for line in raw.splitlines()]
    return NormalizedText(
        full_lower=raw.lower(),
        lines=lines,
        lower_lines=[line.lower() for line in lines],
    )
