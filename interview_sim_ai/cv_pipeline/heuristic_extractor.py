"""
Local, deterministic CV analysis: one pure extractor per profile attribute.

Every extractor is total over any input string (including empty text): no match means
an empty list or 0, never an exception. Results are de-duplicated and sorted.
"""

import re
from functools import lru_cache
from typing import List, Sequence, Tuple

from interview_sim_ai.cv_pipeline import dictionaries as d
from interview_sim_ai.cv_pipeline.text_normalizer import NormalizedText, normalize
from interview_sim_ai.schemas.extracted_profile import ExtractedProfile
from interview_sim_ai.utils.helpers import contains_any, starts_with_bullet, strip_bullet, unique_sorted
from interview_sim_ai.utils.logger import get_logger

logger = get_logger(__name__)

# "Languages: English, Spanish" / "Language - French"
_LANGUAGES_LINE = re.compile(r"^languages?\s*[:\-]\s*(.*)$", re.IGNORECASE)


@lru_cache(maxsize=32)
def _compile_all(patterns: Tuple[str, ...]) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


def _within(line: str, bounds: Tuple[int, int]) -> bool:
    low, high = bounds
    return low < len(line) < high


def _match_terms(full_lower: str, terms: Sequence[str]) -> List[str]:
    return unique_sorted(t for t in terms if t.lower() in full_lower)


def extract_technical_skills(text: NormalizedText, terms: Sequence[str] = d.TECHNICAL_SKILLS) -> List[str]:
    """Dictionary terms contained anywhere in the text, in dictionary casing."""
    return _match_terms(text.full_lower, terms)


def extract_soft_skills(text: NormalizedText, terms: Sequence[str] = d.SOFT_SKILLS) -> List[str]:
    return _match_terms(text.full_lower, terms)


def extract_work_experience(text: NormalizedText, titles: Sequence[str] = d.ROLE_TITLES) -> List[str]:
    """
    Canonical role titles found line by line. Each line contributes at most one title: the
    first one, in dictionary order, that it contains. With the default dictionary
    "Senior Software Engineer | Acme" therefore yields "Software Engineer".
    """
    lowered = [(t, t.lower()) for t in titles]
    found = []
    for low_line in text.lower_lines:
        if not low_line:
            continue
        title = next((t for t, low_t in lowered if low_t in low_line), None)
        if title is not None:
            found.append(title)
    return unique_sorted(found)


def extract_years_of_experience(
    text: NormalizedText, patterns: Sequence[str] = d.YEARS_OF_EXPERIENCE_PATTERNS
) -> int:
    """First pattern (in priority order) that matches decides; its first group is the value."""
    for regex in _compile_all(tuple(patterns)):
        m = regex.search(text.full_lower)
        if not m:
            continue
        try:
            return max(0, int(m.group(1)))
        except (IndexError, TypeError, ValueError):
            continue
    return 0


def extract_education(
    text: NormalizedText,
    patterns: Sequence[str] = d.EDUCATION_PATTERNS,
    keywords: Sequence[str] = d.EDUCATION_KEYWORDS,
) -> List[str]:
    """
    Union of two per-line strategies: an education-shaped regex match, or at least two
    distinct education keywords on the line. Lines outside the length window are skipped.
    """
    regexes = _compile_all(tuple(patterns))
    found = []
    for line, low in text.non_blank():
        if not _within(line, d.EDUCATION_LINE_LENGTH):
            continue
        if any(r.search(low) for r in regexes):
            found.append(line)
            continue
        if sum(1 for k in keywords if k in low) >= 2:
            found.append(line)
    return unique_sorted(found)


def extract_certifications(
    text: NormalizedText,
    patterns: Sequence[str] = d.CERTIFICATION_PATTERNS,
    keywords: Sequence[str] = d.CERTIFICATION_KEYWORDS,
) -> List[str]:
    """Vendor/certification-shaped lines, or lines with a certification keyword AND a 20xx year."""
    regexes = _compile_all(tuple(patterns))
    (year,) = _compile_all((d.CERTIFICATION_YEAR_PATTERN,))
    found = []
    for line, low in text.non_blank():
        if not _within(line, d.CERTIFICATION_LINE_LENGTH):
            continue
        if any(r.search(low) for r in regexes):
            found.append(line)
        elif contains_any(low, keywords) and year.search(low):
            found.append(line)
    return unique_sorted(found)


def _bullet_lines_with(text: NormalizedText, indicators: Sequence[str], max_len: int) -> List[str]:
    found = []
    for line, low in text.non_blank():
        if not starts_with_bullet(line) or not contains_any(low, indicators):
            continue
        item = strip_bullet(line).strip()
        if item and len(item) < max_len:
            found.append(item)
    return unique_sorted(found)


def extract_projects(text: NormalizedText, indicators: Sequence[str] = d.PROJECT_INDICATORS) -> List[str]:
    return _bullet_lines_with(text, indicators, d.PROJECT_MAX_LENGTH)


def extract_achievements(text: NormalizedText, verbs: Sequence[str] = d.ACHIEVEMENT_VERBS) -> List[str]:
    return _bullet_lines_with(text, verbs, d.ACHIEVEMENT_MAX_LENGTH)


def extract_languages(text: NormalizedText, languages: Sequence[str] = d.SPOKEN_LANGUAGES) -> List[str]:
    """Spoken languages from short bullet-style lines or a 'Languages: a, b' line."""
    if not languages:
        return []
    alternation = "|".join(re.escape(lang) for lang in languages)
    starts_with_language = re.compile(rf"^({alternation})\b", re.IGNORECASE)
    canonical = {lang.lower(): lang for lang in languages}
    found = []
    for line, _low in text.non_blank():
        item = strip_bullet(line).strip()
        header = _LANGUAGES_LINE.match(item)
        if header:
            candidates = re.split(r"[,;|]", header.group(1))
        elif len(item) <= d.LANGUAGE_LINE_MAX_LENGTH:
            candidates = [item]
        else:
            continue
        for candidate in candidates:
            m = starts_with_language.match(candidate.strip())
            if m:
                found.append(canonical[m.group(1).lower()])
    return unique_sorted(found)


def extract_profile_locally(raw_text: str) -> ExtractedProfile:
    """Run every heuristic extractor over the text and assemble an ExtractedProfile."""
    text = normalize(raw_text)
    profile = ExtractedProfile(
        technical_skills=extract_technical_skills(text),
        soft_skills=extract_soft_skills(text),
        work_experience=extract_work_experience(text),
        years_of_experience=extract_years_of_experience(text),
        education=extract_education(text),
        certifications=extract_certifications(text),
        projects=extract_projects(text),
        achievements=extract_achievements(text),
        languages=extract_languages(text),
    )
    logger.debug(
        "Local analysis: technical=%s soft=%s roles=%s years=%s education=%s certs=%s projects=%s achievements=%s",
        len(profile.technical_skills),
        len(profile.soft_skills),
        len(profile.work_experience),
        profile.years_of_experience,
        len(profile.education),
        len(profile.certifications),
        len(profile.projects),
        len(profile.achievements),
    )
    return profile
