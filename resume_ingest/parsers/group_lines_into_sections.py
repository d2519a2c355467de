import re
from typing import Dict, List

from resume_ingest.parsers.types import SectionHint

DEFAULT_HEADER_MAX_LENGTH = 50

# Checked in this order; the first section with a matching keyword wins.
SECTION_KEYWORDS: Dict[SectionHint, List[str]] = {
    SectionHint.EXPERIENCE: ["experience", "work", "employment", "career", "professional"],
    SectionHint.EDUCATION: [
        "education",
        "qualification",
        "degree",
        "university",
        "college",
        "school",
    ],
    SectionHint.SKILLS: ["skill", "technical", "competenc", "expertise", "proficient"],
    SectionHint.SUMMARY: ["summary", "objective", "profile", "about"],
}

# Keywords match at a word start: "Networking" is not a "work" header.
_SECTION_PATTERNS = {
    hint: re.compile(r"\b(?:" + "|".join(keywords) + ")")
    for hint, keywords in SECTION_KEYWORDS.items()
}


def classify_line(line: str, max_length: int = DEFAULT_HEADER_MAX_LENGTH) -> SectionHint:
    text_lower = line.strip().lower()
    if not text_lower or len(text_lower) >= max_length:
        return SectionHint.NONE
    for hint, pattern in _SECTION_PATTERNS.items():
        if pattern.search(text_lower):
            return hint
    return SectionHint.NONE


def is_section_header(
    line: str, current: SectionHint, max_length: int = DEFAULT_HEADER_MAX_LENGTH
) -> bool:
    """
    A header switches to a different section. A line that points at the
    section already open ("State University" under Education) is content.
    """
    hint = classify_line(line, max_length)
    return hint != SectionHint.NONE and hint != current
