import re
from typing import List

from resume_ingest.utils import dedupe

SKILL_SEPARATORS_RE = re.compile(r"[,•|\-]")
SKILL_LENGTH = (2, 29)


def split_skill_tokens(line: str) -> List[str]:
    tokens = (token.strip() for token in SKILL_SEPARATORS_RE.split(line))
    return [
        token
        for token in tokens
        if SKILL_LENGTH[0] <= len(token) <= SKILL_LENGTH[1] and not token.isdigit()
    ]


def finalize_skills(skills: List[str], max_skills: int) -> List[str]:
    return dedupe(skills)[:max_skills]
