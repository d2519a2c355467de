from enum import Enum
from typing import List

from resume_ingest.models import TextItem

Line = List[TextItem]
Lines = List[Line]

# Non-empty, trimmed lines of normalized text; only lives inside the segmenter.
LineStream = List[str]


class SectionHint(str, Enum):
    NONE = "none"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    SUMMARY = "summary"
