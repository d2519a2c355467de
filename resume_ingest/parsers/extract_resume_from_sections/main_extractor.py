import logging
from dataclasses import dataclass, field
from typing import List, Optional

from resume_ingest.config import Settings, get_settings
from resume_ingest.models import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeRecord,
)
from resume_ingest.parsers.extract_resume_from_sections.extract_education import (
    EducationAccumulator,
)
from resume_ingest.parsers.extract_resume_from_sections.extract_profile import (
    extract_contact_details,
    extract_location,
    match_name,
)
from resume_ingest.parsers.extract_resume_from_sections.extract_skills import (
    finalize_skills,
    split_skill_tokens,
)
from resume_ingest.parsers.extract_resume_from_sections.extract_work_experience import (
    WorkExperienceAccumulator,
)
from resume_ingest.parsers.group_lines_into_sections import classify_line, is_section_header
from resume_ingest.parsers.normalize_text import to_line_stream
from resume_ingest.parsers.types import LineStream, SectionHint

logger = logging.getLogger(__name__)

SUMMARY_MIN_LENGTH = 15


@dataclass
class SegmentedResume:
    full_name: str = ""
    # Lines above the first section header
    profile_lines: List[str] = field(default_factory=list)
    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)


def segment_lines(lines: LineStream, settings: Optional[Settings] = None) -> SegmentedResume:
    """
    Single pass over the line stream. Header lines switch the current
    section and are consumed; every other line goes to the accumulator of
    the section it sits in.
    """
    settings = settings or get_settings()

    state = SectionHint.NONE
    name_candidates: List[str] = []
    profile_lines: List[str] = []
    summary_parts: List[str] = []
    skills: List[str] = []
    experience = WorkExperienceAccumulator(capture_dates=settings.capture_experience_dates)
    education = EducationAccumulator()

    for index, line in enumerate(lines):
        if is_section_header(line, state, settings.header_max_length):
            state = classify_line(line, settings.header_max_length)
            continue

        if state == SectionHint.NONE:
            profile_lines.append(line)
            if index < settings.name_scan_lines:
                name_candidates.append(line)
        elif state == SectionHint.EXPERIENCE:
            experience.add_line(line)
        elif state == SectionHint.EDUCATION:
            education.add_line(line)
        elif state == SectionHint.SKILLS:
            skills.extend(split_skill_tokens(line))
        elif state == SectionHint.SUMMARY:
            if len(line) > SUMMARY_MIN_LENGTH:
                summary_parts.append(line)

    segmented = SegmentedResume(
        full_name=match_name(name_candidates),
        profile_lines=profile_lines,
        summary=" ".join(summary_parts),
        experience=experience.finish(),
        education=education.finish(),
        skills=finalize_skills(skills, settings.max_skills),
    )
    logger.debug(
        "Segmented %d line(s): %d experience, %d education, %d skill(s)",
        len(lines),
        len(segmented.experience),
        len(segmented.education),
        len(segmented.skills),
    )
    return segmented


def extract_resume_from_text(
    normalized_text: str, settings: Optional[Settings] = None
) -> ResumeRecord:
    """Never raises; text without recognisable sections gives an empty record."""
    segmented = segment_lines(to_line_stream(normalized_text), settings)
    contact = extract_contact_details(normalized_text)

    return ResumeRecord(
        personal=PersonalInfo(
            full_name=segmented.full_name,
            email=contact["email"],
            phone=contact["phone"],
            location=extract_location(segmented.profile_lines),
            summary=segmented.summary,
            linkedin=contact["linkedin"],
        ),
        experience=segmented.experience,
        education=segmented.education,
        skills=segmented.skills,
        raw_text=normalized_text,
    )
