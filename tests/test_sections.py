import pytest

from resume_ingest.parsers.group_lines_into_sections import classify_line, is_section_header
from resume_ingest.parsers.types import SectionHint


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Work Experience", SectionHint.EXPERIENCE),
        ("EMPLOYMENT HISTORY", SectionHint.EXPERIENCE),
        ("Education", SectionHint.EDUCATION),
        ("Qualifications", SectionHint.EDUCATION),
        ("Technical Skills", SectionHint.SKILLS),
        ("Core Competencies", SectionHint.SKILLS),
        ("Summary", SectionHint.SUMMARY),
        ("About Me", SectionHint.SUMMARY),
        # Experience keywords are checked first
        ("Professional Summary", SectionHint.EXPERIENCE),
        ("Acme Corp", SectionHint.NONE),
        ("Networking and homework", SectionHint.NONE),
        ("", SectionHint.NONE),
    ],
)
def test_classify_line(line, expected):
    assert classify_line(line) == expected


def test_long_lines_are_never_headers():
    line = "Led a small team of engineers on work for enterprise clients"
    assert len(line) > 50
    assert classify_line(line) == SectionHint.NONE
    assert classify_line(line, max_length=80) == SectionHint.EXPERIENCE


def test_header_length_limit_is_exclusive():
    header = "Work " + "x" * 45
    assert len(header) == 50
    assert classify_line(header) == SectionHint.NONE
    assert classify_line(header[:-1]) == SectionHint.EXPERIENCE


def test_same_section_keyword_is_content():
    assert not is_section_header("State University", SectionHint.EDUCATION)
    assert is_section_header("State University", SectionHint.EXPERIENCE)
    assert is_section_header("Skills", SectionHint.NONE)
    assert not is_section_header("Acme Corp", SectionHint.NONE)
