from resume_ingest.models import EducationEntry, ExperienceEntry
from resume_ingest.parsers import parse_resume_text
from resume_ingest.parsers.extract_resume_from_sections.extract_skills import split_skill_tokens
from resume_ingest.parsers.extract_resume_from_sections.main_extractor import (
    extract_resume_from_text,
    segment_lines,
)

PROFILE = """Jane Doe
San Francisco, CA
jane.doe@example.com | (555) 123-4567
linkedin.com/in/janedoe
Summary
Backend engineer with ten years of experience building APIs.
Skills
Python, Go
"""


def test_routing_example(routing_example, settings):
    record = parse_resume_text(routing_example, settings)
    assert record.experience == [
        ExperienceEntry(
            position="Senior Engineer",
            company="Acme Corp",
            description="Built distributed systems.\n",
        )
    ]
    assert record.education == [
        EducationEntry(degree="BS Computer Science", school="State University")
    ]
    assert record.skills == ["Go", "Rust", "Python"]


def test_routing_is_deterministic(routing_example, settings):
    assert parse_resume_text(routing_example, settings) == parse_resume_text(
        routing_example, settings
    )


def test_profile_block(settings):
    record = parse_resume_text(PROFILE, settings)
    personal = record.personal
    assert personal.full_name == "Jane Doe"
    assert personal.email == "jane.doe@example.com"
    assert personal.phone == "(555) 123-4567"
    assert personal.location == "San Francisco, CA"
    assert personal.linkedin == "linkedin.com/in/janedoe"
    assert personal.summary == "Backend engineer with ten years of experience building APIs."
    assert record.skills == ["Python", "Go"]


def test_name_only_from_the_first_lines(settings):
    text = "jane.doe@example.com\nEngineer\nResume\nContact\nDetails\nJane Doe\n"
    assert parse_resume_text(text, settings).personal.full_name == ""


def test_skills_are_deduplicated_and_capped(settings):
    skills = [f"tool{i}" for i in range(25)]
    text = "Skills\n" + ", ".join(skills[:10] + ["tool3"] + skills[10:])
    record = parse_resume_text(text, settings)
    assert record.skills == skills[:20]


def test_skill_tokens():
    assert split_skill_tokens("Python | Go • C, 2019, Docker-Compose") == [
        "Python",
        "Go",
        "Docker",
        "Compose",
    ]


def test_experience_dates_attach_to_the_following_entry(settings):
    text = """Experience
2019 - 2021
Senior Engineer
Acme Corp
2021 - Present
Staff Engineer
Globex
• Led the platform team
"""
    record = parse_resume_text(text, settings)
    assert [(e.position, e.company, e.start_date, e.end_date) for e in record.experience] == [
        ("Senior Engineer", "Acme Corp", "2019", "2021"),
        ("Staff Engineer", "Globex", "2021", "Present"),
    ]
    assert record.experience[1].description == "• Led the platform team\n"


def test_experience_dates_can_be_left_uncaptured(settings):
    text = "Experience\n2019 - 2021\nSenior Engineer\nAcme Corp\n"
    no_dates = settings.model_copy(update={"capture_experience_dates": False})
    entry = parse_resume_text(text, no_dates).experience[0]
    assert (entry.start_date, entry.end_date) == ("", "")


def test_bullets_never_become_position_or_company(settings):
    text = "Experience\n• Migrated services to the cloud\nSenior Engineer\nAcme Corp\n"
    entry = parse_resume_text(text, settings).experience[0]
    assert entry.position == "Senior Engineer"
    assert entry.company == "Acme Corp"
    assert entry.description == "• Migrated services to the cloud\n"


def test_education_details_attach_to_the_entry_above(settings):
    text = """Education
BS Computer Science
State University
GPA: 3.8/4.0
2016 - 2020
MS Data Science
"""
    record = parse_resume_text(text, settings)
    assert record.education == [
        EducationEntry(
            degree="BS Computer Science",
            school="State University",
            gpa="3.8/4.0",
            start_date="2016",
            end_date="2020",
        )
    ]


def test_empty_input_gives_empty_record(settings):
    record = extract_resume_from_text("", settings)
    assert record.is_empty()
    assert record.raw_text == ""
    assert segment_lines([], settings).experience == []


def test_record_serializes_with_camel_case_aliases(routing_example, settings):
    data = parse_resume_text(routing_example, settings).model_dump(by_alias=True)
    assert "rawText" in data
    assert "fullName" in data["personal"]
    assert "startDate" in data["experience"][0]


def test_degree_line_with_dates_still_names_the_degree(settings):
    text = "Education\nBS Computer Science 2016 - 2020\nState University\n"
    assert parse_resume_text(text, settings).education == [
        EducationEntry(
            degree="BS Computer Science",
            school="State University",
            start_date="2016",
            end_date="2020",
        )
    ]


def test_degree_line_with_gpa_still_names_the_degree(settings):
    text = "Education\nBS Computer Science, GPA 3.8\nState University\n"
    assert parse_resume_text(text, settings).education == [
        EducationEntry(degree="BS Computer Science", school="State University", gpa="3.8")
    ]


def test_school_line_with_dates(settings):
    text = "Education\nMBA Marketing\nState University, Sep 2018 - May 2020\n"
    entry = parse_resume_text(text, settings).education[0]
    assert (entry.degree, entry.school) == ("MBA Marketing", "State University")
    assert (entry.start_date, entry.end_date) == ("Sep 2018", "May 2020")


def test_phone_with_one_digit_country_code(settings):
    text = "Jane Doe\nCall 1-800-555-1234\n"
    assert parse_resume_text(text, settings).personal.phone == "1-800-555-1234"
