# resume_ingest/parsers/extract_resume_from_sections/extract_education.py
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from resume_ingest.models import EducationEntry
from resume_ingest.parsers.extract_resume_from_sections.lib.common_features import (
    has_letter,
    match_date_range,
    match_gpa,
    match_single_date,
    strip_dates_and_gpa,
)

DEGREE_LENGTH = (5, 99)
SCHOOL_LENGTH = (3, 79)


@dataclass
class EducationDraft:
    degree: str = ""
    school: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""

    def add_details(
        self,
        gpa: Optional[str],
        dates: Optional[Tuple[str, str]],
        single_date: Optional[str],
    ) -> None:
        if gpa:
            self.gpa = gpa
        if dates:
            self.start_date, self.end_date = dates
        elif single_date:
            self.end_date = single_date

    def to_entry(self) -> EducationEntry:
        return EducationEntry(
            degree=self.degree,
            school=self.school,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            gpa=self.gpa,
        )


@dataclass
class EducationAccumulator:
    """
    First fitting line is the degree, the next the school; an entry closes
    as soon as both are set. Lines that are only a GPA or dates attach to
    the entry they sit next to; a line that also carries text keeps its
    details and still fills the degree or school.
    """

    closed: List[EducationDraft] = field(default_factory=list)
    current: EducationDraft = field(default_factory=EducationDraft)

    def add_line(self, line: str) -> None:
        gpa = match_gpa(line)
        dates = match_date_range(line)
        single_date = None if dates else match_single_date(line)
        has_details = bool(gpa or dates or single_date)
        text = strip_dates_and_gpa(line) if has_details else line

        current = self.current
        if has_details and not has_letter(text):
            target = self._attachment_target(
                lambda draft: bool(gpa and draft.gpa)
                or bool((dates or single_date) and (draft.start_date or draft.end_date))
            )
            target.add_details(gpa, dates, single_date)
            return
        if has_details:
            # "BS Computer Science, 2016 - 2020": details belong to the entry
            # this line fills.
            current.add_details(gpa, dates, single_date)
            line = text

        length = len(line)
        if not current.degree and DEGREE_LENGTH[0] <= length <= DEGREE_LENGTH[1]:
            current.degree = line
        elif not current.school and SCHOOL_LENGTH[0] <= length <= SCHOOL_LENGTH[1]:
            current.school = line

        if current.degree and current.school:
            self.closed.append(current)
            self.current = EducationDraft()

    def _attachment_target(self, already_set: Callable[[EducationDraft], bool]) -> EducationDraft:
        # Details usually follow the entry they describe, which has already
        # closed by the time they show up.
        if self.current.degree or not self.closed:
            return self.current
        last = self.closed[-1]
        return self.current if already_set(last) else last

    def finish(self) -> List[EducationEntry]:
        # An entry that never got both degree and school is dropped.
        return [draft.to_entry() for draft in self.closed]
