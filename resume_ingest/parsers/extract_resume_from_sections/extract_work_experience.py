# resume_ingest/parsers/extract_resume_from_sections/extract_work_experience.py
from dataclasses import dataclass, field
from typing import List

from resume_ingest.models import ExperienceEntry
from resume_ingest.parsers.extract_resume_from_sections.lib.common_features import (
    is_bullet_line,
    is_date_range_line,
    match_date_range,
)

POSITION_LENGTH = (5, 99)
COMPANY_LENGTH = (2, 79)


@dataclass
class ExperienceDraft:
    position: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    def to_entry(self) -> ExperienceEntry:
        return ExperienceEntry(
            position=self.position,
            company=self.company,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            description=self.description,
        )


@dataclass
class WorkExperienceAccumulator:
    """
    Builds experience entries from the lines of an Experience section.

    A date-range line is an entry boundary: it closes the entry in progress
    (if it has a position) and its dates, when captured, belong to the
    entry that follows. The first fitting line becomes the position, the
    next the company, everything else the description.
    """

    capture_dates: bool = True
    entries: List[ExperienceEntry] = field(default_factory=list)
    current: ExperienceDraft = field(default_factory=ExperienceDraft)

    def add_line(self, line: str) -> None:
        if is_date_range_line(line):
            self._on_date_boundary(line)
            return

        current = self.current
        length = len(line)
        if not is_bullet_line(line):
            if not current.position and POSITION_LENGTH[0] <= length <= POSITION_LENGTH[1]:
                current.position = line
                return
            if not current.company and COMPANY_LENGTH[0] <= length <= COMPANY_LENGTH[1]:
                current.company = line
                return
        current.description += line + "\n"

    def _on_date_boundary(self, line: str) -> None:
        if self.current.position:
            self._close_current()
        if not self.capture_dates:
            return
        dates = match_date_range(line)
        if dates and not (self.current.start_date or self.current.end_date):
            self.current.start_date, self.current.end_date = dates

    def _close_current(self) -> None:
        self.entries.append(self.current.to_entry())
        self.current = ExperienceDraft()

    def finish(self) -> List[ExperienceEntry]:
        # An entry still open at the end of the document is kept.
        if self.current.position:
            self._close_current()
        return list(self.entries)
