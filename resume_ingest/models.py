import mimetypes
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    PLAIN_TEXT = "plain_text"
    UNSUPPORTED = "unsupported"


class RawDocument(BaseModel):
    content: bytes
    declared_media_type: Optional[str] = None
    filename: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_path(
        cls, path: Union[str, Path], media_type: Optional[str] = None
    ) -> "RawDocument":
        path = Path(path)
        if media_type is None:
            media_type, _ = mimetypes.guess_type(path.name)
        return cls(
            content=path.read_bytes(), declared_media_type=media_type, filename=path.name
        )


class ExtractedText(BaseModel):
    content: str
    page_count: Optional[int] = None
    strategy: str = ""

    model_config = ConfigDict(frozen=True)


# For the structured PDF reader
class TextItem(BaseModel):
    text: str
    x: float
    # Baseline in page space, origin at the bottom of the page.
    y: float
    width: float = 0.0
    height: float = 0.0
    font_name: str = Field(alias="fontName", default="")
    page: int = 0

    model_config = ConfigDict(populate_by_name=True)


# The record shape matches the editing UI's JSON, hence the camelCase aliases.
class PersonalInfo(BaseModel):
    full_name: str = Field(alias="fullName", default="")
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    linkedin: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ExperienceEntry(BaseModel):
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = Field(alias="startDate", default="")
    end_date: str = Field(alias="endDate", default="")
    description: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class EducationEntry(BaseModel):
    school: str = ""
    degree: str = ""
    location: str = ""
    start_date: str = Field(alias="startDate", default="")
    end_date: str = Field(alias="endDate", default="")
    gpa: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ResumeRecord(BaseModel):
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    raw_text: str = Field(alias="rawText", default="")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def is_empty(self) -> bool:
        """True when segmentation recognised nothing worth showing for review."""
        return not (
            self.personal.full_name
            or self.personal.email
            or self.personal.phone
            or self.experience
            or self.education
            or self.skills
        )


class ResumeTextRequest(BaseModel):
    text: str
