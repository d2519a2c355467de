# resume_ingest/parsers/extract_resume_from_sections/lib/common_features.py
import re
from typing import Iterator, Optional, Tuple

from resume_ingest.constants import BULLET
from resume_ingest.utils import count_digits

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

# Groups of 2-5 digits joined by single spaces, dots or hyphens, optionally
# with a "+CC" or one-digit "1-" prefix and a parenthesized area code. Digit
# count is checked separately so dates and zip codes are not taken for phone
# numbers.
PHONE_RE = re.compile(
    r"(?<![\w+])(?:\+\d{1,3}[ .-]?|\d[ .-])?(?:\(\d{2,5}\)|\d{2,5})(?:[ .-]?\d{2,5}){1,4}(?!\w)"
)
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

LINKEDIN_RE = re.compile(r"linkedin\.com/(?:in|pub)/[\w%-]+", re.IGNORECASE)

# City, ST [zip] | City Name, ST | City, Country
LOCATION_RES = [
    re.compile(r"\b([A-Z][a-z]+(?:\s[A-Z][a-z]+)?,\s*[A-Z]{2}(?:\s+\d{5})?)\b"),
    re.compile(r"\b([A-Z][a-z]+,\s*[A-Z][a-z]+)\b"),
]

MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
MONTH_YEAR_RE = re.compile(r"\b\d{1,2}/\d{4}\b")
_DATE_POINT = rf"(?:\b{MONTH}\s+)?(?:\d{{1,2}}/)?(?:19|20)\d{{2}}"
DATE_RANGE_RE = re.compile(
    rf"(?P<start>{_DATE_POINT})\s*(?:[-–—]|\bto\b)\s*"
    rf"(?P<end>{_DATE_POINT}|present\b|current\b|now\b|today\b)",
    re.IGNORECASE,
)
SINGLE_DATE_LINE_RE = re.compile(rf"^\s*(?P<date>{_DATE_POINT})\s*$", re.IGNORECASE)
GPA_RE = re.compile(
    r"\bGPA\b\s*[:\-]?\s*(?P<gpa>\d+(?:\.\d+)?(?:\s*/\s*\d+(?:\.\d+)?)?)", re.IGNORECASE
)

NAME_TOKEN_RE = re.compile(r"^[A-Z][A-Za-z'.\-]*$")
DIGIT_RUN_RE = re.compile(r"\d{3}")
LETTER_RE = re.compile(r"[A-Za-z]")
# Left behind once dates and GPA are cut out of a line
DETAIL_SEPARATORS = " ,;:|-–—()"


def find_phone_numbers(text: str) -> Iterator[re.Match]:
    for match in PHONE_RE.finditer(text):
        if PHONE_MIN_DIGITS <= count_digits(match.group(0)) <= PHONE_MAX_DIGITS:
            yield match


def has_year(text: str) -> bool:
    return bool(YEAR_RE.search(text))


def has_month_year(text: str) -> bool:
    return bool(MONTH_YEAR_RE.search(text))


def is_bullet_line(line: str) -> bool:
    return line.startswith(BULLET)


def is_date_range_line(line: str) -> bool:
    """A year or MM/YYYY together with a hyphen or the word "to"."""
    if not (has_year(line) or has_month_year(line)):
        return False
    return "-" in line or bool(re.search(r"\bto\b", line, re.IGNORECASE))


def match_date_range(line: str) -> Optional[Tuple[str, str]]:
    match = DATE_RANGE_RE.search(line)
    if not match:
        return None
    return match.group("start").strip(), match.group("end").strip()


def match_single_date(line: str) -> Optional[str]:
    match = SINGLE_DATE_LINE_RE.match(line)
    return match.group("date").strip() if match else None


def match_gpa(line: str) -> Optional[str]:
    match = GPA_RE.search(line)
    return re.sub(r"\s+", "", match.group("gpa")) if match else None


def has_letter(text: str) -> bool:
    return bool(LETTER_RE.search(text))


def strip_dates_and_gpa(line: str) -> str:
    """What is left of a line once its GPA and dates are cut out."""
    line = GPA_RE.sub(" ", line)
    line = DATE_RANGE_RE.sub(" ", line)
    line = SINGLE_DATE_LINE_RE.sub(" ", line)
    return " ".join(line.split()).strip(DETAIL_SEPARATORS)


def looks_like_name(line: str) -> bool:
    """
    "Capitalized Capitalized" with 2-4 tokens, no "@", no run of three
    digits, shorter than 50 characters.
    """
    if "@" in line or DIGIT_RUN_RE.search(line) or len(line) >= 50:
        return False
    tokens = line.split(" ")
    if not 2 <= len(tokens) <= 4:
        return False
    return all(NAME_TOKEN_RE.match(token) for token in tokens)
