"""
Text normalization between extraction and segmentation.

The rules run in a fixed order and later rules assume the earlier ones
ran. normalize() is idempotent: normalizing its own output is a no-op.
"""
import re
from typing import Callable, List

from resume_ingest.constants import BULLET
from resume_ingest.parsers.extract_resume_from_sections.lib.common_features import (
    EMAIL_RE,
    MONTH,
    find_phone_numbers,
)
from resume_ingest.parsers.types import LineStream

_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_CAMEL_CASE_RE = re.compile(r"([a-z])([A-Z])")

MAX_PASSES = 10

_DATE_POINT = r"(?:\d{1,2}/)?(?:19|20)\d{2}"
_DATE_RANGE_RE = re.compile(
    rf"\b({_DATE_POINT})[ ]*[-–—][ ]*({_DATE_POINT}\b|(?:present|current|now|today)\b|{MONTH}(?![a-z]))",
    re.IGNORECASE,
)


def collapse_whitespace(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [_HORIZONTAL_WS_RE.sub(" ", line).strip() for line in text.split("\n")]
    return "\n".join(lines)


def collapse_blank_lines(text: str) -> str:
    return _BLANK_RUN_RE.sub("\n\n", text)


def split_camel_case(text: str) -> str:
    # "SoftwareEngineer" -> "Software Engineer". Also hits "iPhone", "McDonald".
    return _CAMEL_CASE_RE.sub(r"\1 \2", text)


def normalize_date_ranges(text: str) -> str:
    return _DATE_RANGE_RE.sub(r"\1 - \2", text)


def isolate_bullets(text: str) -> str:
    """Every bullet starts its own line, followed by exactly one space."""
    out: List[str] = []
    for line in text.split("\n"):
        if BULLET not in line:
            out.append(line)
            continue
        head, *items = line.split(BULLET)
        if head.strip():
            out.append(head.strip())
        out.extend(f"{BULLET} {item.strip()}".rstrip() for item in items)
    return "\n".join(out)


def _isolate_matches(text: str, find_spans: Callable[[str], List[tuple]]) -> str:
    out: List[str] = []
    for line in text.split("\n"):
        spans = find_spans(line)
        if not spans:
            out.append(line)
            continue
        pos = 0
        for start, end in spans:
            before = line[pos:start].strip()
            if before:
                out.append(before)
            out.append(line[start:end])
            pos = end
        after = line[pos:].strip()
        if after:
            out.append(after)
    return "\n".join(out)


def isolate_emails(text: str) -> str:
    return _isolate_matches(text, lambda line: [m.span() for m in EMAIL_RE.finditer(line)])


def isolate_phone_numbers(text: str) -> str:
    return _isolate_matches(text, lambda line: [m.span() for m in find_phone_numbers(line)])


def _apply_rules(text: str, split_camel: bool) -> str:
    text = collapse_whitespace(text)
    text = collapse_blank_lines(text)
    if split_camel:
        text = split_camel_case(text)
    text = normalize_date_ranges(text)
    text = isolate_bullets(text)
    text = isolate_emails(text)
    text = isolate_phone_numbers(text)
    # Isolation only adds line breaks; re-strip and collapse once more.
    text = collapse_blank_lines(collapse_whitespace(text))
    return text.strip()


def normalize(text: str, split_camel: bool = True) -> str:
    # Isolating a token can expose a date range the earlier rules could not
    # see ("jane@x.com2019-2021"), so the rules repeat until nothing changes.
    for _ in range(MAX_PASSES):
        normalized = _apply_rules(text, split_camel)
        if normalized == text:
            break
        text = normalized
    return text


def to_line_stream(text: str) -> LineStream:
    return [line.strip() for line in text.split("\n") if line.strip()]
