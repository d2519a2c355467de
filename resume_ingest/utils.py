import re
import unicodedata
from typing import Iterable, List

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def clean_extracted_text(text: str) -> str:
    """
    Bring extractor output to the shared ExtractedText shape: NFKC, "\\n" as
    the only line separator, no other control characters, no trailing
    whitespace on any line.
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFKC", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", " ").replace("\u00ad", "")  # soft hyphens
    text = _CONTROL_CHARS.sub("", text)
    return "\n".join(line.rstrip() for line in text.split("\n")).strip("\n")


def dedupe(items: Iterable[str]) -> List[str]:
    """Case-sensitive dedup keeping the first occurrence."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def count_digits(text: str) -> int:
    return sum(1 for c in text if c.isdigit())
