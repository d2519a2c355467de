"""
Raw PDF text recovery for when no page model is available.

Scans content streams for BT ... ET text objects and pulls the
parenthesized string literals out of them. There is no layout
information at this level, so the result is a flat, space-joined blob
that the normalizer later re-segments.
"""
import logging
import re
import zlib
from typing import List, Tuple

logger = logging.getLogger(__name__)

_STREAM_RE = re.compile(rb"(?<!end)stream\r?\n(.*?)endstream", re.S)
_PAGE_RE = re.compile(rb"/Type\s*/Page(?![A-Za-z])")
_DELIMITERS = set(" \t\r\n\f\x00()<>[]{}/%")
_ESCAPES = {"n": " ", "r": " ", "t": " ", "b": "", "f": "", "(": "(", ")": ")", "\\": "\\"}


def count_raw_pages(content: bytes) -> int:
    return len(_PAGE_RE.findall(content))


def _is_mostly_text(data: bytes) -> bool:
    if not data:
        return False
    printable = sum(1 for b in data if 32 <= b <= 126 or b in (9, 10, 13))
    return printable / len(data) > 0.9


def _content_segments(content: bytes) -> List[bytes]:
    """Stream bodies to scan, inflated when compressed."""
    bodies = _STREAM_RE.findall(content)
    if not bodies:
        # Bare operator soup without object structure; scan it as-is.
        return [content]

    segments = []
    for body in bodies:
        try:
            segments.append(zlib.decompressobj().decompress(body))
            continue
        except zlib.error:
            pass
        # Uncompressed content streams are plain operators; anything else is
        # image or font data.
        if _is_mostly_text(body):
            segments.append(body)
    return segments


def _is_token(data: str, i: int, token: str) -> bool:
    end = i + len(token)
    if data[i:end] != token:
        return False
    before_ok = i == 0 or data[i - 1] in _DELIMITERS
    after_ok = end >= len(data) or data[end] in _DELIMITERS
    return before_ok and after_ok


def read_string_literal(data: str, start: int) -> Tuple[str, int]:
    """
    Read the literal opening at data[start] == "(". Balanced parentheses
    and escaped ones stay part of the string. Only printable ASCII is kept
    and line breaks become a single space. Returns the text and the index
    just past the closing parenthesis.
    """
    out = []
    depth = 1
    i = start + 1
    n = len(data)
    while i < n:
        c = data[i]
        if c == "\\" and i + 1 < n:
            nxt = data[i + 1]
            if nxt in _ESCAPES:
                out.append(_ESCAPES[nxt])
                i += 2
            elif nxt in "01234567":
                digits = re.match(r"[0-7]{1,3}", data[i + 1 : i + 4]).group(0)
                code = int(digits, 8)
                if code in (10, 13):
                    out.append(" ")
                elif 32 <= code <= 126:
                    out.append(chr(code))
                i += 1 + len(digits)
            elif nxt in "\r\n":
                # Line continuation
                i += 3 if data[i + 1 : i + 3] == "\r\n" else 2
            else:
                out.append(nxt if 32 <= ord(nxt) <= 126 else "")
                i += 2
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return "".join(out), i + 1
        if c in "\r\n":
            out.append(" ")
            i += 2 if data[i : i + 2] == "\r\n" else 1
            continue
        if 32 <= ord(c) <= 126:
            out.append(c)
        i += 1
    return "".join(out), n


def scan_text_objects(data: str) -> List[str]:
    """String literals found inside BT ... ET text objects, in stream order."""
    literals: List[str] = []
    in_text = False
    i = 0
    n = len(data)
    while i < n:
        c = data[i]
        if c == "(":
            literal, i = read_string_literal(data, i)
            # Literals outside text objects (metadata, annotations) are skipped.
            if in_text:
                literal = " ".join(literal.split())
                if literal:
                    literals.append(literal)
            continue
        if c == "B" and _is_token(data, i, "BT"):
            in_text = True
            i += 2
            continue
        if c == "E" and in_text and _is_token(data, i, "ET"):
            in_text = False
            i += 2
            continue
        i += 1
    return literals


def extract_raw_pdf_text(content: bytes) -> str:
    literals: List[str] = []
    for segment in _content_segments(content):
        literals.extend(scan_text_objects(segment.decode("latin-1")))
    logger.debug("Raw PDF scan recovered %d string literal(s)", len(literals))
    return " ".join(literals)
