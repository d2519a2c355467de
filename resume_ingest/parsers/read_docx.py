import html
import io
import logging
import re
import zipfile
from typing import List, Optional

from docx import Document as DocxDocument
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from resume_ingest.config import Settings, get_settings
from resume_ingest.constants import DOCX_DOCUMENT_PART, STRATEGY_DOCX, STRATEGY_DOCX_MARKUP
from resume_ingest.errors import MalformedInputError, NoReadableTextError
from resume_ingest.models import ExtractedText, RawDocument
from resume_ingest.utils import clean_extracted_text

logger = logging.getLogger(__name__)

_MARKUP_TEXT_RE = re.compile(r">([^<>]+)<")
_LETTER_RE = re.compile(r"[A-Za-z]")


def _open_docx(content: bytes):
    try:
        return DocxDocument(io.BytesIO(content))
    except Exception as e:
        raise MalformedInputError(f"Not a valid DOCX package: {e}") from e


def _table_row_lines(table: Table) -> List[str]:
    lines = []
    for row in table.rows:
        row_text: List[str] = []
        for cell in row.cells:
            cell_text = " ".join(cell.text.split())
            if cell_text and cell_text not in row_text:  # Merged cells repeat
                row_text.append(cell_text)
        if row_text:
            lines.append(" | ".join(row_text))
    return lines


def extract_paragraph_lines(content: bytes) -> List[str]:
    """
    Body paragraphs and tables in document order: one line per non-empty
    paragraph, one line per table row (distinct cell texts joined with " | ").
    """
    doc = _open_docx(content)
    lines: List[str] = []
    # Resume templates often lay entries out in tables under paragraph headers
    for child in doc.element.body.iterchildren():
        if child.tag == qn("w:p"):
            text = Paragraph(child, doc).text.strip()
            if text:
                lines.append(text)
        elif child.tag == qn("w:tbl"):
            lines.extend(_table_row_lines(Table(child, doc)))
    return lines


def _read_document_markup(content: bytes) -> Optional[str]:
    """word/document.xml when the archive opens, else None."""
    try:
        with zipfile.ZipFile(io.BytesIO(content)) as zf:
            return zf.read(DOCX_DOCUMENT_PART).decode("utf-8", errors="ignore")
    except (zipfile.BadZipFile, KeyError, ValueError):
        return None


def extract_markup_fragments(markup: str) -> List[str]:
    """Text between tags, at least 3 characters long and containing a letter."""
    fragments = []
    for match in _MARKUP_TEXT_RE.finditer(markup):
        fragment = html.unescape(match.group(1)).strip()
        if len(fragment) >= 3 and _LETTER_RE.search(fragment):
            fragments.append(fragment)
    return fragments


def extract_docx_text(raw: RawDocument, settings: Optional[Settings] = None) -> ExtractedText:
    settings = settings or get_settings()

    malformed: Optional[MalformedInputError] = None
    try:
        text = clean_extracted_text("\n".join(extract_paragraph_lines(raw.content)))
        if len(text.strip()) >= settings.min_text_length:
            logger.info("Extracted %d characters from DOCX paragraphs", len(text))
            return ExtractedText(content=text, strategy=STRATEGY_DOCX)
        logger.warning("DOCX paragraphs yielded no usable text, scanning markup")
    except MalformedInputError as e:
        malformed = e
        logger.warning("%s; scanning markup instead", e)

    markup = _read_document_markup(raw.content)
    if markup is None:
        markup = raw.content.decode("utf-8", errors="ignore")
    text = clean_extracted_text(" ".join(extract_markup_fragments(markup)))
    if len(text.strip()) >= settings.min_text_length:
        logger.info("Extracted %d characters from DOCX markup", len(text))
        return ExtractedText(content=text, strategy=STRATEGY_DOCX_MARKUP)

    if malformed is not None:
        raise malformed
    raise NoReadableTextError(
        f"DOCX yielded {len(text.strip())} readable characters "
        f"(minimum {settings.min_text_length})"
    )
