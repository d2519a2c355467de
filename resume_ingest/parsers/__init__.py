import logging
from typing import Optional

from resume_ingest.config import Settings, get_settings
from resume_ingest.errors import UnsupportedFormatError
from resume_ingest.models import DocumentFormat, ExtractedText, RawDocument, ResumeRecord
from resume_ingest.parsers.detect_format import detect_format
from resume_ingest.parsers.extract_resume_from_sections.main_extractor import (
    extract_resume_from_text,
)
from resume_ingest.parsers.normalize_text import normalize
from resume_ingest.parsers.read_docx import extract_docx_text
from resume_ingest.parsers.read_pdf import extract_pdf_text
from resume_ingest.parsers.read_text import extract_plain_text

logger = logging.getLogger(__name__)


def extract_text(raw: RawDocument, settings: Optional[Settings] = None) -> ExtractedText:
    settings = settings or get_settings()
    document_format = detect_format(raw)
    logger.info(
        "Extracting %s (%d bytes) as %s",
        raw.filename or "document",
        len(raw.content),
        document_format.value,
    )

    if document_format == DocumentFormat.PDF:
        return extract_pdf_text(raw, settings)
    if document_format == DocumentFormat.DOCX:
        return extract_docx_text(raw, settings)
    if document_format == DocumentFormat.PLAIN_TEXT:
        return extract_plain_text(raw, settings)
    raise UnsupportedFormatError(
        f"Unsupported document (declared media type {raw.declared_media_type!r})"
    )


def parse_resume_text(text: str, settings: Optional[Settings] = None) -> ResumeRecord:
    """Normalize and segment text; also used to re-run segmentation on edited text."""
    settings = settings or get_settings()
    normalized = normalize(text, split_camel=settings.split_camel_case)
    return extract_resume_from_text(normalized, settings)


def parse_resume_document(raw: RawDocument, settings: Optional[Settings] = None) -> ResumeRecord:
    # Step 1. Bytes to text
    extracted = extract_text(raw, settings)

    # Step 2. Normalize and segment into a record
    record = parse_resume_text(extracted.content, settings)
    if record.is_empty():
        logger.info("No resume fields recognised in %s", raw.filename or "document")
    return record
