import io
import logging
import zipfile
from pathlib import PurePath
from typing import Optional

from resume_ingest.constants import (
    DOCX_DOCUMENT_PART,
    DOCX_MEDIA_TYPE,
    GENERIC_MEDIA_TYPES,
    PDF_HEADER_SEARCH_BYTES,
    PDF_MAGIC,
    PDF_MEDIA_TYPE,
    PLAIN_TEXT_MEDIA_TYPE,
    ZIP_MAGIC,
)
from resume_ingest.models import DocumentFormat, RawDocument

logger = logging.getLogger(__name__)

KNOWN_MEDIA_TYPES = {
    PDF_MEDIA_TYPE: DocumentFormat.PDF,
    DOCX_MEDIA_TYPE: DocumentFormat.DOCX,
    PLAIN_TEXT_MEDIA_TYPE: DocumentFormat.PLAIN_TEXT,
}

EXTENSION_HINTS = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
    ".txt": DocumentFormat.PLAIN_TEXT,
}


def _base_media_type(media_type: Optional[str]) -> str:
    # "text/plain; charset=utf-8" -> "text/plain"
    if not media_type:
        return ""
    return media_type.split(";", 1)[0].strip().lower()


def is_docx_package(content: bytes) -> bool:
    try:
        with zipfile.ZipFile(io.BytesIO(content)) as zf:
            return DOCX_DOCUMENT_PART in zf.namelist()
    except (zipfile.BadZipFile, ValueError):
        return False


def looks_like_text(content: bytes) -> bool:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return False
    return not any(ord(c) < 32 and c not in "\t\n\r\f" for c in text)


def sniff_format(content: bytes) -> DocumentFormat:
    if PDF_MAGIC in content[:PDF_HEADER_SEARCH_BYTES]:
        return DocumentFormat.PDF
    if content.startswith(ZIP_MAGIC):
        if not is_docx_package(content):
            # Still a DOCX candidate; the extractor reports what is wrong with it.
            logger.info("ZIP archive without %s, treating as DOCX candidate", DOCX_DOCUMENT_PART)
        return DocumentFormat.DOCX
    if looks_like_text(content):
        return DocumentFormat.PLAIN_TEXT
    return DocumentFormat.UNSUPPORTED


def detect_format(raw: RawDocument) -> DocumentFormat:
    """
    Classify a document by its declared media type, falling back to the
    leading bytes when the declared type is missing, generic or unknown.
    Never raises; callers must handle DocumentFormat.UNSUPPORTED.
    """
    media_type = _base_media_type(raw.declared_media_type)
    if media_type in KNOWN_MEDIA_TYPES:
        return KNOWN_MEDIA_TYPES[media_type]
    if media_type not in GENERIC_MEDIA_TYPES:
        logger.info("Unrecognised media type %r, sniffing content", raw.declared_media_type)

    detected = sniff_format(raw.content)
    if detected == DocumentFormat.UNSUPPORTED and raw.filename:
        hinted = EXTENSION_HINTS.get(PurePath(raw.filename).suffix.lower())
        # A .txt name does not make binary content readable.
        if hinted in (DocumentFormat.PDF, DocumentFormat.DOCX):
            logger.info("Using extension hint for %s: %s", raw.filename, hinted.value)
            return hinted

    logger.debug(
        "Sniffed format %s (declared media type %r)", detected.value, raw.declared_media_type
    )
    return detected
