import logging
import threading
from typing import Any, Callable, List, Optional

import fitz  # PyMuPDF

from resume_ingest.config import Settings, get_settings
from resume_ingest.constants import STRATEGY_PDF_RAW, STRATEGY_PDF_STRUCTURED
from resume_ingest.errors import NoReadableTextError
from resume_ingest.models import ExtractedText, RawDocument, TextItem
from resume_ingest.parsers.group_text_items_into_lines import (
    group_text_items_into_lines,
    lines_to_text,
)
from resume_ingest.parsers.read_pdf_raw import count_raw_pages, extract_raw_pdf_text
from resume_ingest.utils import clean_extracted_text

logger = logging.getLogger(__name__)

# MuPDF is not thread-safe; every structured read goes through this lock.
_PDF_LOCK = threading.Lock()

# Returns an open document exposing pages, or None when no page model is available.
PageModelOpener = Callable[[bytes], Optional[Any]]


def open_pdf_document(content: bytes) -> Optional[Any]:
    doc = fitz.open(stream=content, filetype="pdf")
    if doc.needs_pass:
        logger.warning("PDF is password protected, no page model available")
        doc.close()
        return None
    return doc


def _read_page_text_items(page: Any, page_num: int) -> List[TextItem]:
    page_height = page.rect.height
    blocks = page.get_text(
        "dict",
        flags=fitz.TEXTFLAGS_TEXT | fitz.TEXT_PRESERVE_LIGATURES,
    )["blocks"]

    items: List[TextItem] = []
    for block in blocks:
        if block.get("type") != 0:  # Text blocks only
            continue
        for line_dict in block.get("lines", []):
            for span in line_dict.get("spans", []):
                text = span.get("text", "")
                if not text.strip():
                    continue
                x0, y0, x1, y1 = span["bbox"]
                origin_x, origin_y = span.get("origin", (x0, y1))
                font_name = span.get("font", "")
                # Drop subset prefix, e.g. "ABCDEF+Calibri"
                if "+" in font_name:
                    font_name = font_name.split("+", 1)[1]
                items.append(
                    TextItem(
                        text=text,
                        x=float(origin_x),
                        # MuPDF puts the origin at the top; flip to PDF page space.
                        y=float(page_height - origin_y),
                        width=float(x1 - x0),
                        height=float(y1 - y0),
                        font_name=font_name,
                        page=page_num,
                    )
                )
    return items


def read_pdf_pages(
    content: bytes, open_document: PageModelOpener = open_pdf_document
) -> Optional[List[List[TextItem]]]:
    """Positioned text runs per page, or None when there is no page model."""
    with _PDF_LOCK:
        doc = open_document(content)
        if doc is None:
            return None
        try:
            return [
                _read_page_text_items(doc.load_page(page_num), page_num)
                for page_num in range(len(doc))
            ]
        finally:
            doc.close()


def extract_structured_pdf_text(
    content: bytes,
    y_tolerance: float,
    open_document: PageModelOpener = open_pdf_document,
) -> Optional[ExtractedText]:
    pages = read_pdf_pages(content, open_document)
    if pages is None:
        return None
    page_texts = [
        lines_to_text(group_text_items_into_lines(items, y_tolerance)) for items in pages
    ]
    # An empty line marks each page break; none after the last page.
    text = "\n\n".join(page_texts)
    return ExtractedText(
        content=clean_extracted_text(text),
        page_count=len(pages),
        strategy=STRATEGY_PDF_STRUCTURED,
    )


def extract_pdf_text(
    raw: RawDocument,
    settings: Optional[Settings] = None,
    open_document: PageModelOpener = open_pdf_document,
) -> ExtractedText:
    """
    Structured extraction through the PyMuPDF page model first, then the
    raw content-stream scan. Raises NoReadableTextError when neither
    produces settings.min_text_length characters.
    """
    settings = settings or get_settings()

    try:
        structured = extract_structured_pdf_text(
            raw.content, settings.line_y_tolerance, open_document
        )
        if structured is None:
            logger.warning("No page model available, falling back to raw scan")
        elif len(structured.content.strip()) < settings.min_text_length:
            logger.warning("Page model yielded no usable text, falling back to raw scan")
        else:
            logger.info(
                "Extracted %d characters from %s page(s) with the page model",
                len(structured.content),
                structured.page_count,
            )
            return structured
    except Exception as e:
        logger.warning("Structured PDF extraction failed, falling back to raw scan: %s", e)

    raw_text = clean_extracted_text(extract_raw_pdf_text(raw.content))
    if len(raw_text.strip()) < settings.min_text_length:
        raise NoReadableTextError(
            f"PDF yielded {len(raw_text.strip())} readable characters "
            f"(minimum {settings.min_text_length})"
        )
    logger.info("Extracted %d characters with the raw content-stream scan", len(raw_text))
    return ExtractedText(
        content=raw_text,
        page_count=count_raw_pages(raw.content) or None,
        strategy=STRATEGY_PDF_RAW,
    )
