import logging
from typing import Optional

from resume_ingest.config import Settings, get_settings
from resume_ingest.constants import STRATEGY_PLAIN_TEXT
from resume_ingest.errors import NoReadableTextError, UnsupportedFormatError
from resume_ingest.models import ExtractedText, RawDocument
from resume_ingest.utils import clean_extracted_text

logger = logging.getLogger(__name__)


def extract_plain_text(raw: RawDocument, settings: Optional[Settings] = None) -> ExtractedText:
    settings = settings or get_settings()
    try:
        decoded = raw.content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnsupportedFormatError(
            f"Text file is not valid UTF-8 (ensure UTF-8 encoding): {e}"
        ) from e

    text = clean_extracted_text(decoded)
    if len(text.strip()) < settings.min_text_length:
        raise NoReadableTextError(
            f"Text file has {len(text.strip())} readable characters "
            f"(minimum {settings.min_text_length})"
        )
    logger.info("Read %d characters of plain text", len(text))
    return ExtractedText(content=text, strategy=STRATEGY_PLAIN_TEXT)
