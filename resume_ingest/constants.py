# Media types the pipeline accepts from the upload layer.
PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
PLAIN_TEXT_MEDIA_TYPE = "text/plain"

# Declared types that carry no information and fall through to sniffing.
GENERIC_MEDIA_TYPES = {
    "",
    "application/octet-stream",
    "binary/octet-stream",
    "application/zip",
    "application/x-zip-compressed",
}

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK\x03\x04"
# The PDF header may be preceded by junk; readers accept it within 1 KiB.
PDF_HEADER_SEARCH_BYTES = 1024

DOCX_DOCUMENT_PART = "word/document.xml"

BULLET = "•"

# Strategy names reported on ExtractedText.
STRATEGY_PDF_STRUCTURED = "pdf-structured"
STRATEGY_PDF_RAW = "pdf-raw"
STRATEGY_DOCX = "docx"
STRATEGY_DOCX_MARKUP = "docx-markup"
STRATEGY_PLAIN_TEXT = "plain-text"
