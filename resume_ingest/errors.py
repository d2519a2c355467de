from typing import Optional


class ExtractionError(ValueError):
    """Base class for every failure the ingestion pipeline reports to callers."""

    code = "extraction_error"
    user_message = "The document could not be read. Try a different file or format."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.user_message)


class UnsupportedFormatError(ExtractionError):
    code = "unsupported_format"
    user_message = (
        "This file format is not supported. Please upload a PDF, DOCX, or TXT file."
    )


class NoReadableTextError(ExtractionError):
    # Image-only PDFs land here; OCR is not attempted.
    code = "no_readable_text"
    user_message = (
        "No readable text was found in this file. "
        "Scanned documents are not supported; try a different file or format."
    )


class MalformedInputError(ExtractionError):
    code = "malformed_input"
    user_message = (
        "The file appears to be damaged or is not a valid document. "
        "Try re-saving it or uploading a different format."
    )
