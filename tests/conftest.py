import io
import zipfile

import fitz  # PyMuPDF
import pytest
from docx import Document

from resume_ingest.config import Settings

ROUTING_EXAMPLE = """Experience
Senior Engineer
Acme Corp
Built distributed systems.
Education
BS Computer Science
State University
Skills
Go, Rust, Python
"""


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def routing_example():
    return ROUTING_EXAMPLE


@pytest.fixture
def make_pdf():
    """Build a PDF with one page per list of lines."""

    def _make_pdf(pages):
        doc = fitz.open()
        for lines in pages:
            page = doc.new_page()
            y = 72
            for line in lines:
                page.insert_text((72, y), line, fontsize=11)
                y += 18
        data = doc.tobytes()
        doc.close()
        return data

    return _make_pdf


@pytest.fixture
def make_docx():
    """A string is a paragraph, a list of rows is a table; kept in order."""

    def _make_docx(blocks):
        doc = Document()
        for block in blocks:
            if isinstance(block, str):
                doc.add_paragraph(block)
                continue
            table = doc.add_table(rows=len(block), cols=len(block[0]))
            for row, values in zip(table.rows, block):
                for cell, value in zip(row.cells, values):
                    cell.text = value
        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    return _make_docx


@pytest.fixture
def markup_only_docx():
    """A ZIP with word/document.xml but none of the other package parts."""
    markup = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        "<w:body>"
        "<w:p><w:r><w:t>Jane Doe</w:t></w:r></w:p>"
        "<w:p><w:r><w:t>Senior Engineer at Acme &amp; Co</w:t></w:r></w:p>"
        "<w:p><w:r><w:t>42</w:t></w:r></w:p>"
        "</w:body>"
        "</w:document>"
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr("word/document.xml", markup)
    return buffer.getvalue()
