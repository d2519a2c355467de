import zlib

import pytest

from resume_ingest.errors import NoReadableTextError
from resume_ingest.models import RawDocument, TextItem
from resume_ingest.parsers.group_text_items_into_lines import (
    group_text_items_into_lines,
    lines_to_text,
)
from resume_ingest.parsers.read_pdf import extract_pdf_text
from resume_ingest.parsers.read_pdf_raw import (
    extract_raw_pdf_text,
    read_string_literal,
    scan_text_objects,
)


def no_page_model(content):
    return None


def broken_page_model(content):
    raise RuntimeError("page model unavailable")


# Structured extraction


def test_structured_extraction_keeps_line_order(make_pdf, settings):
    raw = RawDocument(content=make_pdf([["Jane Doe", "Senior Engineer", "Acme Corp"]]))
    extracted = extract_pdf_text(raw, settings)
    assert extracted.strategy == "pdf-structured"
    assert extracted.page_count == 1
    assert extracted.content == "Jane Doe\nSenior Engineer\nAcme Corp"


def test_page_break_is_a_single_blank_line(make_pdf, settings):
    raw = RawDocument(content=make_pdf([["First page text"], ["Second page text"]]))
    extracted = extract_pdf_text(raw, settings)
    assert extracted.page_count == 2
    assert extracted.content == "First page text\n\nSecond page text"


def test_blank_pdf_has_no_readable_text(make_pdf, settings):
    raw = RawDocument(content=make_pdf([[]]))
    with pytest.raises(NoReadableTextError):
        extract_pdf_text(raw, settings)


# Line clustering


def test_runs_on_the_same_baseline_form_one_line():
    items = [
        TextItem(text="Smith", x=120, y=700),
        TextItem(text="Jane", x=72, y=700.5),
        TextItem(text="Engineer", x=72, y=680),
    ]
    lines = group_text_items_into_lines(items)
    assert [[item.text for item in line] for line in lines] == [["Jane", "Smith"], ["Engineer"]]
    assert lines_to_text(lines) == "Jane Smith\nEngineer"


def test_y_tolerance_boundary():
    items = [
        TextItem(text="top", x=72, y=500),
        TextItem(text="near", x=110, y=498),
        TextItem(text="far", x=72, y=495.5),
    ]
    lines = group_text_items_into_lines(items, y_tolerance=2.0)
    assert lines_to_text(lines) == "top near\nfar"


def test_no_space_next_to_punctuation():
    items = [
        TextItem(text="(", x=72, y=500),
        TextItem(text="555", x=76, y=500),
        TextItem(text=")", x=95, y=500),
        TextItem(text="•", x=72, y=480),
        TextItem(text="Python", x=80, y=480),
    ]
    assert lines_to_text(group_text_items_into_lines(items)) == "(555)\n•Python"


# Raw content-stream scan


def test_raw_scan_recovers_literal():
    assert "Hello" in extract_raw_pdf_text(b"%PDF-1.4\nBT ( Hello ) Tj ET")


def test_raw_scan_skips_literals_outside_text_objects():
    data = "(Title) BT (Inside) Tj ET (Outside)"
    assert scan_text_objects(data) == ["Inside"]


def test_string_literal_escapes_and_nesting():
    text, end = read_string_literal(r"(a \(b\) (c) \101\\ line\nbreak) rest", 0)
    assert text == "a (b) (c) A\\ line break"
    assert end == len(r"(a \(b\) (c) \101\\ line\nbreak)")


def test_raw_scan_inflates_compressed_streams():
    body = zlib.compress(b"BT /F1 12 Tf (Compressed resume text) Tj ET")
    content = (
        b"%PDF-1.4\n1 0 obj\n<< /Filter /FlateDecode >>\nstream\n"
        + body
        + b"\nendstream\nendobj\n"
    )
    assert extract_raw_pdf_text(content) == "Compressed resume text"


@pytest.mark.parametrize("opener", [no_page_model, broken_page_model])
def test_falls_back_to_raw_scan_without_page_model(opener, settings):
    raw = RawDocument(content=b"%PDF-1.4\nBT ( Hello ) Tj (World Wide) Tj ET")
    extracted = extract_pdf_text(raw, settings, open_document=opener)
    assert extracted.strategy == "pdf-raw"
    assert extracted.content == "Hello World Wide"
    assert "\r" not in extracted.content


def test_fallback_below_minimum_is_no_readable_text(settings):
    raw = RawDocument(content=b"%PDF-1.4\nBT (Hi) Tj ET")
    with pytest.raises(NoReadableTextError):
        extract_pdf_text(raw, settings, open_document=no_page_model)
