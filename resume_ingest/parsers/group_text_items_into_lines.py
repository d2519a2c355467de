from typing import List

from resume_ingest.constants import BULLET
from resume_ingest.models import TextItem
from resume_ingest.parsers.types import Line, Lines

# Kerned glyph runs next to these characters are usually one word.
NO_SPACE_CHARS = {BULLET, "-", "(", ")", ".", ","}

DEFAULT_Y_TOLERANCE = 2.0


def should_add_space_between_text(left_text: str, right_text: str) -> bool:
    if not left_text or not right_text:
        return False
    left_text_end = left_text[-1]
    right_text_start = right_text[0]
    if left_text_end.isspace() or right_text_start.isspace():
        return False
    return left_text_end not in NO_SPACE_CHARS and right_text_start not in NO_SPACE_CHARS


def group_text_items_into_lines(
    text_items: List[TextItem], y_tolerance: float = DEFAULT_Y_TOLERANCE
) -> Lines:
    """
    Cluster the positioned runs of one page into lines, top to bottom.

    Runs are sorted by descending baseline, and a run joins the current line
    when its baseline is within y_tolerance of the previous run's. Each line
    is then ordered left to right. This assumes a single-column layout.
    """
    items = [item for item in text_items if item.text.strip()]
    if not items:
        return []

    sorted_items = sorted(items, key=lambda item: (-item.y, item.x))

    lines: Lines = []
    current_line: Line = [sorted_items[0]]
    for prev_item, item in zip(sorted_items, sorted_items[1:]):
        if abs(prev_item.y - item.y) <= y_tolerance:
            current_line.append(item)
        else:
            lines.append(sorted(current_line, key=lambda i: i.x))
            current_line = [item]
    lines.append(sorted(current_line, key=lambda i: i.x))
    return lines


def join_line_text(line: Line) -> str:
    text = ""
    for item in line:
        item_text = item.text.strip()
        if not item_text:
            continue
        if should_add_space_between_text(text, item_text):
            text += " "
        text += item_text
    return text


def lines_to_text(lines: Lines) -> str:
    return "\n".join(text for text in (join_line_text(line) for line in lines) if text)
