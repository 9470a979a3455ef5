"""Text wrapping and section height estimation."""
from __future__ import annotations

from typing import Callable

from reportlab.pdfbase import pdfmetrics

from rapporto_cassette.core.models import ELLIPSIS, Section
from .style import ChecklistStyle, DEFAULT_STYLE, TABLE_COLUMNS

StringWidth = Callable[[str, str, float], float]

BLOCKED_HEADING = "ARTICOLI BLOCCATI (Quarantena/Richiamo):"


def wrap_text(
    text: str,
    max_width: float,
    font_name: str,
    font_size: float,
    *,
    safety_margin: float = 15,
    string_width: StringWidth = pdfmetrics.stringWidth,
) -> list[str]:
    """Greedily break ``text`` into lines no wider than ``max_width - safety_margin``.

    A word wider than the limit on its own is emitted as its own line.
    """

    limit = max_width - safety_margin
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if string_width(candidate, font_name, font_size) <= limit:
            current = candidate
        elif current:
            lines.append(current)
            current = word
        else:
            lines.append(word)
    if current:
        lines.append(current)
    return lines


def fit_to_width(
    text: str,
    max_width: float,
    font_name: str,
    font_size: float,
    *,
    string_width: StringWidth = pdfmetrics.stringWidth,
) -> str:
    """Shorten ``text`` with an ellipsis until its measured width is within ``max_width``."""

    if string_width(text, font_name, font_size) <= max_width:
        return text
    cut = text
    while cut and string_width(cut + ELLIPSIS, font_name, font_size) > max_width:
        cut = cut[:-1]
    return cut.rstrip() + ELLIPSIS if cut else ""


def caption_lines(section: Section, style: ChecklistStyle = DEFAULT_STYLE) -> list[str]:
    font_name, font_size = style.font("caption")
    return wrap_text(
        section.caption(),
        style.column_width,
        font_name,
        font_size,
        safety_margin=style.wrap_safety_margin,
    ) or [""]


def estimate_section_height(section: Section, style: ChecklistStyle = DEFAULT_STYLE) -> float:
    """Predict the vertical footprint of ``section``.

    Every display line (caption, table header, one label per item and the
    blocked items heading) costs its wrapped line count times the line pitch,
    on top of a fixed overhead. The result is never below what ``draw_section``
    actually uses.
    """

    font_name, font_size = style.font("body")
    height = style.title_spacing + 8
    line_count = len(caption_lines(section, style))
    lines = [" ".join(column.label for column in TABLE_COLUMNS), *section.display_lines()]
    if section.blocked_items():
        lines.append(BLOCKED_HEADING)
    for line in lines:
        wrapped = wrap_text(line, style.wrap_width, font_name, font_size, safety_margin=style.wrap_safety_margin)
        line_count += max(1, len(wrapped))
    height += line_count * style.item_spacing
    return height + style.section_spacing + 16
